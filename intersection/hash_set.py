from intersection.fold import SetIntersector


intersector = SetIntersector(set_type=set)


def intersection(sets, **kwargs):
    """
    Take the intersection of the given groups using builtin sets.

    Elements must be hashable. The iteration order of the result is
    unspecified.

    Example
    -------
    >>> from intersection import hash_set
    >>> hash_set.intersection('hello,world,common'.split(','))
    {'o'}
    """
    return intersector.intersect(sets, **kwargs)
