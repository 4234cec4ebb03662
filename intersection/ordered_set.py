from intersection.fold import SetIntersector
from intersection.utils.ordered_containers import OrderedSet


intersector = SetIntersector(set_type=OrderedSet)


def intersection(sets, **kwargs):
    """
    Take the intersection of the given groups using OrderedSet.

    The result iterates in the order its elements first appear in the first
    group (or the smallest group, when the smallest_first option is set).

    Example
    -------
    >>> from intersection import ordered_set
    >>> list(ordered_set.intersection(['yarn', 'army', 'ray']))
    ['y', 'a', 'r']
    """
    return intersector.intersect(sets, **kwargs)
