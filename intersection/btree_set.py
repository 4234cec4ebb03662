from intersection.fold import SetIntersector
from intersection.utils.ordered_containers import SortedSet


intersector = SetIntersector(set_type=SortedSet)


def intersection(sets, **kwargs):
    """
    Take the intersection of the given groups using SortedSet.

    Elements only need to support ``<``. The result iterates in ascending
    order.

    Example
    -------
    >>> from intersection import btree_set
    >>> list(btree_set.intersection('harry,hairy,happy'.split(',')))
    ['a', 'h', 'y']
    """
    return intersector.intersect(sets, **kwargs)
