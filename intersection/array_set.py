import numpy as np
from intersection.fold import SetIntersector


def _unique(group):
    if not isinstance(group, np.ndarray):
        group = list(group)
    return np.unique(np.asarray(group).ravel())


def _intersect(a, b):
    return np.intersect1d(a, b, assume_unique=True)


def _empty():
    return np.empty(0)


intersector = SetIntersector(set_type=_unique, intersect=_intersect, empty=_empty)


def intersection(sets, **kwargs):
    """
    Take the intersection of the given groups as numpy arrays.

    Each group is flattened and deduplicated with np.unique, so the result
    is a sorted 1-D array with no repeated values. With no groups the result
    is an empty float array.

    Parameters
    ----------
    sets: iterable of array_like
    options: dict

    Returns
    -------
    np.ndarray
    """
    return intersector.intersect(sets, **kwargs)
