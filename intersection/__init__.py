import sys
if sys.version_info.major != 3 or sys.version_info.minor < 7:
    raise EnvironmentError('intersection only supports Python 3.7 and newer.')

from intersection import utils
from intersection import fold
from intersection import hash_set
from intersection import btree_set
from intersection import ordered_set
from intersection import array_set
from .fold import SetIntersector
from .utils import (
    SetKind,
    SortedSet,
    OrderedSet
)


_intersections = {SetKind.HASH: hash_set.intersection,
                  SetKind.SORTED: btree_set.intersection,
                  SetKind.INSERTION: ordered_set.intersection,
                  SetKind.ARRAY: array_set.intersection}


def intersection(sets, kind=SetKind.HASH, **kwargs):
    """
    Take the intersection of the given groups with the set type selected by kind.

    Parameters
    ----------
    sets: iterable of iterables
    kind: SetKind
    options: dict
        Passed through to the SetIntersector of the chosen kind.
    """
    try:
        func = _intersections[kind]
    except (KeyError, TypeError):
        raise ValueError('Unrecognized set kind: {0}'.format(kind))
    return func(sets, **kwargs)
