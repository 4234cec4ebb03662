from .intersection_enums import SetKind
from .ordered_containers import SortedSet, OrderedSet
