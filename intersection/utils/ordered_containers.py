from collections import abc
from bisect import bisect_left


def _sorted_unique(iterable):
    # equal elements (neither is less than the other) keep the first one seen
    res = list()
    for i in sorted(iterable):
        if not res or res[-1] < i:
            res.append(i)
    return res


class SortedSet(abc.MutableSet):
    """
    A set that iterates over its elements in ascending order.

    Elements only need to support ``<``; they do not need to be hashable.
    Membership tests are O(log n) using bisection on a sorted list.
    """
    def __init__(self, iterable=None):
        self._data = list()
        if iterable is not None:
            self._data = _sorted_unique(iterable)

    def _index(self, item):
        # an element that cannot be ordered against the contents is not a member
        try:
            ndx = bisect_left(self._data, item)
        except TypeError:
            return None
        if ndx < len(self._data) and not item < self._data[ndx]:
            return ndx
        return None

    def __contains__(self, item):
        return self._index(item) is not None

    def __iter__(self):
        return iter(self._data)

    def __reversed__(self):
        return reversed(self._data)

    def __len__(self):
        return len(self._data)

    def __getitem__(self, ndx):
        if isinstance(ndx, slice):
            res = SortedSet()
            res._data = self._data[ndx]
            return res
        return self._data[ndx]

    def add(self, value):
        ndx = bisect_left(self._data, value)
        if ndx == len(self._data) or value < self._data[ndx]:
            self._data.insert(ndx, value)

    def discard(self, value):
        ndx = self._index(value)
        if ndx is not None:
            del self._data[ndx]

    def update(self, iterable):
        for i in iterable:
            self.add(i)

    def intersection(self, *others):
        res = self
        for other in others:
            if not isinstance(other, SortedSet):
                other = SortedSet(other)
            res = res & other
        if res is self:
            res = self[:]
        return res

    def __and__(self, other):
        if not isinstance(other, SortedSet):
            if not isinstance(other, abc.Iterable):
                return NotImplemented
            other = SortedSet(other)
        a = self._data
        b = other._data
        i = 0
        j = 0
        res = SortedSet()
        common = res._data
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                i += 1
            elif b[j] < a[i]:
                j += 1
            else:
                common.append(a[i])
                i += 1
                j += 1
        return res

    __rand__ = __and__

    def __repr__(self):
        return 'SortedSet([' + ', '.join(repr(i) for i in self) + '])'

    def __str__(self):
        return '{' + ', '.join(str(i) for i in self) + '}'


class OrderedSet(abc.MutableSet):
    """
    A set that remembers the order in which elements were first added.
    """
    def __init__(self, iterable=None):
        self._data = dict()
        if iterable is not None:
            self.update(iterable)

    def __contains__(self, item):
        return item in self._data

    def __iter__(self):
        return iter(self._data)

    def __reversed__(self):
        return reversed(list(self._data))

    def __len__(self):
        return len(self._data)

    def add(self, value):
        self._data[value] = None

    def discard(self, value):
        self._data.pop(value, None)

    def update(self, iterable):
        for i in iterable:
            self.add(i)

    def intersection(self, *others):
        res = OrderedSet(self)
        for other in others:
            res = res & other
        return res

    def __and__(self, other):
        if not isinstance(other, abc.Iterable):
            return NotImplemented
        if not isinstance(other, abc.Set):
            other = set(other)
        return OrderedSet(i for i in self if i in other)

    def __rand__(self, other):
        if not isinstance(other, abc.Iterable):
            return NotImplemented
        return OrderedSet(i for i in other if i in self)

    def __repr__(self):
        return 'OrderedSet([' + ', '.join(repr(i) for i in self) + '])'

    def __str__(self):
        return '{' + ', '.join(str(i) for i in self) + '}'
