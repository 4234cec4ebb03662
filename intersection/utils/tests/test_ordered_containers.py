import unittest
from intersection.utils.ordered_containers import SortedSet, OrderedSet


class TestSortedSet(unittest.TestCase):
    def test_sorted_and_unique(self):
        s = SortedSet([5, 3, 5, 1, 3])
        self.assertEqual(list(s), [1, 3, 5])
        self.assertEqual(len(s), 3)
        self.assertEqual(list(reversed(s)), [5, 3, 1])

    def test_contains(self):
        s = SortedSet([10, 20, 30])
        self.assertIn(20, s)
        self.assertNotIn(25, s)
        self.assertNotIn(40, s)
        self.assertNotIn(0, s)

    def test_add_and_discard(self):
        s = SortedSet()
        for i in [4, 2, 8, 2, 6]:
            s.add(i)
        self.assertEqual(list(s), [2, 4, 6, 8])
        s.discard(4)
        s.discard(5)
        self.assertEqual(list(s), [2, 6, 8])
        s.remove(2)
        with self.assertRaises(KeyError):
            s.remove(2)

    def test_indexing(self):
        s = SortedSet('dbca')
        self.assertEqual(s[0], 'a')
        self.assertEqual(s[-1], 'd')
        self.assertIsInstance(s[1:3], SortedSet)
        self.assertEqual(list(s[1:3]), ['b', 'c'])

    def test_and(self):
        a = SortedSet([1, 2, 3, 4, 5])
        b = SortedSet([4, 5, 6, 1])
        res = a & b
        self.assertIsInstance(res, SortedSet)
        self.assertEqual(list(res), [1, 4, 5])
        self.assertEqual(list(a & [5, 9, 2]), [2, 5])
        self.assertEqual(list({5, 9, 2} & a), [2, 5])

    def test_intersection(self):
        a = SortedSet(range(10))
        self.assertEqual(list(a.intersection([8, 2, 4], range(3, 9))), [4, 8])
        copy = a.intersection()
        self.assertIsNot(copy, a)
        self.assertEqual(copy, a)

    def test_equality(self):
        self.assertEqual(SortedSet([3, 1, 2]), {1, 2, 3})
        self.assertEqual(SortedSet([3, 1, 2]), SortedSet([2, 3, 1]))
        self.assertNotEqual(SortedSet([1, 2]), {1, 2, 3})

    def test_incomparable_membership(self):
        s = SortedSet([1, 2])
        self.assertNotIn('a', s)
        s.discard('a')
        self.assertEqual(list(s), [1, 2])
        self.assertNotEqual(SortedSet([1]), SortedSet(['a']))
        self.assertFalse(SortedSet([1]) <= SortedSet(['a']))

    def test_equal_elements_keep_first(self):
        a = (1.0, 'x')
        b = (1, 'x')
        s = SortedSet([a, b])
        self.assertEqual(len(s), 1)
        self.assertIs(s[0], a)

    def test_other_set_operations(self):
        a = SortedSet([1, 2, 3])
        self.assertEqual(list(a | SortedSet([0, 4])), [0, 1, 2, 3, 4])
        self.assertEqual(list(a - SortedSet([2])), [1, 3])

    def test_repr(self):
        self.assertEqual(repr(SortedSet(['b', 'a'])), "SortedSet(['a', 'b'])")
        self.assertEqual(str(SortedSet([2, 1])), '{1, 2}')


class TestOrderedSet(unittest.TestCase):
    def test_insertion_order(self):
        s = OrderedSet([3, 1, 3, 2, 1])
        self.assertEqual(list(s), [3, 1, 2])
        s.add(0)
        s.add(3)
        self.assertEqual(list(s), [3, 1, 2, 0])
        s.discard(1)
        self.assertEqual(list(s), [3, 2, 0])
        self.assertEqual(list(reversed(s)), [0, 2, 3])

    def test_and_keeps_left_order(self):
        a = OrderedSet('zyxw')
        self.assertEqual(list(a & OrderedSet('wxy')), ['y', 'x', 'w'])
        self.assertEqual(list(a & iter('wx')), ['x', 'w'])
        self.assertEqual(list(a.intersection('wxyz', 'xw')), ['x', 'w'])

    def test_rand(self):
        res = ['c', 'b', 'a'] & OrderedSet('abc')
        self.assertIsInstance(res, OrderedSet)
        self.assertEqual(list(res), ['c', 'b', 'a'])

    def test_equality(self):
        self.assertEqual(OrderedSet([1, 2]), {2, 1})

    def test_repr(self):
        self.assertEqual(repr(OrderedSet([2, 1])), 'OrderedSet([2, 1])')
        self.assertEqual(str(OrderedSet([2, 1])), '{2, 1}')

    def test_and_with_string(self):
        a = OrderedSet(['ab', 'c'])
        self.assertEqual(list(a & 'xabc'), ['c'])
        self.assertEqual(list(a.intersection('xabc')), ['c'])
        self.assertEqual(list(a & ['c', 'ab']), ['ab', 'c'])
