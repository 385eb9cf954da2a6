import unittest

from atmfjstc.lib.underbar.sets import iter_uniq, uniq, intersection, difference


class UniqTest(unittest.TestCase):
    def test_basic(self):
        self.assertEqual(uniq([1, 2, 2, 3, 1, 4]), [1, 2, 3, 4])

    def test_keeps_first(self):
        self.assertEqual(uniq(['b', 'a', 'b', 'c', 'a']), ['b', 'a', 'c'])

    def test_unhashable(self):
        self.assertEqual(uniq([[1], [2], [1], {'a': 1}, {'a': 1}]), [[1], [2], {'a': 1}])

    def test_tuple_containing_list(self):
        self.assertEqual(uniq([(1, [2]), (1, [2]), (3, [4])]), [(1, [2]), (3, [4])])

    def test_key(self):
        self.assertEqual(uniq(['apple', 'avocado', 'banana'], key=lambda s: s[0]), ['apple', 'banana'])

    def test_empty(self):
        self.assertEqual(uniq([]), [])

    def test_stream(self):
        self.assertEqual(list(iter_uniq(x % 3 for x in range(10))), [0, 1, 2])


class IntersectionTest(unittest.TestCase):
    def test_two(self):
        self.assertEqual(intersection(['moe', 'curly', 'larry'], ['moe', 'groucho']), ['moe'])

    def test_many(self):
        self.assertEqual(intersection([1, 2, 3, 4], [4, 3, 2], [2, 4, 9]), [2, 4])

    def test_first_order_dedup(self):
        self.assertEqual(intersection([3, 1, 3, 2], [1, 2, 3]), [3, 1, 2])

    def test_disjoint(self):
        self.assertEqual(intersection([1, 2], [3, 4]), [])

    def test_single(self):
        self.assertEqual(intersection([1, 1, 2]), [1, 2])

    def test_no_args(self):
        self.assertEqual(intersection(), [])


class DifferenceTest(unittest.TestCase):
    def test_one_other(self):
        self.assertEqual(difference([1, 2, 3], [2, 30, 40]), [1, 3])

    def test_many_others(self):
        self.assertEqual(difference([1, 2, 3, 4], [2, 30, 40], [1, 11, 111]), [3, 4])

    def test_keeps_duplicates(self):
        self.assertEqual(difference([1, 1, 2], [2]), [1, 1])

    def test_no_others(self):
        self.assertEqual(difference([1, 2]), [1, 2])

    def test_nested_elements(self):
        self.assertEqual(difference([[1], [2], 3], [[1]]), [[2], 3])


class IterUniqTest(unittest.TestCase):
    def test_error_thrown_at_yield_propagates(self):
        stream = iter_uniq([1, 2, 3])

        self.assertEqual(next(stream), 1)

        with self.assertRaises(TypeError):
            stream.throw(TypeError("from consumer"))

    def test_error_thrown_at_unhashable_yield_propagates(self):
        stream = iter_uniq([[1], [2]])

        self.assertEqual(next(stream), [1])

        with self.assertRaises(TypeError):
            stream.throw(TypeError("from consumer"))
