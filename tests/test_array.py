import unittest

from array_ import GROWTH_THRESHOLD, MAX_CAPACITY, Array, grow_capacity
from errors import InvalidArgumentError, OutOfCapacityError
from heap_ import Heap


class TestGrowCapacity(unittest.TestCase):
    def test_small_buffers_roughly_double(self):
        self.assertEqual(grow_capacity(1, 2), 4)
        self.assertEqual(grow_capacity(4, 5), 10)
        self.assertEqual(grow_capacity(GROWTH_THRESHOLD - 1, GROWTH_THRESHOLD), 128)

    def test_large_buffers_grow_by_half(self):
        self.assertEqual(grow_capacity(GROWTH_THRESHOLD, GROWTH_THRESHOLD + 1), 96)
        self.assertEqual(grow_capacity(101, 102), 150)

    def test_clamps_to_max_capacity(self):
        self.assertEqual(grow_capacity(10, 11, max_capacity=15), 15)
        self.assertEqual(grow_capacity(MAX_CAPACITY - 1, MAX_CAPACITY), MAX_CAPACITY)

    def test_never_below_required_minimum(self):
        self.assertEqual(grow_capacity(4, 50), 50)

    def test_required_minimum_out_of_range(self):
        with self.assertRaises(OutOfCapacityError):
            grow_capacity(15, 16, max_capacity=15)
        with self.assertRaises(MemoryError):
            grow_capacity(MAX_CAPACITY, MAX_CAPACITY + 1)


class TestArray(unittest.TestCase):
    def test_insert_grows_and_keeps_order(self):
        array = Array(2)
        for value in range(7):
            array.insert(value)

        self.assertEqual(array.length(), 7)
        self.assertEqual(array.capacity(), 14)
        self.assertEqual(list(array), list(range(7)))

    def test_pop_vacates_slot(self):
        array = Array(3)
        array.insert("a")
        array.insert("b")

        self.assertEqual(array.pop(), "b")
        self.assertEqual(array.length(), 1)
        self.assertIsNone(array.elements[1])

    def test_get_outside_occupied_slots(self):
        array = Array(4)
        array.insert(1)
        with self.assertRaises(IndexError):
            array.get(1)

    def test_invalid_sizes(self):
        for size in (0, -3, 1.5, True):
            with self.assertRaises(InvalidArgumentError):
                Array(size)
        with self.assertRaises(InvalidArgumentError):
            Array(10, max_size=5)

    def test_delete_all(self):
        array = Array(2)
        array.insert([1, 2])
        array.insert([3])
        array.delete_all()

        self.assertEqual(array.length(), 0)
        self.assertEqual(list(array.elements), [None, None])


class TestHeapCapacityLimit(unittest.TestCase):
    def test_growth_stops_at_max_capacity(self):
        heap = Heap(2, max_capacity=3)
        for value in [1, 2, 3]:
            heap.insert(value)
        self.assertEqual(heap.capacity(), 3)

        with self.assertRaises(OutOfCapacityError):
            heap.insert(4)

        self.assertEqual(heap.length(), 3)
        self.assertEqual([heap.remove() for _ in range(3)], [3, 2, 1])

    def test_growth_is_logged(self):
        heap = Heap(1)
        with self.assertLogs("maxheap", level="DEBUG") as logs:
            heap.insert(1)
            heap.insert(2)

        self.assertIn("growing storage from 1 to 4", logs.output[0])


if __name__ == "__main__":
    unittest.main()
