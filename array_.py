from numbers import Integral

import numpy as np

from errors import InvalidArgumentError, OutOfCapacityError
from logger import print_

# Largest buffer length numpy can index
MAX_CAPACITY = int(np.iinfo(np.intp).max)
# Below this capacity the buffer roughly doubles, above it grows by half
GROWTH_THRESHOLD = 64


def grow_capacity(capacity: int, min_capacity: int, max_capacity: int = MAX_CAPACITY) -> int:
    # Never below min_capacity, never above max_capacity
    if min_capacity > max_capacity:
        raise OutOfCapacityError(
            f"required capacity {min_capacity} exceeds the maximum of {max_capacity}")

    if capacity < GROWTH_THRESHOLD:
        new_capacity = (capacity + 1) * 2
    else:
        new_capacity = (capacity // 2) * 3

    if new_capacity > max_capacity:
        new_capacity = max_capacity
    if new_capacity < min_capacity:
        new_capacity = min_capacity
    return new_capacity


class Array:
    def __init__(self, size, max_size=MAX_CAPACITY):
        if isinstance(size, bool) or not isinstance(size, Integral) or size < 1:
            raise InvalidArgumentError(f"capacity must be an integer >= 1, got {size!r}")
        size = int(size)
        if size > max_size:
            raise InvalidArgumentError(f"capacity {size} exceeds the maximum of {max_size}")
        self.size = size
        self.max_size = max_size
        self.index = 0
        self.elements = self._allocate(size)

    @staticmethod
    def _allocate(size):
        try:
            elements = np.empty(size, dtype=object)
        except (MemoryError, ValueError) as err:
            raise OutOfCapacityError(f"cannot allocate storage for {size} elements") from err
        elements.fill(None)
        return elements

    def _resize(self, min_size):
        new_size = grow_capacity(self.size, min_size, self.max_size)
        elements = self._allocate(new_size)
        elements[:self.index] = self.elements[:self.index]
        print_("array_: growing storage from %i to %i", self.size, new_size)
        self.elements = elements
        self.size = new_size

    def ensure_capacity(self, min_size):
        if min_size > self.size:
            self._resize(min_size)

    def insert(self, data):
        if self.index >= self.size:
            self._resize(self.index + 1)
        self.elements[self.index] = data
        self.index += 1

    def get(self, i):
        if i < 0 or i >= self.index:
            raise IndexError(f"index {i} out of range for length {self.index}")
        return self.elements[i]

    def set(self, i, data):
        if i < 0 or i >= self.size:
            raise IndexError(f"index {i} out of range for capacity {self.size}")
        self.elements[i] = data

    def pop(self):
        if self.index == 0:
            raise IndexError("pop from empty array")
        self.index -= 1
        data = self.elements[self.index]
        self.elements[self.index] = None
        return data

    def length(self):
        return self.index

    def capacity(self):
        return self.size

    def __iter__(self):
        for i in range(self.index):
            yield self.elements[i]

    def delete_all(self):
        self.elements[:self.index] = None
        self.index = 0

    def free(self):
        self.delete_all()
