from typing import Callable, Iterator, List, Optional, Tuple

from array_ import MAX_CAPACITY, Array
from errors import EmptyHeapError, NullElementError
from logger import print_
from utils import checked_compare, natural_compare

# Default initial capacity
DEFAULT_CAPACITY = 11


class Heap:
    """
    Array-backed binary max-heap.

    The element at index 0 is always a maximum under the heap's order. The
    order is either the elements' own comparison operators or a caller-supplied
    compare(a, b) returning a negative number, zero or a positive number. It is
    fixed at construction.

    Not thread-safe: callers sharing an instance must hold their own lock.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, compare: Optional[Callable] = None,
                 max_capacity: int = MAX_CAPACITY, delimiter: str = " "):
        self.storage = Array(capacity, max_size=max_capacity)
        self.delimiter = delimiter
        self._compare = natural_compare if compare is None else checked_compare(compare)

    @property
    def size(self) -> int:
        return self.storage.length()

    def length(self) -> int:
        return self.storage.length()

    def capacity(self) -> int:
        return self.storage.capacity()

    def is_empty(self) -> bool:
        return self.storage.length() == 0

    def __len__(self):
        return self.storage.length()

    def __bool__(self):
        return self.storage.length() != 0

    def insert(self, data) -> bool:
        """Adds an element. A failed comparison leaves the heap unchanged."""
        if data is None:
            raise NullElementError("cannot insert None into a heap")

        n = self.storage.length()
        self.storage.ensure_capacity(n + 1)

        k, path = self._sift_up_path(n, data)
        self.storage.insert(data)
        for child in path:
            self.storage.set(child, self.storage.get((child - 1) >> 1))
        self.storage.set(k, data)
        return True

    def remove(self):
        """Removes and returns the maximum element."""
        n = self.storage.length()
        if n == 0:
            raise EmptyHeapError("remove from an empty heap")

        top = self.storage.get(0)
        if n == 1:
            self.storage.pop()
            return top

        last = self.storage.get(n - 1)
        k, path = self._sift_down_path(0, last, n - 1)
        self.storage.pop()
        parent = 0
        for child in path:
            self.storage.set(parent, self.storage.get(child))
            parent = child
        self.storage.set(k, last)
        return top

    # Sifts only compare; the slots to shift are returned so that a failed
    # comparison leaves storage untouched.
    def _sift_up_path(self, k: int, x) -> Tuple[int, List[int]]:
        path = []
        while k > 0:
            parent = (k - 1) >> 1
            if self._compare(self.storage.get(parent), x) >= 0:
                break
            path.append(k)
            k = parent
        return k, path

    def _sift_down_path(self, k: int, x, size: int) -> Tuple[int, List[int]]:
        path = []
        half = size >> 1  # first leaf
        while k < half:
            child = (k << 1) + 1
            c = self.storage.get(child)
            right = child + 1
            if right < size and self._compare(c, self.storage.get(right)) < 0:
                child = right
                c = self.storage.get(child)
            if self._compare(x, c) >= 0:
                break
            path.append(child)
            k = child
        return k, path

    def snapshot(self) -> Iterator:
        """Occupied slots in storage order, not sorted order."""
        return iter(self.storage)

    def to_string(self, delimiter: Optional[str] = None) -> str:
        if delimiter is None:
            delimiter = self.delimiter
        return delimiter.join(str(data) for data in self.snapshot())

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Heap(size={self.storage.length()}, capacity={self.storage.capacity()})"

    def free(self):
        print_("heap_: releasing %i elements", self.storage.length())
        self.storage.free()
