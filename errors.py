class HeapError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class InvalidArgumentError(HeapError, ValueError):
    pass


class NullElementError(HeapError, ValueError):
    pass


class NotComparableError(HeapError, TypeError):
    pass


class EmptyHeapError(HeapError, IndexError):
    pass


class OutOfCapacityError(HeapError, MemoryError):
    pass
