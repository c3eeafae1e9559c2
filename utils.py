from numbers import Real
from typing import Callable, Optional

from errors import NotComparableError


def natural_compare(a, b) -> int:
    """Compare two elements by their own ordering operators."""
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError as err:
        raise NotComparableError(
            f"cannot compare {type(a).__name__} with {type(b).__name__}") from err
    return 0


def checked_compare(compare: Callable) -> Callable:
    """Wrap a caller-supplied comparator so that failures surface as NotComparableError."""
    def compare_(a, b) -> int:
        try:
            result = compare(a, b)
        except NotComparableError:
            raise
        except TypeError as err:
            raise NotComparableError(
                f"cannot compare {type(a).__name__} with {type(b).__name__}") from err
        if isinstance(result, bool) or not isinstance(result, Real):
            raise NotComparableError(
                f"comparator returned {type(result).__name__}, expected a number")
        return result
    return compare_


def reverse_compare(compare: Optional[Callable] = None) -> Callable:
    """Invert an ordering. With the max-heap this gives a min-heap."""
    compare = compare if compare is not None else natural_compare
    return lambda a, b: compare(b, a)


def key_compare(key: Callable) -> Callable:
    """Order elements by key(element)."""
    return lambda a, b: natural_compare(key(a), key(b))
