"""Small helpers for working with sequences."""

from collections.abc import Hashable, Sequence
from typing import TypeVar

T = TypeVar("T")


def element_from_end(seq: Sequence[T], n: int) -> T:
    """Return the n-th element counted from the end, where 1 is the last one.

    Raises IndexError when n is not between 1 and len(seq).
    """
    if n <= 0 or n > len(seq):
        raise IndexError(f"position {n} from the end is out of range for length {len(seq)}")
    return seq[-n]


def find_all_indices(seq: Sequence[T], element: Hashable) -> list[int]:
    """Return every index at which element occurs in seq, in ascending order."""
    return [index for index, value in enumerate(seq) if value == element]