"""Split a line into two halves at a delimiter."""
from __future__ import annotations

from typing import Tuple, TypeVar

T = TypeVar("T", bytes, str)

__all__ = ["split"]


def split(line: T, delimiter: T) -> Tuple[T, T]:
    """Split ``line`` at the first ``delimiter``.

    Returns ``(left, right)`` with ``left + delimiter + right == line``. A line
    without the delimiter is returned whole as ``left`` with an empty ``right``.
    """

    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be exactly one unit, got {delimiter!r}")
    left, _, right = line.partition(delimiter)
    return left, right
