"""Circular sliding window over a fixed-length sequence."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def get_wrapped(source: Sequence[T], index: int) -> T | None:
    """Read an item from a circular sequence.

    Indexes below zero read from the end of the sequence and indexes past the
    end read from the start. An empty sequence has nothing to read and yields
    None for every index.

    Args:
        source: Sequence treated as a ring.
        index: Logical (unwrapped) position to read.

    Returns:
        The item at ``index`` modulo the sequence length, or None if empty.
    """
    if not source:
        return None

    if 0 <= index < len(source):
        return source[index]

    return source[index % len(source)]


def sliding_window(source: Sequence[T], start: int, radius: int) -> list[T | None]:
    """Return the ``2 * radius + 1`` items centered on ``start``.

    Items are ordered by ascending logical position, so the window over the
    left edge of ``[1, 2, 3, 4, 5]`` at ``start=0, radius=1`` is ``[5, 1, 2]``.
    The window never shrinks: a radius that reaches around the whole ring
    yields duplicate reads.

    Args:
        source: Sequence treated as a ring. Should be non-empty, an empty
            source produces a window of Nones.
        start: Index of the center item.
        radius: Number of items on each side of the center.

    Returns:
        List of length ``2 * radius + 1``.
    """
    assert radius >= 0, f"radius must be non-negative, got {radius}"

    left = [get_wrapped(source, index) for index in range(start - radius, start)]
    center = [get_wrapped(source, start)]
    right = [get_wrapped(source, index) for index in range(start + 1, start + radius + 1)]

    return left + center + right


def window_range(start: int, radius: int, total: int) -> list[int]:
    """Sliding window over the indices ``0..total-1``."""
    return [index for index in sliding_window(range(total), start, radius) if index is not None]
