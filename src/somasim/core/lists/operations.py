"""Pure helpers for in-place sequence manipulation."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TypeVar

T = TypeVar("T")


def remove_at_unordered(sequence: MutableSequence[T], index: int) -> None:
    """Remove the element at index in O(1) without preserving order.

    Overwrites the slot with the last element, then drops the last slot.
    Mutates sequence in place.

    Precondition: 0 <= index < len(sequence). No bounds check is made; an
    out-of-range index raises the sequence's own IndexError. Negative indices
    follow normal Python indexing.

    Args:
        sequence: Sequence to mutate.
        index: Position of the element to remove.
    """
    sequence[index] = sequence[-1]
    sequence.pop()
