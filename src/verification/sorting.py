"""Helpers for order-insensitive assertions."""
from __future__ import annotations

from typing import Any, List


def sort_all(*sequences: List[Any]) -> None:
    """Sort each of *sequences* in place by its own natural order.

    Used before comparing voice projections whose order follows voice
    allocation rather than anything the test controls::

        notes, samples = playing_notes(pool), playing_samples(pool)
        sort_all(notes, samples)
    """

    for sequence in sequences:
        sequence.sort()


__all__ = ["sort_all"]
