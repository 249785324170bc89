"""Tolerance-based comparison of rendered numeric sequences.

:func:`approx_equal` answers whether two sequences match within an absolute
margin and, when they do not, writes a short report to standard error so a
failing assertion shows where the sequences diverged::

    2.000 != 2.500 (delta 0.500) at index 1
    Differences between sequences
    lhs: { 1.000, 2.000, 3.000 }
    rhs: { 1.000, 2.500, 3.000 }

Long sequences are previewed by their first and last eight elements.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, TextIO, Union

import numpy as np

from .settings import DEFAULT_SETTINGS, VerificationSettings

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = DEFAULT_SETTINGS.default_epsilon

NumericSequence = Union[Sequence[Any], np.ndarray]


class MismatchKind(str, Enum):
    LENGTH = "length"
    ELEMENT = "element"


@dataclass(frozen=True)
class SequenceMismatch:
    """Where and how two sequences stopped matching."""

    kind: MismatchKind
    lhs_length: int
    rhs_length: int
    index: Optional[int] = None
    lhs_value: Any = None
    rhs_value: Any = None
    delta: Any = None

    def describe(self, precision: int = DEFAULT_SETTINGS.float_precision) -> str:
        """Return the headline of the diagnostic report."""

        if self.kind is MismatchKind.LENGTH:
            return (
                f"Size mismatch: lhs has {self.lhs_length} elements, "
                f"rhs has {self.rhs_length}"
            )
        return (
            f"{format_value(self.lhs_value, precision)} != "
            f"{format_value(self.rhs_value, precision)} "
            f"(delta {format_value(self.delta, precision)}) at index {self.index}"
        )


def _as_values(values: NumericSequence) -> np.ndarray:
    array = np.atleast_1d(np.asarray(values))
    # Fixed-width integers wrap around on subtraction; Python ints do not.
    if array.dtype.kind in "iub":
        array = array.astype(object)
    return array


def _both_nan(left: Any, right: Any) -> bool:
    try:
        return bool(np.isnan(left) and np.isnan(right))
    except (TypeError, OverflowError):
        return False


def format_value(value: Any, precision: int = DEFAULT_SETTINGS.float_precision) -> str:
    """Format a single element the way diagnostic reports print it."""

    if isinstance(value, (bool, np.bool_)):
        return str(int(value))
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return f"{float(value):.{precision}f}"
    return str(value)


def format_preview(
    values: NumericSequence,
    settings: VerificationSettings = DEFAULT_SETTINGS,
) -> str:
    """Return ``{ a, b, ... }`` with long sequences elided in the middle."""

    array = _as_values(values)
    if len(array) == 0:
        return "{ }"
    items: List[str]
    if len(array) < settings.preview_threshold:
        items = [format_value(value, settings.float_precision) for value in array]
    else:
        edge = settings.preview_edge
        items = [format_value(value, settings.float_precision) for value in array[:edge]]
        items.append("...")
        items.extend(format_value(value, settings.float_precision) for value in array[-edge:])
    return "{ " + ", ".join(items) + " }"


def compare_sequences(
    lhs: NumericSequence,
    rhs: NumericSequence,
    eps: Any = DEFAULT_EPSILON,
) -> Optional[SequenceMismatch]:
    """Return the first mismatch between *lhs* and *rhs*, or ``None``.

    Sequences of different lengths are rejected without looking at their
    elements. Otherwise elements are compared left to right and the scan
    stops at the first pair further apart than *eps*. Identical values,
    including equal infinities, and NaN paired with NaN count as equal.
    Integer elements are subtracted as Python ints so extremes cannot wrap.

    Raises :class:`ValueError` when sequences of equal length are not
    one-dimensional.
    """

    lhs_values = _as_values(lhs)
    rhs_values = _as_values(rhs)
    if len(lhs_values) != len(rhs_values):
        return SequenceMismatch(
            kind=MismatchKind.LENGTH,
            lhs_length=len(lhs_values),
            rhs_length=len(rhs_values),
        )
    if lhs_values.ndim != 1 or rhs_values.ndim != 1:
        raise ValueError("Only one-dimensional sequences can be compared elementwise")

    for index in range(len(lhs_values)):
        left = lhs_values[index]
        right = rhs_values[index]
        if left == right or _both_nan(left, right):
            continue
        delta = abs(right - left)
        if not delta <= eps:
            return SequenceMismatch(
                kind=MismatchKind.ELEMENT,
                lhs_length=len(lhs_values),
                rhs_length=len(rhs_values),
                index=index,
                lhs_value=left,
                rhs_value=right,
                delta=delta,
            )
    return None


def mismatch_report(
    mismatch: SequenceMismatch,
    lhs: NumericSequence,
    rhs: NumericSequence,
    settings: VerificationSettings = DEFAULT_SETTINGS,
) -> str:
    """Return the multi-line diagnostic written by :func:`approx_equal`."""

    lines = [
        mismatch.describe(settings.float_precision),
        "Differences between sequences",
        f"lhs: {format_preview(lhs, settings)}",
        f"rhs: {format_preview(rhs, settings)}",
    ]
    return "\n".join(lines)


def approx_equal(
    lhs: NumericSequence,
    rhs: NumericSequence,
    eps: Any = DEFAULT_EPSILON,
    *,
    stream: Optional[TextIO] = None,
    settings: VerificationSettings = DEFAULT_SETTINGS,
) -> bool:
    """Return whether *lhs* and *rhs* match elementwise within *eps*.

    A mismatch of either kind is reported to *stream* (standard error by
    default) before returning ``False``.
    """

    mismatch = compare_sequences(lhs, rhs, eps)
    if mismatch is None:
        return True
    logger.debug("Sequence comparison failed: %s", mismatch)
    target = stream if stream is not None else sys.stderr
    print(mismatch_report(mismatch, lhs, rhs, settings), file=target, flush=True)
    return False


__all__ = [
    "DEFAULT_EPSILON",
    "MismatchKind",
    "SequenceMismatch",
    "approx_equal",
    "compare_sequences",
    "format_preview",
    "format_value",
    "mismatch_report",
]
