"""Approximate comparison of start/end ranges."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

import numpy as np

# Relative tolerance of a default float approximation: 100 float32 epsilons.
DEFAULT_RANGE_REL_TOL = float(np.finfo(np.float32).eps) * 100.0


class RangeLike(Protocol):
    @property
    def start(self) -> float:
        ...

    @property
    def end(self) -> float:
        ...


@dataclass(frozen=True)
class ValueRange:
    """Closed numeric range such as a key, velocity or controller span."""

    start: float
    end: float

    def contains(self, value: float) -> bool:
        return self.start <= value <= self.end


def approx(value: float, reference: float, *, rel_tol: float, abs_tol: float = 0.0) -> bool:
    """Return whether *value* lies within tolerance of *reference*.

    Unlike :func:`math.isclose` the relative tolerance scales with
    *reference* alone, and an infinite reference only matches itself.
    """

    if value == reference:
        return True
    delta = abs(value - reference)
    if delta <= abs_tol:
        return True
    scale = 0.0 if math.isinf(reference) else abs(reference)
    return delta <= rel_tol * scale


def almost_equal_ranges(
    lhs: RangeLike,
    rhs: RangeLike,
    *,
    rel_tol: float = DEFAULT_RANGE_REL_TOL,
    abs_tol: float = 0.0,
) -> bool:
    """Return whether both ends of *lhs* approximate those of *rhs*.

    *rhs* is the reference: relative tolerance is taken from its ends.
    """

    return approx(lhs.start, rhs.start, rel_tol=rel_tol, abs_tol=abs_tol) and approx(
        lhs.end, rhs.end, rel_tol=rel_tol, abs_tol=abs_tol
    )


__all__ = ["DEFAULT_RANGE_REL_TOL", "RangeLike", "ValueRange", "almost_equal_ranges", "approx"]
