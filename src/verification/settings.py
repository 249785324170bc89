"""Shared configuration for the verification helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

RELEASE_ASSERT_ENV = "MODVERIFY_ENABLE_RELEASE_ASSERT"
RELEASE_DBG_ENV = "MODVERIFY_ENABLE_RELEASE_DBG"

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class VerificationSettings:
    """Tolerances and report layout used by the comparison helpers."""

    default_epsilon: float = 1e-3
    preview_threshold: int = 16
    preview_edge: int = 8
    float_precision: int = 3
    release_assert: bool = False
    release_dbg: bool = False

    def __post_init__(self) -> None:
        if self.default_epsilon < 0.0:
            raise ValueError("default_epsilon must be non-negative")
        if self.preview_edge <= 0 or 2 * self.preview_edge > self.preview_threshold:
            raise ValueError("preview_edge must be positive and fit twice within preview_threshold")
        if self.float_precision < 0:
            raise ValueError("float_precision must be non-negative")

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> VerificationSettings:
        """Read the release overrides from *environ* (``os.environ`` by default)."""

        environ = os.environ if environ is None else environ
        return cls(
            release_assert=_flag(environ, RELEASE_ASSERT_ENV),
            release_dbg=_flag(environ, RELEASE_DBG_ENV),
        )


DEFAULT_SETTINGS = VerificationSettings()


__all__ = [
    "DEFAULT_SETTINGS",
    "RELEASE_ASSERT_ENV",
    "RELEASE_DBG_ENV",
    "VerificationSettings",
]
