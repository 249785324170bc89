"""Process-wide assertion trap and debug-message sink.

Assertions and debug messages are on whenever the interpreter runs with
``__debug__`` set (that is, without ``-O``). Optimised runs can force them
back on with the ``MODVERIFY_ENABLE_RELEASE_ASSERT`` and
``MODVERIFY_ENABLE_RELEASE_DBG`` environment variables. The state is read
once at import time; :func:`configure` re-reads it.

A failed assertion reports its location on standard error and aborts the
process. It is meant for invariant violations during development and is
unrelated to the recoverable errors raised by the routing helpers.
"""
from __future__ import annotations

import inspect
import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .settings import VerificationSettings

AbortHandler = Callable[[], Any]


@dataclass
class _DebugState:
    assertions: bool
    messages: bool
    abort: AbortHandler


def _state_from(settings: VerificationSettings) -> _DebugState:
    return _DebugState(
        assertions=__debug__ or settings.release_assert,
        messages=__debug__ or settings.release_dbg,
        abort=os.abort,
    )


_state = _state_from(VerificationSettings.from_environment())


def configure(settings: Optional[VerificationSettings] = None) -> None:
    """Re-initialise the facility from *settings* or the environment."""

    global _state
    abort = _state.abort
    _state = _state_from(settings or VerificationSettings.from_environment())
    _state.abort = abort


def assertions_enabled() -> bool:
    return _state.assertions


def messages_enabled() -> bool:
    return _state.messages


def set_abort_handler(handler: AbortHandler) -> AbortHandler:
    """Replace the abort hook, returning the previous one."""

    previous = _state.abort
    _state.abort = handler
    return previous


def _trap(depth: int) -> None:
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None or frame.f_back is None:
            break
        frame = frame.f_back
    location = "<unknown>:0" if frame is None else f"{frame.f_code.co_filename}:{frame.f_lineno}"
    print(f"Assert failed at {location}", file=sys.stderr, flush=True)
    _state.abort()


def assert_false() -> None:
    """Trap unconditionally when assertions are enabled."""

    if _state.assertions:
        _trap(depth=2)


def check(condition: Any) -> None:
    """Trap when *condition* is false and assertions are enabled."""

    if _state.assertions and not condition:
        _trap(depth=2)


def _format_part(part: Any) -> str:
    if isinstance(part, float):
        return f"{part:.2f}"
    return str(part)


def dbg(*parts: Any) -> None:
    """Write *parts* to standard error as one line when messages are enabled.

    Floats are printed with two decimals.
    """

    if _state.messages:
        print("".join(_format_part(part) for part in parts), file=sys.stderr, flush=True)


__all__ = [
    "assert_false",
    "assertions_enabled",
    "check",
    "configure",
    "dbg",
    "messages_enabled",
    "set_abort_handler",
]
