"""Recording of messages emitted by the engine's messaging callback."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence


def _format_argument(tag: str, value: Any) -> str:
    if tag in ("i", "h"):
        return str(int(value))
    if tag in ("f", "d"):
        return f"{float(value):g}"
    if tag == "s":
        return str(value)
    if tag == "b":
        return f"<blob {len(value)} bytes>"
    raise ValueError(f"Unsupported argument type tag {tag!r}")


def format_message(delay: int, path: str, signature: str, args: Sequence[Any]) -> str:
    """Return ``"<delay> <path>,<signature> : { arg, ... }"``."""

    if len(args) != len(signature):
        raise ValueError(
            f"Signature {signature!r} describes {len(signature)} arguments, got {len(args)}"
        )
    rendered = [_format_argument(tag, value) for tag, value in zip(signature, args)]
    body = "{ " + ", ".join(rendered) + " }" if rendered else "{ }"
    return f"{delay} {path},{signature} : {body}"


@dataclass
class MessageCollector:
    """Callable receiver appending every message it gets as formatted text."""

    messages: List[str] = field(default_factory=list)

    def __call__(self, delay: int, path: str, signature: str, args: Sequence[Any] = ()) -> None:
        self.messages.append(format_message(delay, path, signature, args))

    def clear(self) -> None:
        self.messages.clear()


__all__ = ["MessageCollector", "format_message"]
