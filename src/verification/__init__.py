"""Assertion helpers for checking engine playback and modulation state."""
from .comparison import (
    DEFAULT_EPSILON,
    MismatchKind,
    SequenceMismatch,
    approx_equal,
    compare_sequences,
    format_preview,
)
from .messages import MessageCollector, format_message
from .ranges import ValueRange, almost_equal_ranges
from .settings import VerificationSettings
from .sorting import sort_all
from .voices import (
    active_notes,
    active_samples,
    active_velocities,
    get_active_voices,
    get_playing_voices,
    num_active_voices,
    num_playing_voices,
    playing_notes,
    playing_samples,
    playing_velocities,
)

__all__ = [
    "DEFAULT_EPSILON",
    "MismatchKind",
    "SequenceMismatch",
    "approx_equal",
    "compare_sequences",
    "format_preview",
    "MessageCollector",
    "format_message",
    "ValueRange",
    "almost_equal_ranges",
    "VerificationSettings",
    "sort_all",
    "active_notes",
    "active_samples",
    "active_velocities",
    "get_active_voices",
    "get_playing_voices",
    "num_active_voices",
    "num_playing_voices",
    "playing_notes",
    "playing_samples",
    "playing_velocities",
]
