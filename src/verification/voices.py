"""Projections of an engine's voices used by playback assertions.

*Active* voices are every voice that is not free, released ones included.
*Playing* voices are the subset that has not been released yet. Callers must
read these while the engine is not processing audio.
"""
from __future__ import annotations

from typing import List

from domain.voices import Voice, VoiceCollection


def _voices(collection: VoiceCollection) -> List[Voice]:
    return [collection.voice_view(index) for index in range(collection.num_voices)]


def get_active_voices(collection: VoiceCollection) -> List[Voice]:
    return [voice for voice in _voices(collection) if not voice.is_free()]


def get_playing_voices(collection: VoiceCollection) -> List[Voice]:
    return [voice for voice in _voices(collection) if not voice.released_or_free()]


def num_active_voices(collection: VoiceCollection) -> int:
    return len(get_active_voices(collection))


def num_playing_voices(collection: VoiceCollection) -> int:
    return len(get_playing_voices(collection))


def _samples(voices: List[Voice]) -> List[str]:
    return [voice.sample for voice in voices if voice.sample is not None]


def active_samples(collection: VoiceCollection) -> List[str]:
    """Return the sample of each active voice; voices without one are skipped."""

    return _samples(get_active_voices(collection))


def active_velocities(collection: VoiceCollection) -> List[float]:
    return [voice.trigger_value for voice in get_active_voices(collection)]


def active_notes(collection: VoiceCollection) -> List[int]:
    return [voice.trigger_number for voice in get_active_voices(collection)]


def playing_samples(collection: VoiceCollection) -> List[str]:
    """Return the sample of each playing voice; voices without one are skipped."""

    return _samples(get_playing_voices(collection))


def playing_velocities(collection: VoiceCollection) -> List[float]:
    return [voice.trigger_value for voice in get_playing_voices(collection)]


def playing_notes(collection: VoiceCollection) -> List[int]:
    return [voice.trigger_number for voice in get_playing_voices(collection)]


__all__ = [
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
