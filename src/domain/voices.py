"""Voice state as exposed by the engine for inspection."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence

from .modulation import Region


class VoiceState(str, Enum):
    FREE = "free"
    PLAYING = "playing"
    RELEASED = "released"


@dataclass
class Voice:
    """Read-only snapshot of a single playback voice.

    ``trigger_number`` and ``trigger_value`` describe the event that started
    the voice (note number and normalised velocity).
    """

    state: VoiceState = VoiceState.FREE
    trigger_number: int = 0
    trigger_value: float = 0.0
    region: Optional[Region] = None

    def is_free(self) -> bool:
        return self.state is VoiceState.FREE

    def released_or_free(self) -> bool:
        return self.state is not VoiceState.PLAYING

    @property
    def sample(self) -> Optional[str]:
        if self.region is None:
            return None
        return self.region.sample


class VoiceCollection(Protocol):
    """Contract for engines that expose their voices for inspection."""

    @property
    def num_voices(self) -> int:
        """Return the number of allocated voices, free ones included."""

    def voice_view(self, index: int) -> Voice:
        """Return the voice at *index*."""


@dataclass
class VoicePool:
    """Fixed-size voice pool satisfying :class:`VoiceCollection`."""

    voices: List[Voice] = field(default_factory=list)

    @classmethod
    def with_capacity(cls, capacity: int) -> VoicePool:
        if capacity < 0:
            raise ValueError("Voice pool capacity must be non-negative")
        return cls(voices=[Voice() for _ in range(capacity)])

    @property
    def num_voices(self) -> int:
        return len(self.voices)

    def voice_view(self, index: int) -> Voice:
        return self.voices[index]

    def start_voice(self, region: Region, note: int, velocity: float) -> Voice:
        """Trigger the first free voice, raising when the pool is exhausted."""

        for voice in self.voices:
            if voice.is_free():
                voice.state = VoiceState.PLAYING
                voice.trigger_number = note
                voice.trigger_value = velocity
                voice.region = region
                return voice
        raise RuntimeError("No free voice available")

    def release(self, note: int) -> List[Voice]:
        """Release every playing voice triggered by *note*."""

        released = [
            voice
            for voice in self.voices
            if voice.state is VoiceState.PLAYING and voice.trigger_number == note
        ]
        for voice in released:
            voice.state = VoiceState.RELEASED
        return released

    def reset(self, voices: Sequence[Voice] | None = None) -> None:
        """Return *voices* (all voices by default) to the free state."""

        for voice in voices if voices is not None else self.voices:
            voice.state = VoiceState.FREE
            voice.region = None


__all__ = ["Voice", "VoiceCollection", "VoicePool", "VoiceState"]
