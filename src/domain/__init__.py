"""Domain package exposing modulation routing and voice models."""
from .modulation import (
    Connection,
    ConnectionParameters,
    ModulationSource,
    ModulationTarget,
    Region,
    SourceKind,
    TargetKind,
    default_connections,
)
from .voices import Voice, VoiceCollection, VoicePool, VoiceState

__all__ = [
    "Connection",
    "ConnectionParameters",
    "ModulationSource",
    "ModulationTarget",
    "Region",
    "SourceKind",
    "TargetKind",
    "default_connections",
    "Voice",
    "VoiceCollection",
    "VoicePool",
    "VoiceState",
]
