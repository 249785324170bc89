"""Pydantic models describing a region's modulation routing.

A region owns an ordered list of :class:`Connection` objects, each routing a
:class:`ModulationSource` (a MIDI controller or a per-voice generator such as
an envelope or LFO) to a :class:`ModulationTarget` with its own shaping
parameters. The models mirror the engine's routing tables closely enough
that test fixtures can be written by hand and compared against the engine.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SourceKind(str, Enum):
    """Kinds of modulation sources understood by the routing tables."""

    CONTROLLER = "Controller"
    AMPLITUDE_EG = "AmplitudeEG"
    PITCH_EG = "PitchEG"
    FILTER_EG = "FilterEG"
    LFO = "LFO"
    EG = "EG"


class TargetKind(str, Enum):
    """Voice parameters that can receive modulation."""

    AMPLITUDE = "Amplitude"
    MASTER_AMPLITUDE = "MasterAmplitude"
    VOLUME = "Volume"
    PAN = "Pan"
    WIDTH = "Width"
    POSITION = "Position"
    PITCH = "Pitch"
    FILTER_CUTOFF = "FilterCutoff"
    FILTER_RESONANCE = "FilterResonance"
    FILTER_GAIN = "FilterGain"
    EQ_GAIN = "EqGain"
    EQ_FREQUENCY = "EqFrequency"
    EQ_BANDWIDTH = "EqBandwidth"
    LFO_FREQUENCY = "LFOFrequency"
    LFO_BEAT = "LFOBeat"
    EG_TIME = "EGTime"


# Sources bound to a voice need a region; the ones below also need an index.
_INDEXED_SOURCES = frozenset({SourceKind.LFO, SourceKind.EG})

_INDEXED_TARGETS = frozenset(
    {
        TargetKind.FILTER_CUTOFF,
        TargetKind.FILTER_RESONANCE,
        TargetKind.FILTER_GAIN,
        TargetKind.EQ_GAIN,
        TargetKind.EQ_FREQUENCY,
        TargetKind.EQ_BANDWIDTH,
        TargetKind.LFO_FREQUENCY,
        TargetKind.LFO_BEAT,
        TargetKind.EG_TIME,
    }
)


def _address_label(region: int, index: Optional[int]) -> str:
    if index is None:
        return f"{{{region}}}"
    return f"{{{region}, N={index + 1}}}"


def _number_label(value: float) -> str:
    return f"{value:g}"


class ModulationTarget(BaseModel):
    """Destination of a connection: a parameter kind plus its sub-address.

    Targets compare equal only when the kind, region and instance index all
    match, and they are hashable so they can key dictionaries in fixtures.
    """

    model_config = ConfigDict(frozen=True)

    kind: TargetKind
    region: int = Field(0, ge=0, description="Region the modulated voice plays")
    index: Optional[int] = Field(
        None, ge=0, description="Instance for repeated parameters (filter, EQ band, LFO)"
    )

    @model_validator(mode="after")
    def validate_index(self) -> ModulationTarget:  # type: ignore[override]
        if self.kind in _INDEXED_TARGETS and self.index is None:
            raise ValueError(f"Target {self.kind.value!r} requires an instance index")
        if self.kind not in _INDEXED_TARGETS and self.index is not None:
            raise ValueError(f"Target {self.kind.value!r} does not take an instance index")
        return self

    @property
    def label(self) -> str:
        """Return the node label used in routing graphs."""

        return f"{self.kind.value} {_address_label(self.region, self.index)}"

    def __str__(self) -> str:
        return self.label


class ModulationSource(BaseModel):
    """Origin of a connection: a controller number or a per-voice generator."""

    model_config = ConfigDict(frozen=True)

    kind: SourceKind = SourceKind.CONTROLLER
    cc: Optional[int] = Field(None, ge=0, description="Controller number for CC sources")
    region: Optional[int] = Field(None, ge=0)
    index: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def validate_address(self) -> ModulationSource:  # type: ignore[override]
        if self.kind is SourceKind.CONTROLLER:
            if self.cc is None:
                raise ValueError("Controller sources require a CC number")
            if self.region is not None or self.index is not None:
                raise ValueError("Controller sources are not bound to a region")
            return self
        if self.cc is not None:
            raise ValueError(f"Source {self.kind.value!r} does not take a CC number")
        if self.region is None:
            raise ValueError(f"Source {self.kind.value!r} requires a region")
        if self.kind in _INDEXED_SOURCES and self.index is None:
            raise ValueError(f"Source {self.kind.value!r} requires an instance index")
        if self.kind not in _INDEXED_SOURCES and self.index is not None:
            raise ValueError(f"Source {self.kind.value!r} does not take an instance index")
        return self

    @classmethod
    def controller(cls, cc: int) -> ModulationSource:
        return cls(kind=SourceKind.CONTROLLER, cc=cc)

    @property
    def is_controller(self) -> bool:
        return self.kind is SourceKind.CONTROLLER


class ConnectionParameters(BaseModel):
    """Shaping parameters of a connection, as returned by routing lookups."""

    model_config = ConfigDict(frozen=True)

    curve: int = Field(0, ge=0, description="Curve index applied to the source value")
    smooth: float = Field(0.0, ge=0.0, description="Smoothing time in milliseconds")
    step: float = Field(0.0, ge=0.0, description="Quantization step, 0 disables stepping")
    depth: float = Field(0.0, description="Signed modulation depth")


class Connection(BaseModel):
    """A single source → target routing entry of a region."""

    model_config = ConfigDict(frozen=True)

    source: ModulationSource
    target: ModulationTarget
    curve: int = Field(0, ge=0)
    smooth: float = Field(0.0, ge=0.0)
    step: float = Field(0.0, ge=0.0)
    depth: float = 0.0

    @property
    def parameters(self) -> ConnectionParameters:
        return ConnectionParameters(
            curve=self.curve, smooth=self.smooth, step=self.step, depth=self.depth
        )

    @property
    def source_label(self) -> str:
        """Return the graph label of the source, including controller shaping."""

        source = self.source
        if source.is_controller:
            return (
                f"Controller {source.cc} "
                f"{{curve={self.curve}, smooth={_number_label(self.smooth)}, "
                f"step={_number_label(self.step)}}}"
            )
        assert source.region is not None  # enforced by ModulationSource
        return f"{source.kind.value} {_address_label(source.region, source.index)}"

    def to_dot_line(self) -> str:
        """Return the quoted ``"source" -> "target"`` edge for routing graphs."""

        return f'"{self.source_label}" -> "{self.target.label}"'


def default_connections(region: int) -> List[Connection]:
    """Return the routing every region receives before its own declarations.

    Volume (CC7) and expression (CC11) drive the amplitude, pan (CC10) drives
    the pan position and the amplitude envelope feeds the master amplitude.
    """

    amplitude = ModulationTarget(kind=TargetKind.AMPLITUDE, region=region)
    return [
        Connection(
            source=ModulationSource.controller(7),
            target=amplitude,
            curve=4,
            smooth=10.0,
            depth=100.0,
        ),
        Connection(
            source=ModulationSource.controller(10),
            target=ModulationTarget(kind=TargetKind.PAN, region=region),
            curve=1,
            smooth=10.0,
            depth=100.0,
        ),
        Connection(
            source=ModulationSource.controller(11),
            target=amplitude,
            curve=4,
            smooth=10.0,
            depth=100.0,
        ),
        Connection(
            source=ModulationSource(kind=SourceKind.AMPLITUDE_EG, region=region),
            target=ModulationTarget(kind=TargetKind.MASTER_AMPLITUDE, region=region),
            depth=1.0,
        ),
    ]


class Region(BaseModel):
    """Playback region owning its connections in declaration order.

    Connection order is preserved as declared and duplicates (same source and
    target) are allowed; lookups decide how to resolve them.
    """

    id: int = Field(..., ge=0)
    sample: Optional[str] = Field(None, description="Sample identifier played by the region")
    connections: List[Connection] = Field(default_factory=list)

    @classmethod
    def with_default_routing(
        cls,
        region_id: int,
        sample: Optional[str] = None,
        connections: Optional[List[Connection]] = None,
    ) -> Region:
        """Build a region holding the default routing followed by *connections*."""

        return cls(
            id=region_id,
            sample=sample,
            connections=[*default_connections(region_id), *(connections or [])],
        )

    def connections_to(self, target: ModulationTarget) -> List[Connection]:
        """Return the connections aimed at *target*, in declaration order."""

        return [connection for connection in self.connections if connection.target == target]


__all__ = [
    "Connection",
    "ConnectionParameters",
    "ModulationSource",
    "ModulationTarget",
    "Region",
    "SourceKind",
    "TargetKind",
    "default_connections",
]
