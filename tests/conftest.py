import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from domain.modulation import (  # noqa: E402
    Connection,
    ModulationSource,
    ModulationTarget,
    Region,
    TargetKind,
)
from domain.voices import VoicePool  # noqa: E402


@pytest.fixture()
def pitch_target() -> ModulationTarget:
    return ModulationTarget(kind=TargetKind.PITCH, region=0)


@pytest.fixture()
def pan_target() -> ModulationTarget:
    return ModulationTarget(kind=TargetKind.PAN, region=0)


@pytest.fixture()
def example_region(pitch_target: ModulationTarget, pan_target: ModulationTarget) -> Region:
    return Region(
        id=0,
        sample="*sine",
        connections=[
            Connection(source=ModulationSource.controller(1), target=pitch_target, depth=0.5),
            Connection(source=ModulationSource.controller(7), target=pitch_target, depth=0.2),
            Connection(source=ModulationSource.controller(1), target=pan_target, depth=0.9),
        ],
    )


@pytest.fixture()
def voice_pool() -> VoicePool:
    return VoicePool.with_capacity(8)
