"""Stage payloads.

Each stage carries only the data that is meaningful while it is active:
wedges while demolishing and cleaning, rings plus layer and sub-phase while
constructing, the temperature while heating. ``Phase`` is the union of them
and ``phase.stage`` is its tag.

``key`` is a dot-notation name used by the transition table; construction
sub-phases are children of ``"construct"``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from relining.segments import Segment
from relining.types import Stage, SubPhase


@dataclass
class IntroPhase:
    stage: ClassVar[Stage] = Stage.INTRO

    @property
    def key(self) -> str:
        return "intro"


@dataclass
class DemolishPhase:
    stage: ClassVar[Stage] = Stage.DEMOLISH
    wedges: list[Segment] = field(default_factory=list)

    @property
    def key(self) -> str:
        return "demolish"


@dataclass
class CleanPhase:
    stage: ClassVar[Stage] = Stage.CLEAN
    wedges: list[Segment] = field(default_factory=list)

    @property
    def key(self) -> str:
        return "clean"


@dataclass
class ConstructPhase:
    stage: ClassVar[Stage] = Stage.CONSTRUCT
    rings: list[Segment] = field(default_factory=list)
    layer: int = 0
    sub_phase: SubPhase = SubPhase.MOLD

    @property
    def key(self) -> str:
        return f"construct.{self.sub_phase.value}"

    @property
    def active_ring(self) -> Segment | None:
        if 0 <= self.layer < len(self.rings):
            return self.rings[self.layer]
        return None


@dataclass
class HeatPhase:
    stage: ClassVar[Stage] = Stage.HEAT
    temperature: float = 0.0

    @property
    def key(self) -> str:
        return "heat"


@dataclass
class VictoryPhase:
    stage: ClassVar[Stage] = Stage.VICTORY

    @property
    def key(self) -> str:
        return "victory"


Phase = Union[
    IntroPhase, DemolishPhase, CleanPhase, ConstructPhase, HeatPhase, VictoryPhase
]


def segments_of(phase: Phase) -> list[Segment]:
    """Segments visible in this phase (empty when the stage has none)."""
    if isinstance(phase, (DemolishPhase, CleanPhase)):
        return phase.wedges
    if isinstance(phase, ConstructPhase):
        return phase.rings
    return []


def sub_phase_of(phase: Phase) -> SubPhase | None:
    return phase.sub_phase if isinstance(phase, ConstructPhase) else None


def layer_of(phase: Phase) -> int:
    return phase.layer if isinstance(phase, ConstructPhase) else 0


def temperature_of(phase: Phase) -> float:
    """Global heating scalar; stays at 100 once the lining is cured."""
    if isinstance(phase, HeatPhase):
        return phase.temperature
    if isinstance(phase, VictoryPhase):
        return 100.0
    return 0.0
