"""Shared enums, type aliases and the per-tick context."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

Point = tuple[float, float]

# Resolver target id used while heating: there is no single segment to lock.
HEAT_TARGET = 999


class Stage(str, Enum):
    INTRO = "intro"
    DEMOLISH = "demolish"
    CLEAN = "clean"
    CONSTRUCT = "construct"
    HEAT = "heat"
    VICTORY = "victory"


class SubPhase(str, Enum):
    """Construction cycle applied once per ring layer."""

    MOLD = "mold"
    POUR = "pour"
    DEMOLD = "demold"


class SegmentState(str, Enum):
    INTACT = "intact"
    BROKEN = "broken"
    EMPTY = "empty"
    MOLDED = "molded"
    FILLED = "filled"
    CONCRETE = "concrete"


class WorkSignal(str, Enum):
    """Outcome of one application of work to a segment."""

    NONE = "none"
    BROKEN = "broken"
    ADVANCE_POUR = "advance_pour"
    ADVANCE_DEMOLD = "advance_demold"
    ADVANCE_LAYER = "advance_layer"
    LAYERS_COMPLETE = "layers_complete"


@dataclass(frozen=True, slots=True)
class ControlFrame:
    """Input sampled at the start of a tick."""

    vector: Point = (0.0, 0.0)
    action: bool = False


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    controls: ControlFrame
    random: _random.Random


if TYPE_CHECKING:
    from relining.state import SimulationState

System = Callable[["SimulationState", TickContext], None]
