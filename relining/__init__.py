"""relining - tick-driven simulation of a furnace relining procedure."""

from relining.actor import Actor, integrate_movement
from relining.config import SiteConfig
from relining.controls import InputBuffer
from relining.engine import Simulation
from relining.machine import StageGuards, StageMachine
from relining.resolver import Resolution, resolve_target
from relining.segments import Segment, apply_work, make_ring_segments, make_wedge_segments
from relining.signals import SignalBus
from relining.snapshot import Snapshot
from relining.tools import TOOLS, ToolSpec, suggested_tool
from relining.types import (
    HEAT_TARGET,
    ControlFrame,
    SegmentState,
    Stage,
    SubPhase,
    TickContext,
    WorkSignal,
)

__all__ = [
    "Simulation",
    "SiteConfig",
    "InputBuffer",
    "ControlFrame",
    "TickContext",
    "Snapshot",
    "Actor",
    "integrate_movement",
    "Segment",
    "apply_work",
    "make_wedge_segments",
    "make_ring_segments",
    "Resolution",
    "resolve_target",
    "StageMachine",
    "StageGuards",
    "SignalBus",
    "TOOLS",
    "ToolSpec",
    "suggested_tool",
    "Stage",
    "SubPhase",
    "SegmentState",
    "WorkSignal",
    "HEAT_TARGET",
]
