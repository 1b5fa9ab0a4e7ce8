"""Per-tick targeting: which segment, if any, the robot may work on.

``resolve_target`` is recomputed from scratch every tick. There is no
hysteresis, so standing exactly on a tolerance boundary can flicker between
locked and unlocked from one tick to the next.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from relining import geometry
from relining.config import SiteConfig
from relining.debris import Debris, debris_within
from relining.phases import CleanPhase, ConstructPhase, DemolishPhase, HeatPhase, Phase
from relining.segments import SEGMENT_COUNT
from relining.tools import DRILL, HEATER, SUB_PHASE_TOOLS, VACUUM
from relining.types import HEAT_TARGET, Point, SegmentState, SubPhase


@dataclass(frozen=True)
class Resolution:
    target_id: int | None = None
    locked: bool = False


NO_TARGET = Resolution()

# State a ring must be in before each sub-phase can work it.
_PRECONDITIONS: dict[SubPhase, SegmentState] = {
    SubPhase.MOLD: SegmentState.EMPTY,
    SubPhase.POUR: SegmentState.MOLDED,
    SubPhase.DEMOLD: SegmentState.FILLED,
}


def wedge_index(position: Point, center: Point) -> int:
    return math.floor(geometry.bearing(position, center) / 90.0) % SEGMENT_COUNT


def resolve_target(
    phase: Phase,
    tool: int,
    position: Point,
    debris: list[Debris],
    config: SiteConfig,
) -> Resolution:
    dist = geometry.distance(position, config.center)

    if isinstance(phase, DemolishPhase):
        idx = wedge_index(position, config.center)
        if idx >= len(phase.wedges):
            return NO_TARGET
        wedge = phase.wedges[idx]
        if abs(dist - wedge.midline_radius) > config.wedge_tolerance:
            return NO_TARGET
        locked = tool == DRILL and wedge.state is SegmentState.INTACT
        return Resolution(target_id=wedge.id, locked=locked)

    if isinstance(phase, CleanPhase):
        locked = tool == VACUUM and debris_within(
            debris, position, config.vacuum_lock_range
        )
        return Resolution(target_id=None, locked=locked)

    if isinstance(phase, ConstructPhase):
        ring = phase.active_ring
        if ring is None:
            return NO_TARGET
        in_range = abs(dist - ring.midline_radius) < config.ring_tolerance
        locked = (
            in_range
            and tool == SUB_PHASE_TOOLS[phase.sub_phase]
            and ring.state is _PRECONDITIONS[phase.sub_phase]
        )
        return Resolution(target_id=ring.id, locked=locked)

    if isinstance(phase, HeatPhase):
        in_band = (
            config.inner_radius - config.heat_inner_slack
            < dist
            < config.outer_radius + config.heat_outer_slack
        )
        if in_band and tool == HEATER:
            return Resolution(target_id=HEAT_TARGET, locked=True)
        return NO_TARGET

    return NO_TARGET
