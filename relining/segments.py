"""Work targets: demolition wedges and construction rings."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from relining.config import SiteConfig
from relining.types import SegmentState, Stage, SubPhase, WorkSignal

logger = logging.getLogger(__name__)

SEGMENT_COUNT = 4
LAST_LAYER = SEGMENT_COUNT - 1
MAX_PROGRESS = 100.0
WORK_MULTIPLIER = 3.0
MAX_TEMPERATURE = 100.0

_DEMOLISH_RATE = 1.0
_HEAT_RATE = 0.3
_CONSTRUCT_RATES: dict[SubPhase, float] = {
    SubPhase.MOLD: 1.5,
    SubPhase.POUR: 1.0,
    SubPhase.DEMOLD: 2.0,
}

# sub-phase -> (required state, resulting state)
_CONSTRUCT_STEPS: dict[SubPhase, tuple[SegmentState, SegmentState]] = {
    SubPhase.MOLD: (SegmentState.EMPTY, SegmentState.MOLDED),
    SubPhase.POUR: (SegmentState.MOLDED, SegmentState.FILLED),
    SubPhase.DEMOLD: (SegmentState.FILLED, SegmentState.CONCRETE),
}


@dataclass
class Segment:
    """One wedge or ring of lining.

    Wedges start at full progress (undamaged) and are worked down to 0.
    Rings start empty and are worked up to 100 once per sub-phase.
    """

    id: int
    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float
    progress: float
    state: SegmentState

    @property
    def midline_radius(self) -> float:
        return (self.inner_radius + self.outer_radius) / 2

    @property
    def full_ring(self) -> bool:
        return self.end_angle - self.start_angle >= 360.0


def make_wedge_segments(config: SiteConfig) -> list[Segment]:
    span = 360.0 / SEGMENT_COUNT
    return [
        Segment(
            id=i,
            start_angle=i * span,
            end_angle=(i + 1) * span,
            inner_radius=config.inner_radius,
            outer_radius=config.outer_radius,
            progress=MAX_PROGRESS,
            state=SegmentState.INTACT,
        )
        for i in range(SEGMENT_COUNT)
    ]


def make_ring_segments(config: SiteConfig) -> list[Segment]:
    thickness = (config.outer_radius - config.inner_radius) / SEGMENT_COUNT
    return [
        Segment(
            id=i,
            start_angle=0.0,
            end_angle=360.0,
            inner_radius=config.inner_radius + i * thickness,
            outer_radius=config.inner_radius + (i + 1) * thickness,
            progress=0.0,
            state=SegmentState.EMPTY,
        )
        for i in range(SEGMENT_COUNT)
    ]


def work_rate(action_held: bool) -> float:
    return WORK_MULTIPLIER if action_held else 0.0


def base_rate(stage: Stage, sub_phase: SubPhase | None = None) -> float:
    """Per-stage factor applied on top of the work multiplier."""
    if stage is Stage.DEMOLISH:
        return _DEMOLISH_RATE
    if stage is Stage.CONSTRUCT and sub_phase is not None:
        return _CONSTRUCT_RATES[sub_phase]
    if stage is Stage.HEAT:
        return _HEAT_RATE
    return 0.0


def _clamp(value: float) -> float:
    return max(0.0, min(MAX_PROGRESS, value))


def apply_work(
    segment: Segment,
    stage: Stage,
    sub_phase: SubPhase | None,
    rate: float,
    layer: int = 0,
) -> WorkSignal:
    """Apply one tick of work to ``segment`` in place and report what happened."""
    if stage is Stage.DEMOLISH:
        if segment.state is not SegmentState.INTACT:
            return WorkSignal.NONE
        segment.progress = _clamp(segment.progress - rate * _DEMOLISH_RATE)
        if segment.progress <= 0.0:
            segment.state = SegmentState.BROKEN
            segment.progress = 0.0
            logger.debug("wedge %d broken", segment.id)
            return WorkSignal.BROKEN
        return WorkSignal.NONE

    if stage is Stage.CONSTRUCT and sub_phase is not None:
        required, result = _CONSTRUCT_STEPS[sub_phase]
        if segment.state is not required:
            return WorkSignal.NONE
        segment.progress = _clamp(segment.progress + rate * _CONSTRUCT_RATES[sub_phase])
        if segment.progress < MAX_PROGRESS:
            return WorkSignal.NONE
        segment.state = result
        segment.progress = 0.0
        logger.debug("ring %d now %s", segment.id, result.value)
        if sub_phase is SubPhase.MOLD:
            return WorkSignal.ADVANCE_POUR
        if sub_phase is SubPhase.POUR:
            return WorkSignal.ADVANCE_DEMOLD
        if layer < LAST_LAYER:
            return WorkSignal.ADVANCE_LAYER
        return WorkSignal.LAYERS_COMPLETE

    return WorkSignal.NONE


def raise_temperature(temperature: float, rate: float) -> float:
    """Heating does not touch segments; it raises the global temperature."""
    return max(temperature, min(MAX_TEMPERATURE, temperature + rate * _HEAT_RATE))
