"""Read-only view of the simulation handed to renderers after each tick."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from relining.actor import Actor
from relining.debris import Debris
from relining.notices import hint_text
from relining.particles import Particle
from relining.phases import layer_of, segments_of, sub_phase_of, temperature_of
from relining.segments import MAX_PROGRESS, Segment
from relining.state import SimulationState
from relining.tools import suggested_tool
from relining.types import Stage, SubPhase


@dataclass(frozen=True)
class Snapshot:
    tick_number: int
    stage: Stage
    sub_phase: SubPhase | None
    layer: int
    segments: tuple[Segment, ...]
    actor: Actor
    debris: tuple[Debris, ...]
    particles: tuple[Particle, ...]
    temperature: float
    notice: str | None
    tool: int
    suggested_tool: int
    locked: bool
    target_id: int | None
    busy: bool
    progress: float
    hint: str

    def to_dict(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        data["stage"] = self.stage.value
        data["sub_phase"] = self.sub_phase.value if self.sub_phase is not None else None
        for seg in data["segments"]:
            seg["state"] = seg["state"].value
        return data


def progress_value(state: SimulationState) -> float:
    """Value for the operator's progress bar, 0-100."""
    stage = state.phase.stage
    if stage is Stage.HEAT:
        return temperature_of(state.phase)
    res = state.resolution
    if not res.locked or res.target_id is None:
        return 0.0
    segments = segments_of(state.phase)
    if not 0 <= res.target_id < len(segments):
        return 0.0
    segment = segments[res.target_id]
    if stage is Stage.DEMOLISH:
        return MAX_PROGRESS - segment.progress
    if stage is Stage.CONSTRUCT:
        return segment.progress
    return 0.0


def take_snapshot(state: SimulationState, tick_number: int) -> Snapshot:
    phase = state.phase
    sub_phase = sub_phase_of(phase)
    layer = layer_of(phase)
    return Snapshot(
        tick_number=tick_number,
        stage=phase.stage,
        sub_phase=sub_phase,
        layer=layer,
        segments=tuple(dataclasses.replace(s) for s in segments_of(phase)),
        actor=dataclasses.replace(state.actor),
        debris=tuple(dataclasses.replace(d) for d in state.debris),
        particles=tuple(dataclasses.replace(p) for p in state.particles),
        temperature=temperature_of(phase),
        notice=state.notice.text if state.notice is not None else None,
        tool=state.tool,
        suggested_tool=suggested_tool(phase.stage, sub_phase),
        locked=state.resolution.locked,
        target_id=state.resolution.target_id,
        busy=state.busy,
        progress=progress_value(state),
        hint=hint_text(phase.stage, sub_phase, layer),
    )
