"""Scripted operator that drives a simulation through the whole procedure.

Used by the headless runner and the integration tests. It only reads the
published snapshot and only writes controls and tool selections, the same
surface a human operator has.
"""
from __future__ import annotations

import math

from relining import geometry
from relining.config import SiteConfig
from relining.engine import Simulation
from relining.snapshot import Snapshot
from relining.tools import NO_TOOL
from relining.types import ControlFrame, Point, SegmentState, Stage

# Largest angular step toward a target before the robot swings around the
# annulus instead of cutting across the hearth.
MAX_SWING = 20.0


def _angle_delta(target: float, current: float) -> float:
    return (target - current + 540.0) % 360.0 - 180.0


class Autopilot:

    def __init__(self, config: SiteConfig, arrive: float = 8.0) -> None:
        self._config = config
        self._arrive = arrive

    def goal(self, snapshot: Snapshot) -> tuple[float, float] | None:
        """(radius, angle) the robot should head for, or None to stay put."""
        actor = snapshot.actor.position
        here = geometry.bearing(actor, self._config.center)

        if snapshot.stage is Stage.DEMOLISH:
            for seg in snapshot.segments:
                if seg.state is SegmentState.INTACT:
                    mid = (seg.start_angle + seg.end_angle) / 2
                    return (seg.midline_radius, mid)
            return None
        if snapshot.stage is Stage.CLEAN:
            if not snapshot.debris:
                return None
            nearest = min(snapshot.debris, key=lambda d: geometry.distance(d.position, actor))
            return (
                geometry.distance(nearest.position, self._config.center),
                geometry.bearing(nearest.position, self._config.center),
            )
        if snapshot.stage is Stage.CONSTRUCT:
            if not 0 <= snapshot.layer < len(snapshot.segments):
                return None
            return (snapshot.segments[snapshot.layer].midline_radius, here)
        if snapshot.stage is Stage.HEAT:
            return (self._config.midline_radius, here)
        return None

    def waypoint(self, snapshot: Snapshot) -> Point | None:
        goal = self.goal(snapshot)
        if goal is None:
            return None
        radius, angle = goal
        here = geometry.bearing(snapshot.actor.position, self._config.center)
        delta = _angle_delta(angle, here)
        if abs(delta) > MAX_SWING:
            angle = here + math.copysign(MAX_SWING, delta)
        return geometry.angle_to_point(radius, angle, self._config.center)

    def controls(self, snapshot: Snapshot) -> ControlFrame:
        working = snapshot.stage not in (Stage.INTRO, Stage.VICTORY)
        point = self.waypoint(snapshot)
        if point is None:
            return ControlFrame(vector=(0.0, 0.0), action=working)
        offset = geometry.sub(point, snapshot.actor.position)
        if geometry.magnitude(offset) < self._arrive:
            return ControlFrame(vector=(0.0, 0.0), action=working)
        return ControlFrame(vector=geometry.normalize(offset), action=working)

    def drive(self, sim: Simulation, max_ticks: int = 10_000) -> Snapshot:
        """Start if needed, then tick until VICTORY or ``max_ticks``."""
        if sim.snapshot.stage is Stage.INTRO:
            sim.start()
        snapshot = sim.snapshot
        for _ in range(max_ticks):
            if snapshot.stage is Stage.VICTORY:
                break
            wanted = snapshot.suggested_tool
            if wanted != NO_TOOL and wanted != snapshot.tool:
                sim.select_tool(wanted)
            snapshot = sim.step(self.controls(sim.snapshot))
        return snapshot
