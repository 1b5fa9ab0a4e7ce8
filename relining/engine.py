"""Simulation - fixed-step tick driver, commands and snapshots."""

from __future__ import annotations

import logging
import os
import random
from typing import Callable

from relining import signals
from relining.actor import integrate_movement
from relining.config import SiteConfig
from relining.controls import InputBuffer
from relining.debris import spawn_debris, sweep_debris
from relining.machine import StageMachine
from relining.particles import age_particles, particle_kind, sweep_particle, work_particle
from relining.phases import (
    CleanPhase,
    ConstructPhase,
    DemolishPhase,
    HeatPhase,
    segments_of,
    sub_phase_of,
)
from relining.resolver import resolve_target
from relining.segments import apply_work, raise_temperature, work_rate
from relining.signals import SignalBus
from relining.snapshot import Snapshot, take_snapshot
from relining.state import SimulationState, initial_state
from relining.tools import VACUUM, is_valid_tool
from relining.types import ControlFrame, System, TickContext, WorkSignal

logger = logging.getLogger(__name__)

SnapshotHook = Callable[[Snapshot], None]


class Simulation:
    """Owns the simulation state and runs the per-tick systems in order.

    Commands (``start``, ``reset``, ``select_tool``) and writes to ``inputs``
    happen between ticks; ``step`` runs one tick to completion. Signals
    queued by a tick or a command are delivered before its snapshot is
    published.
    """

    def __init__(
        self,
        config: SiteConfig | None = None,
        tps: int = 60,
        seed: int | None = None,
    ) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._config = config if config is not None else SiteConfig.for_viewport()
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)
        self._bus = SignalBus()
        self._machine = StageMachine(self._config, self._bus)
        self._machine.set_tick_rate(tps)
        self._inputs = InputBuffer()
        self._state = initial_state(self._config)
        self._snapshot_hooks: list[SnapshotHook] = []
        self._snapshot = take_snapshot(self._state, 0)
        self._systems: list[System] = [
            self._movement_system,
            self._resolve_system,
            self._work_system,
            self._sweep_system,
            self._machine.system,
            self._particle_system,
            self._notice_system,
        ]

    @property
    def config(self) -> SiteConfig:
        return self._config

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Simulated seconds since construction."""
        return self._tick_number * self._dt

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def inputs(self) -> InputBuffer:
        return self._inputs

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def snapshot(self) -> Snapshot:
        """Snapshot published by the most recent tick or command."""
        return self._snapshot

    def on_snapshot(self, hook: SnapshotHook) -> None:
        self._snapshot_hooks.append(hook)

    # -- Commands --

    def start(self) -> bool:
        started = self._machine.start(self._state)
        if started:
            self._publish()
        return started

    def reset(self) -> None:
        self._state = self._machine.reset()
        self._publish()

    def select_tool(self, index: int) -> bool:
        stage_key = self._state.phase.key
        if stage_key in ("intro", "victory"):
            logger.debug("tool %d ignored in stage %s", index, stage_key)
            return False
        if not is_valid_tool(index):
            logger.debug("tool index %d out of range", index)
            return False
        self._state.tool = index
        return True

    # -- Tick --

    def step(self, controls: ControlFrame | None = None) -> Snapshot:
        """Run one tick. ``controls`` overrides the input buffer when given."""
        self._tick_number += 1
        frame = controls if controls is not None else self._inputs.frame()
        ctx = TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self.elapsed,
            controls=frame,
            random=self._rng,
        )
        for system in self._systems:
            system(self._state, ctx)
        self._publish()
        return self._snapshot

    def run(self, n: int) -> Snapshot:
        for _ in range(n):
            self.step()
        return self._snapshot

    def _publish(self) -> None:
        self._bus.flush()
        self._snapshot = take_snapshot(self._state, self._tick_number)
        for hook in self._snapshot_hooks:
            hook(self._snapshot)

    # -- Systems --

    def _movement_system(self, state: SimulationState, ctx: TickContext) -> None:
        state.actor = integrate_movement(
            state.actor, ctx.controls.vector, ctx.dt, self._config
        )

    def _resolve_system(self, state: SimulationState, ctx: TickContext) -> None:
        state.resolution = resolve_target(
            state.phase, state.tool, state.actor.position, state.debris, self._config
        )

    def _work_system(self, state: SimulationState, ctx: TickContext) -> None:
        state.busy = False
        res = state.resolution
        if not (ctx.controls.action and res.locked):
            return
        state.busy = True
        phase = state.phase
        rate = work_rate(True)

        if isinstance(phase, HeatPhase):
            phase.temperature = raise_temperature(phase.temperature, rate)
        elif isinstance(phase, (DemolishPhase, ConstructPhase)) and res.target_id is not None:
            segments = segments_of(phase)
            if 0 <= res.target_id < len(segments):
                segment = segments[res.target_id]
                layer = phase.layer if isinstance(phase, ConstructPhase) else 0
                signal = apply_work(segment, phase.stage, sub_phase_of(phase), rate, layer)
                if signal is WorkSignal.BROKEN:
                    self._spawn_debris(state, segment.id, ctx)

        if ctx.random.random() > 0.5:
            kind = particle_kind(phase.stage, sub_phase_of(phase))
            state.particles.append(work_particle(state.actor.position, kind, ctx.random))

    def _spawn_debris(self, state: SimulationState, segment_id: int, ctx: TickContext) -> None:
        segment = segments_of(state.phase)[segment_id]
        pieces = spawn_debris(segment, self._config, ctx.random, state.next_debris_id)
        state.next_debris_id += len(pieces)
        state.debris.extend(pieces)
        self._bus.publish(signals.SEGMENT_BROKEN, segment_id=segment_id)

    def _sweep_system(self, state: SimulationState, ctx: TickContext) -> None:
        # Runs independently of the resolver lock, with a wider range.
        if not (
            isinstance(state.phase, CleanPhase)
            and ctx.controls.action
            and state.tool == VACUUM
        ):
            return
        state.busy = True
        remaining, removed = sweep_debris(
            state.debris, state.actor.position, self._config.vacuum_sweep_range
        )
        if removed:
            state.debris = remaining
            state.particles.append(sweep_particle(state.actor.position, ctx.random))
            self._bus.publish(signals.DEBRIS_SWEPT, count=removed)

    def _particle_system(self, state: SimulationState, ctx: TickContext) -> None:
        state.particles = age_particles(state.particles)

    def _notice_system(self, state: SimulationState, ctx: TickContext) -> None:
        if state.notice is not None and not state.notice.tick():
            state.notice = None


