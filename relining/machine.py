"""Stage state machine: transition table, guards and entry effects.

Transitions are keyed by phase key and evaluated in order; the first guard
that passes wins. Keys use dot-notation, so ``"construct.pour"`` falls back
to edges declared on ``"construct"`` when none of its own fire. At most one
transition happens per tick.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from relining import notices, signals
from relining.actor import construct_start_actor, demolish_start_actor
from relining.config import SiteConfig
from relining.notices import Notice
from relining.phases import (
    CleanPhase,
    ConstructPhase,
    DemolishPhase,
    HeatPhase,
    IntroPhase,
    Phase,
    VictoryPhase,
    segments_of,
)
from relining.resolver import NO_TARGET
from relining.segments import (
    LAST_LAYER,
    MAX_TEMPERATURE,
    make_ring_segments,
    make_wedge_segments,
)
from relining.signals import SignalBus
from relining.state import SimulationState, initial_state
from relining.tools import ARM, DRILL, HEATER, VACUUM
from relining.types import SegmentState, SubPhase

if TYPE_CHECKING:
    from relining.types import TickContext

logger = logging.getLogger(__name__)

Guard = Callable[[SimulationState], bool]
TransitionCallback = Callable[[SimulationState, str, str], None]

TRANSITIONS: dict[str, list[tuple[str, str]]] = {
    "demolish": [("all_wedges_broken", "clean")],
    "clean": [("debris_cleared", "construct.mold")],
    "construct.mold": [("ring_molded", "construct.pour")],
    "construct.pour": [("ring_filled", "construct.demold")],
    "construct.demold": [
        ("final_layer_cured", "heat"),
        ("ring_cured", "construct.mold"),
    ],
    "heat": [("temperature_reached", "victory")],
}


class StageGuards:
    """Maps guard names to predicates over the simulation state."""

    def __init__(self) -> None:
        self._guards: dict[str, Guard] = {}

    def register(self, name: str, fn: Guard) -> None:
        self._guards[name] = fn

    def check(self, name: str, state: SimulationState) -> bool:
        """Evaluate a guard. Raises KeyError if it was never registered."""
        return self._guards[name](state)

    def has(self, name: str) -> bool:
        return name in self._guards

    def names(self) -> list[str]:
        return list(self._guards)


def _ring_state(state: SimulationState, expected: SegmentState) -> bool:
    phase = state.phase
    if not isinstance(phase, ConstructPhase):
        return False
    ring = phase.active_ring
    return ring is not None and ring.state is expected


def _all_wedges_broken(state: SimulationState) -> bool:
    phase = state.phase
    return (
        isinstance(phase, DemolishPhase)
        and len(phase.wedges) > 0
        and all(w.state is SegmentState.BROKEN for w in phase.wedges)
    )


def _debris_cleared(state: SimulationState) -> bool:
    return not state.debris and len(segments_of(state.phase)) > 0


def _final_layer_cured(state: SimulationState) -> bool:
    return (
        _ring_state(state, SegmentState.CONCRETE)
        and isinstance(state.phase, ConstructPhase)
        and state.phase.layer >= LAST_LAYER
    )


def _temperature_reached(state: SimulationState) -> bool:
    return isinstance(state.phase, HeatPhase) and state.phase.temperature >= MAX_TEMPERATURE


def default_guards() -> StageGuards:
    guards = StageGuards()
    guards.register("all_wedges_broken", _all_wedges_broken)
    guards.register("debris_cleared", _debris_cleared)
    guards.register("ring_molded", lambda s: _ring_state(s, SegmentState.MOLDED))
    guards.register("ring_filled", lambda s: _ring_state(s, SegmentState.FILLED))
    guards.register("ring_cured", lambda s: _ring_state(s, SegmentState.CONCRETE))
    guards.register("final_layer_cured", _final_layer_cured)
    guards.register("temperature_reached", _temperature_reached)
    return guards


def _parent(key: str) -> str | None:
    dot = key.rfind(".")
    return key[:dot] if dot >= 0 else None


class StageMachine:

    def __init__(
        self,
        config: SiteConfig,
        bus: SignalBus,
        guards: StageGuards | None = None,
        transitions: dict[str, list[tuple[str, str]]] | None = None,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        self._config = config
        self._bus = bus
        self._guards = guards if guards is not None else default_guards()
        self._transitions = transitions if transitions is not None else TRANSITIONS
        self._on_transition = on_transition
        self._notice_ticks = 1

    def set_tick_rate(self, tps: int) -> None:
        self._notice_ticks = max(1, round(self._config.notice_seconds * tps))

    def find_transition(self, state: SimulationState) -> str | None:
        key: str | None = state.phase.key
        while key is not None:
            for guard_name, target in self._transitions.get(key, ()):
                if self._guards.check(guard_name, state):
                    return target
            key = _parent(key)
        return None

    def system(self, state: SimulationState, ctx: TickContext) -> None:
        """Tick system: fire at most one automatic transition."""
        target = self.find_transition(state)
        if target is None:
            return
        old = state.phase.key
        state.phase = self._enter(state, target)
        # The lock was resolved against the old phase.
        state.resolution = NO_TARGET
        self._announce(state, old, state.phase.key)

    def _enter(self, state: SimulationState, target: str) -> Phase:
        phase = state.phase
        if target == "clean":
            state.tool = VACUUM
            return CleanPhase(wedges=segments_of(phase))
        if target == "heat":
            state.tool = HEATER
            return HeatPhase(temperature=0.0)
        if target == "victory":
            return VictoryPhase()
        if target.startswith("construct."):
            sub_phase = SubPhase(target.split(".", 1)[1])
            if not isinstance(phase, ConstructPhase):
                state.tool = ARM
                state.actor = construct_start_actor(self._config)
                return ConstructPhase(rings=make_ring_segments(self._config))
            layer = phase.layer
            if sub_phase is SubPhase.MOLD and phase.sub_phase is SubPhase.DEMOLD:
                layer += 1
            return ConstructPhase(rings=phase.rings, layer=layer, sub_phase=sub_phase)
        raise KeyError(f"No entry handler for stage {target!r}")

    def _announce(self, state: SimulationState, old: str, new: str) -> None:
        finished_layer = state.phase.layer - 1 if isinstance(state.phase, ConstructPhase) else 0
        logger.info("stage %s -> %s", old, new)
        text = notices.transition_notice(old, new, layer=finished_layer)
        if text is not None:
            self.post_notice(state, text)
        self._bus.publish(signals.STAGE_CHANGED, old=old, new=new)
        if self._on_transition is not None:
            self._on_transition(state, old, new)

    def post_notice(self, state: SimulationState, text: str) -> None:
        state.notice = Notice(text=text, remaining=self._notice_ticks)
        self._bus.publish(signals.NOTICE, text=text)

    def start(self, state: SimulationState) -> bool:
        """INTRO -> DEMOLISH. Returns False (and changes nothing) elsewhere."""
        if not isinstance(state.phase, IntroPhase):
            logger.debug("start ignored in stage %s", state.phase.key)
            return False
        state.phase = DemolishPhase(wedges=make_wedge_segments(self._config))
        state.actor = demolish_start_actor(self._config)
        state.tool = DRILL
        state.debris = []
        state.particles = []
        state.resolution = NO_TARGET
        state.busy = False
        state.next_debris_id = 0
        logger.info("stage intro -> demolish")
        self.post_notice(state, notices.OPENING)
        self._bus.publish(signals.STAGE_CHANGED, old="intro", new="demolish")
        return True

    def reset(self) -> SimulationState:
        """Fresh INTRO state; the caller swaps it in wholesale."""
        logger.info("reset to intro")
        self._bus.clear()
        return initial_state(self._config)
