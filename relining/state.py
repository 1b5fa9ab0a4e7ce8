"""The single mutable struct every tick system reads and writes."""
from __future__ import annotations

from dataclasses import dataclass, field

from relining.actor import Actor, staging_actor
from relining.config import SiteConfig
from relining.debris import Debris
from relining.notices import Notice
from relining.particles import Particle
from relining.phases import IntroPhase, Phase
from relining.resolver import NO_TARGET, Resolution
from relining.tools import DRILL


@dataclass
class SimulationState:
    phase: Phase
    actor: Actor
    tool: int = DRILL
    debris: list[Debris] = field(default_factory=list)
    particles: list[Particle] = field(default_factory=list)
    resolution: Resolution = NO_TARGET
    notice: Notice | None = None
    busy: bool = False
    next_debris_id: int = 0


def initial_state(config: SiteConfig) -> SimulationState:
    return SimulationState(phase=IntroPhase(), actor=staging_actor(config))
