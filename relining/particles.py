"""Cosmetic sparks and dust. Nothing in the simulation reads these back."""
from __future__ import annotations

import random
from dataclasses import dataclass

from relining.types import Point, Stage, SubPhase

LIFE_DECAY = 0.08

SPARK = "spark"
SLURRY = "slurry"
GLOW = "glow"
DUST = "dust"


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    kind: str
    size: float


def particle_kind(stage: Stage, sub_phase: SubPhase | None) -> str:
    if stage is Stage.CONSTRUCT and sub_phase is SubPhase.POUR:
        return SLURRY
    if stage is Stage.HEAT:
        return GLOW
    return SPARK


def work_particle(
    position: Point, kind: str, rng: random.Random
) -> Particle:
    return Particle(
        x=position[0] + (rng.random() - 0.5) * 20.0,
        y=position[1] + (rng.random() - 0.5) * 20.0,
        vx=(rng.random() - 0.5) * 5.0,
        vy=(rng.random() - 0.5) * 5.0,
        life=1.0,
        kind=kind,
        size=rng.random() * 5.0 + 2.0,
    )


def sweep_particle(position: Point, rng: random.Random) -> Particle:
    return Particle(
        x=position[0],
        y=position[1],
        vx=(rng.random() - 0.5) * 2.0,
        vy=(rng.random() - 0.5) * 2.0,
        life=0.5,
        kind=DUST,
        size=2.0,
    )


def age_particles(particles: list[Particle]) -> list[Particle]:
    for p in particles:
        p.x += p.vx
        p.y += p.vy
        p.life -= LIFE_DECAY
    return [p for p in particles if p.life > 0.0]
