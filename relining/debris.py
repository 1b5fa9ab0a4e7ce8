"""Debris left behind by demolished wedges, and the cleanup sweep."""
from __future__ import annotations

import random
from dataclasses import dataclass

from relining import geometry
from relining.config import SiteConfig
from relining.segments import Segment
from relining.types import Point


@dataclass
class Debris:
    id: int
    x: float
    y: float
    size: float
    rotation: float

    @property
    def position(self) -> Point:
        return (self.x, self.y)


def spawn_debris(
    segment: Segment,
    config: SiteConfig,
    rng: random.Random,
    first_id: int = 0,
) -> list[Debris]:
    """Scatter debris over the wedge, around the lining midline.

    Placement and cosmetics come from ``rng``; only the count and the
    region (the wedge's angular span, midline +/- half the scatter) are fixed.
    """
    span = segment.end_angle - segment.start_angle
    pieces: list[Debris] = []
    for k in range(config.debris_per_wedge):
        radius = config.midline_radius + (rng.random() - 0.5) * config.debris_scatter
        angle = segment.start_angle + rng.random() * span
        x, y = geometry.angle_to_point(radius, angle, config.center)
        pieces.append(
            Debris(
                id=first_id + k,
                x=x,
                y=y,
                size=20.0 + rng.random() * 20.0,
                rotation=rng.random() * 360.0,
            )
        )
    return pieces


def debris_within(debris: list[Debris], position: Point, radius: float) -> bool:
    return any(geometry.distance(d.position, position) < radius for d in debris)


def sweep_debris(
    debris: list[Debris], position: Point, radius: float
) -> tuple[list[Debris], int]:
    """Remove every piece closer than ``radius``. Returns (remaining, removed)."""
    remaining = [d for d in debris if geometry.distance(d.position, position) >= radius]
    return remaining, len(debris) - len(remaining)
