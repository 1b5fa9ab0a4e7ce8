"""Polar/planar conversions and annular sector outlines.

Angles are in degrees, 0 pointing up and increasing clockwise in screen
space (y grows downward). The same convention is used by targeting and by
rendering, so a wedge drawn from 0 to 90 is the wedge the robot locks onto
when standing to the upper right of the center.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from relining.types import Point

FULL_CIRCLE_SPAN = 359.9


def add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Point, s: float) -> Point:
    return (v[0] * s, v[1] * s)


def magnitude(v: Point) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Point) -> Point:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def angle_to_point(radius: float, angle_degrees: float, center: Point) -> Point:
    theta = math.radians(angle_degrees - 90.0)
    return (center[0] + radius * math.cos(theta), center[1] + radius * math.sin(theta))


def bearing(point: Point, center: Point) -> float:
    """Angle of ``point`` about ``center`` in [0, 360)."""
    deg = math.degrees(math.atan2(point[1] - center[1], point[0] - center[0])) + 90.0
    if deg < 0.0:
        deg += 360.0
    return deg % 360.0


@dataclass(frozen=True)
class SectorPath:
    """Closed outlines for one annular sector.

    A partial wedge is a single loop in ``outlines``. A full ring has two
    loops, the outer boundary followed by the inner hole, and ``full_ring``
    set so renderers can draw it as a band rather than a polygon.
    """

    outlines: list[list[Point]] = field(default_factory=list)
    full_ring: bool = False


def _arc(radius: float, start: float, end: float, center: Point, steps: int) -> list[Point]:
    return [
        angle_to_point(radius, start + (end - start) * i / steps, center)
        for i in range(steps + 1)
    ]


def describe_annular_sector(
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    center: Point,
    steps: int = 32,
) -> SectorPath:
    span = end_angle - start_angle
    if span >= FULL_CIRCLE_SPAN:
        # A 360 degree wedge would start and end on the same point and
        # collapse to nothing, so emit two full loops instead.
        outer = _arc(outer_radius, 0.0, 360.0, center, steps)[:-1]
        inner = _arc(inner_radius, 0.0, 360.0, center, steps)[:-1]
        return SectorPath(outlines=[outer, inner], full_ring=True)

    arc_steps = max(1, round(steps * span / 360.0))
    outer = _arc(outer_radius, start_angle, end_angle, center, arc_steps)
    inner = _arc(inner_radius, start_angle, end_angle, center, arc_steps)
    return SectorPath(outlines=[outer + inner[::-1]])
