"""Robot position, heading and containment inside the work-site."""
from __future__ import annotations

import math
from dataclasses import dataclass

from relining import geometry
from relining.config import SiteConfig
from relining.types import Point


@dataclass
class Actor:
    """The robot. ``heading`` uses the site angle convention (0 = up)."""

    x: float
    y: float
    heading: float = 0.0

    @property
    def position(self) -> Point:
        return (self.x, self.y)


def staging_actor(config: SiteConfig) -> Actor:
    """Resting spot shown on the intro screen and after a reset."""
    cx, cy = config.center
    return Actor(x=cx, y=cy + config.inner_radius + 50.0, heading=0.0)


def demolish_start_actor(config: SiteConfig) -> Actor:
    cx, cy = config.center
    return Actor(x=cx, y=cy + config.inner_radius + 60.0, heading=0.0)


def construct_start_actor(config: SiteConfig) -> Actor:
    cx, cy = config.center
    return Actor(x=cx, y=cy + config.inner_radius + 20.0, heading=90.0)


def contain_radial(point: Point, config: SiteConfig) -> Point:
    """Project ``point`` back into the robot's annular travel band."""
    center = config.center
    dist = geometry.distance(point, center)
    if dist > config.robot_max_radius:
        radius = config.robot_max_radius
    elif dist < config.robot_min_radius:
        radius = config.robot_min_radius
    else:
        return point
    angle = math.atan2(point[1] - center[1], point[0] - center[0])
    return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


def contain_box(point: Point, config: SiteConfig) -> Point:
    m = config.margin
    x = max(m, min(config.width - m, point[0]))
    y = max(m, min(config.height - m, point[1]))
    return (x, y)


def integrate_movement(
    actor: Actor, vector: Point, dt: float, config: SiteConfig
) -> Actor:
    """Return the actor advanced by one tick of input.

    The input vector is not renormalized; summed keyboard and pointer input
    moves faster than either alone. Radial containment runs before the
    screen clamp.
    """
    dx, dy = vector
    position = actor.position
    heading = actor.heading

    if geometry.magnitude(vector) > config.deadzone:
        step = config.speed * dt
        position = (position[0] + dx * step, position[1] + dy * step)
        heading = math.degrees(math.atan2(dy, dx)) + 90.0

    position = contain_radial(position, config)
    position = contain_box(position, config)
    return Actor(x=position[0], y=position[1], heading=heading)
