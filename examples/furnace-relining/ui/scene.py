"""Work-site renderer: lining segments, debris, particles and the robot."""
from __future__ import annotations

import math

import pygame

from relining import geometry
from relining.config import SiteConfig
from relining.snapshot import Snapshot
from relining.types import SegmentState, Stage

from ui.constants import (
    BRICK_BROKEN,
    BRICK_RED,
    DEBRIS_COLOR,
    LAVA,
    LASER_OFF,
    LASER_ON,
    ORANGE,
    PARTICLE_COLORS,
    RING_COLORS,
    SHELL_COLOR,
    STEEL_GREY,
)


def _int_points(points: list[tuple[float, float]]) -> list[tuple[int, int]]:
    return [(round(x), round(y)) for x, y in points]


def draw_site(surface: pygame.Surface, snap: Snapshot, config: SiteConfig, offset: tuple[int, int]) -> None:
    """Draw the furnace shell and every lining segment."""
    ox, oy = offset
    cx, cy = config.center
    center = (round(cx) + ox, round(cy) + oy)
    pygame.draw.circle(surface, SHELL_COLOR, center, round(config.outer_radius + 12), 12)

    if snap.stage is Stage.HEAT or snap.stage is Stage.VICTORY:
        glow = min(255, round(60 + snap.temperature * 1.9))
        band = round(config.outer_radius - config.inner_radius)
        pygame.draw.circle(surface, (glow, glow // 3, 0), center,
                           round(config.outer_radius), band)
        return

    shifted = (cx + ox, cy + oy)
    for seg in snap.segments:
        path = geometry.describe_annular_sector(
            seg.inner_radius, seg.outer_radius, seg.start_angle, seg.end_angle, shifted
        )
        if path.full_ring:
            color = RING_COLORS.get(seg.state.value, STEEL_GREY)
            width = max(1, round(seg.outer_radius - seg.inner_radius))
            pygame.draw.circle(surface, color, center, round(seg.outer_radius), width)
            if seg.id == snap.layer and snap.stage is Stage.CONSTRUCT:
                pygame.draw.circle(surface, ORANGE, center, round(seg.outer_radius), 2)
            continue

        color = BRICK_RED if seg.state is SegmentState.INTACT else BRICK_BROKEN
        outline = _int_points(path.outlines[0])
        pygame.draw.polygon(surface, color, outline)
        pygame.draw.polygon(surface, (30, 20, 20), outline, 2)
        if seg.state is SegmentState.INTACT and seg.progress < 100:
            # Crack overlay darkens as the wedge loses integrity.
            shade = round(255 * (1 - seg.progress / 100))
            overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            pygame.draw.polygon(overlay, (0, 0, 0, min(180, shade)), outline)
            surface.blit(overlay, (0, 0))


def draw_debris(surface: pygame.Surface, snap: Snapshot, offset: tuple[int, int]) -> None:
    ox, oy = offset
    for d in snap.debris:
        half = d.size / 2
        rad = math.radians(d.rotation)
        corners = []
        for sx, sy in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
            px = sx * half * math.cos(rad) - sy * half * math.sin(rad)
            py = sx * half * math.sin(rad) + sy * half * math.cos(rad)
            corners.append((round(d.x + px + ox), round(d.y + py + oy)))
        pygame.draw.polygon(surface, DEBRIS_COLOR, corners)


def draw_particles(surface: pygame.Surface, snap: Snapshot, offset: tuple[int, int]) -> None:
    ox, oy = offset
    for p in snap.particles:
        color = PARTICLE_COLORS.get(p.kind, ORANGE)
        radius = max(1, round(p.size * p.life))
        pygame.draw.circle(surface, color, (round(p.x + ox), round(p.y + oy)), radius)


def draw_robot(surface: pygame.Surface, snap: Snapshot, tool_color: tuple[int, int, int],
               offset: tuple[int, int]) -> None:
    ox, oy = offset
    x = snap.actor.x + ox
    y = snap.actor.y + oy
    body = pygame.Rect(0, 0, 44, 44)
    body.center = (round(x), round(y))
    pygame.draw.rect(surface, STEEL_GREY, body, border_radius=8)
    pygame.draw.rect(surface, (40, 40, 40), body, 2, border_radius=8)

    # Boom points along the heading (0 = up).
    rad = math.radians(snap.actor.heading - 90)
    tip = (x + math.cos(rad) * 38, y + math.sin(rad) * 38)
    pygame.draw.line(surface, tool_color, (round(x), round(y)), (round(tip[0]), round(tip[1])), 8)

    laser = LASER_ON if snap.locked else LASER_OFF
    pygame.draw.circle(surface, laser, (round(tip[0]), round(tip[1])), 6)
    if snap.busy and snap.stage is Stage.HEAT:
        pygame.draw.circle(surface, LAVA, (round(tip[0]), round(tip[1])), 14, 3)
