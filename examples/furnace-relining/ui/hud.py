"""HUD overlays: tool bar, hint, progress, notices, title screens, touch controls."""
from __future__ import annotations

import pygame

from relining.snapshot import Snapshot
from relining.tools import TOOLS
from relining.types import Stage

from ui.constants import (
    BUTTON_RADIUS,
    ORANGE,
    PANEL_BG,
    STICK_KNOB_RADIUS,
    STICK_RADIUS,
    TEXT_COLOR,
    TEXT_DIM,
)


def _panel(surface: pygame.Surface, rect: pygame.Rect) -> None:
    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel.fill(PANEL_BG)
    surface.blit(panel, rect.topleft)


def draw_toolbar(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Five tool slots along the top; the suggested one is outlined."""
    slot_w, slot_h, pad = 150, 44, 8
    x = pad
    for idx, tool in enumerate(TOOLS):
        rect = pygame.Rect(x, pad, slot_w, slot_h)
        _panel(surface, rect)
        if idx == snap.tool:
            pygame.draw.rect(surface, tool.color, rect, 3)
        elif idx == snap.suggested_tool:
            pygame.draw.rect(surface, ORANGE, rect, 1)
        label = font.render(f"[{tool.key}] {tool.name}", True, TEXT_COLOR)
        desc = font.render(tool.desc, True, TEXT_DIM)
        surface.blit(label, (x + 6, pad + 5))
        surface.blit(desc, (x + 6, pad + 24))
        x += slot_w + pad


def draw_status(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Hint line and progress bar along the bottom."""
    w, h = surface.get_size()
    rect = pygame.Rect(w // 2 - 260, h - 70, 520, 58)
    _panel(surface, rect)
    hint = font.render(snap.hint, True, TEXT_COLOR)
    surface.blit(hint, hint.get_rect(midtop=(rect.centerx, rect.top + 6)))

    bar = pygame.Rect(rect.left + 20, rect.top + 32, rect.width - 40, 14)
    pygame.draw.rect(surface, (60, 60, 60), bar)
    fill = bar.copy()
    fill.width = round(bar.width * max(0.0, min(100.0, snap.progress)) / 100)
    pygame.draw.rect(surface, ORANGE, fill)

    lock = "LOCKED" if snap.locked else "NO TARGET"
    label = font.render(lock, True, (0, 230, 0) if snap.locked else TEXT_DIM)
    surface.blit(label, (bar.right - label.get_width(), rect.top - 20))


def draw_notice(surface: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    if snap.notice is None:
        return
    w, _ = surface.get_size()
    text = font.render(snap.notice, True, (255, 255, 255))
    rect = text.get_rect(midtop=(w // 2, 70)).inflate(24, 14)
    _panel(surface, rect)
    pygame.draw.rect(surface, ORANGE, rect, 1)
    surface.blit(text, text.get_rect(center=rect.center))


def draw_title(surface: pygame.Surface, big: pygame.font.Font, font: pygame.font.Font,
               snap: Snapshot) -> None:
    """Intro and victory screens."""
    if snap.stage not in (Stage.INTRO, Stage.VICTORY):
        return
    w, h = surface.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 210))
    surface.blit(overlay, (0, 0))

    if snap.stage is Stage.INTRO:
        lines = [
            "Move with WASD / arrows or drag the stick.",
            "Hold Space (or the button) near a target to work.",
            "Keys 1-5 pick a tool.",
            "Press Enter to start.",
        ]
        title = "FURNACE RELINING"
    else:
        lines = [f"Relined in {snap.tick_number} ticks.", "Press R to return to the menu."]
        title = "BAKE-OUT COMPLETE"

    head = big.render(title, True, ORANGE)
    surface.blit(head, head.get_rect(center=(w // 2, h // 2 - 80)))
    y = h // 2 - 20
    for line in lines:
        text = font.render(line, True, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=(w // 2, y)))
        y += 26


def draw_touch_controls(surface: pygame.Surface, stick_center: tuple[int, int],
                        knob: tuple[float, float], button_center: tuple[int, int],
                        pressed: bool) -> None:
    pygame.draw.circle(surface, (90, 90, 90), stick_center, STICK_RADIUS, 2)
    kx = stick_center[0] + round(knob[0] * STICK_RADIUS)
    ky = stick_center[1] + round(knob[1] * STICK_RADIUS)
    pygame.draw.circle(surface, ORANGE if knob != (0.0, 0.0) else (150, 150, 150),
                       (kx, ky), STICK_KNOB_RADIUS)
    pygame.draw.circle(surface, ORANGE if pressed else (120, 60, 40), button_center, BUTTON_RADIUS)
