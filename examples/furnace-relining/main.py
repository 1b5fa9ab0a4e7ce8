"""Furnace Relining: interactive pygame front-end.

Drives relining.Simulation at a fixed tick rate and renders its snapshot.

Controls:
  WASD / arrows   Move the robot
  Space           Hold to work
  1-5             Select tool
  Enter           Start (from the title screen)
  R               Return to the title screen
  Mouse drag      On-screen stick (bottom left) and action button (bottom right)
  Esc             Quit
"""
from __future__ import annotations

import argparse
import math
import random
import sys

import pygame

from relining import Simulation, SiteConfig
from relining.controls import pointer_vector
from relining.tools import TOOLS
from ui.constants import (
    BG_COLOR,
    BUTTON_OFFSET,
    BUTTON_RADIUS,
    FPS,
    STICK_OFFSET,
    STICK_RADIUS,
)
from ui.hud import draw_notice, draw_status, draw_title, draw_toolbar, draw_touch_controls
from ui.scene import draw_debris, draw_particles, draw_robot, draw_site


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Furnace relining pygame demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--tps", type=int, default=60, help="Ticks per second (default: 60)")
    p.add_argument("--width", type=int, default=1024, help="Window width (default: 1024)")
    p.add_argument("--height", type=int, default=768, help="Window height (default: 768)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    config = SiteConfig.for_viewport(args.width, args.height)
    sim = Simulation(config, tps=args.tps, seed=args.seed)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Furnace Relining")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    big_font = pygame.font.SysFont("monospace", 48, bold=True)

    stick_center = (STICK_OFFSET, args.height - STICK_OFFSET)
    button_center = (args.width - BUTTON_OFFSET, args.height - BUTTON_OFFSET)
    dragging_stick = False
    button_down = False
    knob = (0.0, 0.0)

    tick_interval = 1.0 / args.tps
    accumulator = 0.0
    running = True

    while running:
        accumulator += clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                name = pygame.key.name(event.key)
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    sim.start()
                elif event.key == pygame.K_r:
                    sim.reset()
                elif name.isdigit() and 1 <= int(name) <= len(TOOLS):
                    sim.select_tool(int(name) - 1)
                sim.inputs.press(name)

            elif event.type == pygame.KEYUP:
                sim.inputs.release(pygame.key.name(event.key))

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                if math.dist((mx, my), stick_center) <= STICK_RADIUS:
                    dragging_stick = True
                    knob = pointer_vector(mx - stick_center[0], my - stick_center[1], STICK_RADIUS)
                    sim.inputs.set_pointer(mx - stick_center[0], my - stick_center[1], STICK_RADIUS)
                elif math.dist((mx, my), button_center) <= BUTTON_RADIUS:
                    button_down = True
                    sim.inputs.set_action(True)

            elif event.type == pygame.MOUSEMOTION and dragging_stick:
                mx, my = event.pos
                knob = pointer_vector(mx - stick_center[0], my - stick_center[1], STICK_RADIUS)
                sim.inputs.set_pointer(mx - stick_center[0], my - stick_center[1], STICK_RADIUS)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if dragging_stick:
                    dragging_stick = False
                    knob = (0.0, 0.0)
                    sim.inputs.release_pointer()
                if button_down:
                    button_down = False
                    sim.inputs.set_action(False)

        # --- Tick ---
        while accumulator >= tick_interval:
            sim.step()
            accumulator -= tick_interval
        if accumulator > tick_interval * 4:
            accumulator = tick_interval * 2

        # --- Render ---
        snap = sim.snapshot
        shake = round((random.random() - 0.5) * 5) if snap.busy else 0
        offset = (shake, shake)

        screen.fill(BG_COLOR)
        draw_site(screen, snap, config, offset)
        draw_debris(screen, snap, offset)
        draw_particles(screen, snap, offset)
        draw_robot(screen, snap, TOOLS[snap.tool].color, offset)

        draw_toolbar(screen, font, snap)
        draw_status(screen, font, snap)
        draw_notice(screen, font, snap)
        draw_touch_controls(screen, stick_center, knob, button_center, button_down)
        draw_title(screen, big_font, font, snap)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
