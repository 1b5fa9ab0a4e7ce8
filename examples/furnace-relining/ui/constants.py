"""Layout, color, and rendering constants."""
from __future__ import annotations

FPS = 60

# On-screen stick (bottom left) and action button (bottom right)
STICK_RADIUS = 60
STICK_KNOB_RADIUS = 25
STICK_OFFSET = 100
BUTTON_RADIUS = 45
BUTTON_OFFSET = 90

# Colors
BG_COLOR = (18, 18, 18)
SHELL_COLOR = (55, 71, 79)
BRICK_RED = (141, 110, 99)
BRICK_BROKEN = (62, 39, 35)
STEEL_GREY = (207, 216, 220)
ORANGE = (255, 87, 34)
LAVA = (255, 61, 0)
LASER_OFF = (160, 40, 40)
LASER_ON = (0, 230, 0)
TEXT_COLOR = (230, 230, 230)
TEXT_DIM = (140, 140, 150)
PANEL_BG = (0, 0, 0, 170)

# Ring colors by segment state
RING_COLORS: dict[str, tuple[int, int, int]] = {
    "empty": (40, 40, 44),
    "molded": (120, 130, 140),
    "filled": (176, 190, 197),
    "concrete": (220, 210, 200),
}

# Particle kind -> color
PARTICLE_COLORS: dict[str, tuple[int, int, int]] = {
    "spark": ORANGE,
    "slurry": (204, 204, 204),
    "glow": (255, 235, 59),
    "dust": (255, 255, 255),
}

DEBRIS_COLOR = (93, 64, 55)
