"""Input buffer written by device handlers and read once per tick.

Keys are identified by name (``"w"``, ``"up"``, ``"space"``) so the buffer
does not depend on any windowing library. Pointer input is the latest
drag vector; key input is the set of currently held keys.
"""
from __future__ import annotations

import math

from relining.types import ControlFrame, Point

UP_KEYS = frozenset({"w", "up"})
DOWN_KEYS = frozenset({"s", "down"})
LEFT_KEYS = frozenset({"a", "left"})
RIGHT_KEYS = frozenset({"d", "right"})
ACTION_KEYS = frozenset({"space"})


def pointer_vector(dx: float, dy: float, max_radius: float) -> Point:
    """Normalize a drag offset by the stick radius, clamped to the unit disc."""
    if max_radius <= 0:
        return (0.0, 0.0)
    dist = math.hypot(dx, dy)
    if dist > max_radius:
        dx = dx / dist * max_radius
        dy = dy / dist * max_radius
    return (dx / max_radius, dy / max_radius)


class InputBuffer:

    def __init__(self) -> None:
        self._held: set[str] = set()
        self._pointer: Point = (0.0, 0.0)
        self._action_button = False

    def press(self, key: str) -> None:
        self._held.add(key.lower())

    def release(self, key: str) -> None:
        self._held.discard(key.lower())

    def is_held(self, key: str) -> bool:
        return key.lower() in self._held

    def set_pointer(self, dx: float, dy: float, max_radius: float = 1.0) -> None:
        self._pointer = pointer_vector(dx, dy, max_radius)

    def release_pointer(self) -> None:
        self._pointer = (0.0, 0.0)

    def set_action(self, held: bool) -> None:
        """On-screen action button, independent of the keyboard."""
        self._action_button = held

    def clear(self) -> None:
        self._held.clear()
        self._pointer = (0.0, 0.0)
        self._action_button = False

    def keyboard_vector(self) -> Point:
        dx = 0.0
        dy = 0.0
        if self._held & UP_KEYS:
            dy -= 1.0
        if self._held & DOWN_KEYS:
            dy += 1.0
        if self._held & LEFT_KEYS:
            dx -= 1.0
        if self._held & RIGHT_KEYS:
            dx += 1.0
        return (dx, dy)

    def frame(self) -> ControlFrame:
        kx, ky = self.keyboard_vector()
        px, py = self._pointer
        return ControlFrame(
            vector=(kx + px, ky + py),
            action=bool(self._held & ACTION_KEYS) or self._action_button,
        )
