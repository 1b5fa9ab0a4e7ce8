"""Site geometry and tuning constants."""

from __future__ import annotations

from dataclasses import dataclass

from relining.types import Point

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768


@dataclass(frozen=True)
class SiteConfig:
    """Work-site layout derived from the viewport.

    Distances are in screen units. ``speed`` is expressed per second so that
    movement scales with the engine's ``dt``; at 60 ticks per second it moves
    the robot 8 units per tick.
    """

    width: float
    height: float
    inner_radius: float
    outer_radius: float
    robot_min_radius: float
    robot_max_radius: float
    margin: float = 50.0
    speed: float = 480.0
    deadzone: float = 0.1
    wedge_tolerance: float = 200.0
    ring_tolerance: float = 100.0
    vacuum_lock_range: float = 350.0
    vacuum_sweep_range: float = 400.0
    heat_inner_slack: float = 20.0
    heat_outer_slack: float = 80.0
    debris_per_wedge: int = 6
    debris_scatter: float = 80.0
    notice_seconds: float = 4.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport width and height must be positive")
        if not 0 < self.inner_radius < self.outer_radius:
            raise ValueError("radii must satisfy 0 < inner_radius < outer_radius")
        if not 0 < self.robot_min_radius <= self.robot_max_radius:
            raise ValueError(
                "robot band must satisfy 0 < robot_min_radius <= robot_max_radius"
            )

    @classmethod
    def for_viewport(
        cls, width: float = DEFAULT_WIDTH, height: float = DEFAULT_HEIGHT
    ) -> SiteConfig:
        min_dim = min(width, height)
        inner = min_dim * 0.15
        outer = min_dim * 0.40
        return cls(
            width=width,
            height=height,
            inner_radius=inner,
            outer_radius=outer,
            robot_min_radius=inner + 20.0,
            robot_max_radius=outer + 40.0,
        )

    @property
    def center(self) -> Point:
        return (self.width / 2, self.height / 2)

    @property
    def midline_radius(self) -> float:
        """Radius halfway through the lining band."""
        return (self.inner_radius + self.outer_radius) / 2
