"""Ballistic projectile."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from tankduel import transform2d

GRAVITY = -0.09
AMMO_SCALE = 3.0


@dataclass
class Ammo:
    """A shell following a parabolic path from (x_start, y_start)."""

    init_speed: float
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    x_start: float = 0.0
    y_start: float = 0.0
    acceleration: float = GRAVITY
    time: float = 0.0

    def model_matrix(self) -> np.ndarray:
        """Model matrix placing the shell sprite at its position."""
        return (
            transform2d.identity()
            @ transform2d.translate(self.x, self.y)
            @ transform2d.scale(AMMO_SCALE, AMMO_SCALE)
        )

    def update_position(self, delta_time: float) -> None:
        """Advance the flight time and recompute the position."""
        self.time += delta_time
        t = self.time
        self.x = self.x_start + self.init_speed * math.cos(self.angle) * t
        self.y = (
            self.y_start
            + self.init_speed * math.sin(self.angle) * t
            + self.acceleration * t * t / 2
        )