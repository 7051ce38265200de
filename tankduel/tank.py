"""Tanks standing on a height-field terrain, and the shells they fire."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

import numpy as np

from tankduel import transform2d
from tankduel.ammo import Ammo

SHELL_SPEED = 7.0
SHELL_GRAVITY = 0.09
FIRE_COOLDOWN = 5.0
CRATER_RADIUS = 20.0
HIT_RADIUS_SQUARED = 400.0
MAX_HEALTH = 100.0


@dataclass
class Terrain:
    """Height samples: ys[i] is the ground height at xs[i]."""

    xs: list[float]
    ys: list[float]
    pixel_frequency: float = 1.0

    def _segment(self, x: float) -> tuple[int, int]:
        """Indices of the two samples enclosing x."""
        a = math.floor(x / self.pixel_frequency)
        b = math.ceil(x / self.pixel_frequency)
        if a == b:
            a -= 1
        if a == -1:
            a, b = 0, 1
        return a, b

    def _dig(self, a: int, b: int, impact_x: float, impact_y: float) -> None:
        """Carve a round crater of CRATER_RADIUS around the impact point."""
        xs, ys = self.xs, self.ys
        r = CRATER_RADIUS
        while (
            a >= 0
            and b < len(xs)
            and impact_x - xs[a] < r
            and xs[b] - impact_x < r
        ):
            depth_b = impact_y - math.sin(math.acos((xs[b] - impact_x) / r)) * r
            if ys[a] >= depth_b:
                ys[a] = impact_y - math.sin(math.acos((impact_x - xs[a]) / r)) * r
            if ys[b] >= depth_b:
                ys[b] = depth_b
            a -= 1
            b += 1


def _hit_offset(px: float, py: float, angle: float, ax: float, ay: float) -> tuple[float, float]:
    """Point (ax, ay) relative to a tank's hit box centre, in the tank's frame."""
    dx = px - ax - 24.0 * math.sin(angle)
    dy = py - ay + 24.0 * math.cos(angle)
    c, s = math.cos(-angle), math.sin(-angle)
    return dx * c - dy * s, dx * s + dy * c


@dataclass
class Tank:
    """A tank driving on the shared terrain."""

    terrain: Terrain
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    cannon_angle: float = 0.0
    ammo_x: float = 0.0
    ammo_y: float = 0.0
    ammo_angle: float = 0.0
    fire_cooldown: float = 0.0
    health: float = MAX_HEALTH
    alive: bool = True
    flying_ammo: bool = False
    y_subtract: float = 5.0
    shells: list[Ammo] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def tank_y(self, tank_x: float) -> float:
        """Ground height under tank_x, lowered by y_subtract."""
        a, b = self.terrain._segment(tank_x)
        xs, ys = self.terrain.xs, self.terrain.ys
        t = (tank_x - xs[a]) / (xs[b] - xs[a])
        return ys[a] + t * (ys[b] - ys[a]) - self.y_subtract

    def tank_angle(self, tank_x: float) -> float:
        """Slope angle of the terrain segment under tank_x."""
        a, b = self.terrain._segment(tank_x)
        xs, ys = self.terrain.xs, self.terrain.ys
        return math.atan2(ys[b] - ys[a], xs[b] - xs[a])

    def _placed(self, forward: float, side: float = 0.0) -> np.ndarray:
        s, c = math.sin(self.angle), math.cos(self.angle)
        return transform2d.identity() @ transform2d.translate(
            self.x - forward * s - side * c, self.y + forward * c - side * s
        )

    def tracks_matrix(self) -> np.ndarray:
        """Model matrix of the tracks."""
        return self._placed(0.0) @ transform2d.rotate(self.angle) @ transform2d.scale(20, 15)

    def body_matrix(self) -> np.ndarray:
        """Model matrix of the hull."""
        return self._placed(14.0) @ transform2d.rotate(self.angle) @ transform2d.scale(25, 20)

    def turret_matrix(self) -> np.ndarray:
        """Model matrix of the turret dome."""
        return self._placed(34.0) @ transform2d.rotate(self.angle) @ transform2d.scale(20, 20)

    def cannon_matrix(self) -> np.ndarray:
        """Model matrix of the cannon barrel."""
        return (
            self._placed(34.0)
            @ transform2d.rotate(self.cannon_angle)
            @ transform2d.translate(19 * math.cos(self.angle), 19 * math.sin(self.angle))
            @ transform2d.rotate(self.angle)
            @ transform2d.scale(40, 4)
        )

    def health_matrix(self) -> np.ndarray:
        """Model matrix of the health bar fill, proportional to health."""
        return (
            self._placed(70.0, 30.0)
            @ transform2d.rotate(self.angle)
            @ transform2d.scale(60.0 * self.health / 100, 5)
        )

    def health_frame_matrix(self) -> np.ndarray:
        """Model matrix of the health bar frame."""
        return (
            self._placed(62.0, 33.0)
            @ transform2d.rotate(self.angle)
            @ transform2d.scale(66.0, -11)
        )

    def shoot_ammo(self) -> None:
        """Fire a shell from the cannon mouth and start the cooldown."""
        self.shells.append(
            Ammo(
                SHELL_SPEED,
                x_start=self.ammo_x,
                y_start=self.ammo_y,
                angle=self.ammo_angle,
            )
        )
        self.fire_cooldown = FIRE_COOLDOWN
        self.flying_ammo = True

    def update_ammo_pos(self, delta_time: float, enemy: Tank) -> None:
        """Move the cannon mouth and the shells, resolving their hits."""
        s, c = math.sin(self.angle), math.cos(self.angle)
        self.ammo_x = self.x - 34.0 * s + 55 * math.cos(self.cannon_angle + self.angle)
        self.ammo_y = self.y + 34.0 * c + 55 * math.sin(self.cannon_angle + self.angle)
        self.ammo_angle = self.angle + self.cannon_angle

        if self.fire_cooldown > 0:
            self.fire_cooldown = max(0.0, self.fire_cooldown - delta_time / 10)

        if not self.flying_ammo:
            return

        survivors = []
        for shell in self.shells:
            shell.update_position(delta_time)
            if not self._resolve_shell(shell, enemy):
                survivors.append(shell)
        self.shells[:] = survivors
        if not self.shells:
            self.flying_ammo = False

    def _damage(self) -> float:
        return 4 * abs(self.rng.randrange(5))

    def _resolve_shell(self, shell: Ammo, enemy: Tank) -> bool:
        """Apply the effect of a shell; tell whether it is spent."""
        if shell.x < 0:
            return True
        terrain = self.terrain
        a, b = terrain._segment(shell.x)
        if b >= len(terrain.xs):
            return True

        xs, ys = terrain.xs, terrain.ys
        t = (shell.x - xs[a]) / (xs[b] - xs[a])
        impact_x = xs[a] * (1 - t) + xs[b] * t
        impact_y = ys[a] * (1 - t) + ys[b] * t

        ex, ey = _hit_offset(enemy.x, enemy.y, enemy.angle, shell.x, shell.y)
        mx, my = _hit_offset(self.x, self.y, self.angle, shell.x, shell.y)

        if enemy.alive and (ex / 2.4) ** 2 + (ey / 1.4) ** 2 < HIT_RADIUS_SQUARED:
            enemy.health -= self._damage()
            print(f"Hit!! Remaing health {enemy.health:g}")
            return True
        if (mx / 2) ** 2 + (my / 1.2) ** 2 < HIT_RADIUS_SQUARED:
            self.health -= self._damage()
            print(f"SelfHit!! Remaing health {self.health:g}")
            return True
        if shell.y - impact_y < 5:
            print("Terrain hit!")
            terrain._dig(a, b, impact_x, impact_y)
            return True
        return False

    def pred_x(self, t: float) -> float:
        """Predicted x of a shell fired now, after time t."""
        return self.ammo_x + SHELL_SPEED * math.cos(self.ammo_angle) * t

    def pred_y(self, t: float) -> float:
        """Predicted y of a shell fired now, after time t."""
        return (
            self.ammo_y
            + SHELL_SPEED * math.sin(self.ammo_angle) * t
            - SHELL_GRAVITY * t * t / 2
        )

    def pred_matrix(self, x: float, y: float) -> np.ndarray:
        """Model matrix of one trajectory preview dot."""
        return (
            transform2d.identity()
            @ transform2d.translate(x, y)
            @ transform2d.scale(1.5, 1.5)
        )