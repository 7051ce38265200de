"""The two-player artillery duel: terrain, tanks, shells and controls."""

from __future__ import annotations

import math
import random
from typing import Callable, NamedTuple

import numpy as np

from tankduel import transform2d
from tankduel.ammo import Ammo
from tankduel.meshgen import Mesh, MeshGenerator
from tankduel.tank import Tank, Terrain
from tankduel.window import (
    KEY_A,
    KEY_B,
    KEY_D,
    KEY_DOWN,
    KEY_ENTER,
    KEY_F3,
    KEY_LEFT,
    KEY_M,
    KEY_O,
    KEY_RIGHT,
    KEY_S,
    KEY_SPACE,
    KEY_UP,
    KEY_W,
    InputState,
)
from tankduel.world import World

TERRAIN_AMPLITUDE = (0.1, 2.0, 1.0, 0.3, 0.7)
TERRAIN_FREQUENCY = (1.0, 2.4, 0.7, 0.7, 0.4)
TERRAIN_MIN_HEIGHT = 10.0
DRIVE_SPEED = 50.0
HIT_BOX_STEP = 5
PREVIEW_DOTS = 60
PREVIEW_STEP = 5
DRONE_STRIKE_FRAMES = 20
DRONE_STRIKE_CODE = (KEY_O, KEY_B, KEY_A, KEY_M, KEY_A)
BANNER = "=" * 53


class DrawCommand(NamedTuple):
    """One sprite to draw: the mesh name and its 2D model matrix."""

    mesh: str
    matrix: np.ndarray


def get_dif_angle(t1: float, t2: float) -> float:
    """Angle between two directions given by their signed angles."""
    if t1 < 0 and t2 < 0:
        return -t2 - t1
    if t1 < 0:
        return math.pi - t2 + t1
    if t2 < 0:
        return math.pi - t1 + t2
    return math.pi - t1 + t2


class Game(World):
    """Two tanks on a deformable terrain, each driven from one side of the keyboard.

    Every call to update records the sprites of the frame; draw_list returns them.
    """

    def __init__(
        self,
        window: InputState | None = None,
        clock: Callable[[], float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        window = window if window is not None else InputState()
        self.rng = rng if rng is not None else random.Random()
        self.resolution = window.props.resolution
        self.meshes: dict[str, Mesh] = {}
        self.mesh_generator = MeshGenerator(self.meshes)
        self.terrain = Terrain([], [], 1.0)
        self.terrain_amplitude = list(TERRAIN_AMPLITUDE)
        self.terrain_frequency = list(TERRAIN_FREQUENCY)
        self.terrain_small_threshold = 0.3
        self.tank_a = Tank(self.terrain, rng=self.rng)
        self.tank_b = Tank(self.terrain, rng=self.rng)
        self.show_hit_box = False
        self.dronestrike = False
        self._strike_frames = 0
        self._passcode = 0
        self._draw: list[DrawCommand] = []
        super().__init__(window, clock)

    # Setup

    def init(self) -> None:
        """Generate the terrain, build the meshes and place both tanks."""
        width, height = self.window.props.resolution
        self.resolution = (width, height)
        pixel_frequency = self.terrain.pixel_frequency

        self.terrain_frequency = [f * (width // 14) for f in TERRAIN_FREQUENCY]
        self.terrain_amplitude = [a * (height // 14) for a in TERRAIN_AMPLITUDE]

        count = int(width / pixel_frequency + 1)
        xs = [i * pixel_frequency for i in range(count)]
        ys = [
            height // 3
            - sum(a * math.sin(x / f) for a, f in zip(self.terrain_amplitude, self.terrain_frequency))
            for x in xs
        ]
        self.terrain.xs[:] = xs
        self.terrain.ys[:] = ys
        self.terrain_small_threshold = 0.02

        self.mesh_generator.create_all()

        self._place(self.tank_a, float(width // 4), math.pi / 12)
        self._place(self.tank_b, float(width - width // 4), math.pi - math.pi / 12)

    @staticmethod
    def _place(tank: Tank, x: float, cannon_angle: float) -> None:
        tank.x = x
        tank.y = tank.tank_y(x)
        tank.angle = tank.tank_angle(x)
        tank.cannon_angle = cannon_angle

    # Frame

    def draw_list(self) -> list[DrawCommand]:
        """Sprites recorded by the latest update, in drawing order."""
        return list(self._draw)

    def _emit(self, mesh: str, matrix: np.ndarray) -> None:
        self._draw.append(DrawCommand(mesh, matrix))

    def update(self, delta_time: float) -> None:
        """Advance the game by delta_time seconds and record the frame's sprites."""
        self._draw = []
        self._drone_strike()
        self._check_victory()

        ys = self.terrain.ys
        prev_x, prev_y = 0.0, ys[0]
        ys[0] = max(ys[0], TERRAIN_MIN_HEIGHT)
        ys[-1] = max(ys[-1], TERRAIN_MIN_HEIGHT)

        self._drive(self.tank_a, KEY_D, KEY_A, KEY_W, KEY_S, delta_time)
        self._drive(self.tank_b, KEY_RIGHT, KEY_LEFT, KEY_UP, KEY_DOWN, delta_time)

        if self.show_hit_box:
            self._draw_hit_boxes()

        prev_x, prev_y = self._draw_terrain(prev_x, prev_y)

        self._draw_tank(self.tank_a, "desert_yellow_semi_circle", "desert_yellow_body")
        self.tank_a.update_ammo_pos(delta_time * 100, self.tank_b)
        self._draw_shells(self.tank_a)

        self._draw_tank(self.tank_b, "camo_green_semi_circle", "camo_green_body")
        self.tank_b.update_ammo_pos(delta_time * 100, self.tank_a)
        self._draw_shells(self.tank_b)

    def _drone_strike(self) -> None:
        if not self.dronestrike:
            return
        if self._strike_frames >= DRONE_STRIKE_FRAMES:
            self._strike_frames = 0
            self.dronestrike = False
            return
        width, height = self.resolution
        dropped = 0
        while dropped < self.rng.randrange(100):
            self.tank_a.shells.append(
                Ammo(
                    min(8, self.rng.randrange(10)),
                    x_start=self.rng.randrange(width),
                    y_start=height,
                    angle=-math.pi / 2,
                )
            )
            self.tank_a.flying_ammo = True
            dropped += 1
        self._strike_frames += 1

    def _check_victory(self) -> None:
        for loser, winner in ((self.tank_a, 2), (self.tank_b, 1)):
            if loser.health <= 0 and loser.alive:
                print(f"\n\n{BANNER}\nVICTORY FOR PLAYER {winner}!")
                loser.alive = False

    def _drive(
        self, tank: Tank, forward: int, backward: int, raise_key: int, lower_key: int, dt: float
    ) -> None:
        hold = self.window.key_hold
        width = self.resolution[0]
        angle = tank.angle
        if hold(forward) and not hold(backward) and tank.x < width - 2:
            tank.x += DRIVE_SPEED * dt * (math.cos(angle) if angle >= 0 else 1 - math.sin(angle))
        if hold(backward) and not hold(forward) and tank.x > 2:
            tank.x -= DRIVE_SPEED * dt * (math.cos(angle) if angle < 0 else 1 + math.sin(angle))
        if hold(raise_key) and tank.cannon_angle < math.pi - math.pi / 16:
            tank.cannon_angle += dt / 5
        if hold(lower_key) and tank.cannon_angle > math.pi / 16:
            tank.cannon_angle -= dt / 5
        tank.y = tank.tank_y(tank.x)
        tank.angle = tank.tank_angle(tank.x)

    def _draw_hit_boxes(self) -> None:
        width, height = self.resolution
        gx, gy = np.meshgrid(
            np.arange(0, width, HIT_BOX_STEP), np.arange(0, height, HIT_BOX_STEP), indexing="ij"
        )
        counts = np.zeros(gx.shape, dtype=int)
        for tank in (self.tank_a, self.tank_b):
            if not tank.alive:
                continue
            a = tank.angle
            dx = tank.x - gx - 24.0 * math.sin(a)
            dy = tank.y - gy + 24.0 * math.cos(a)
            c, s = math.cos(-a), math.sin(-a)
            hx = dx * c - dy * s
            hy = dx * s + dy * c
            counts += (hx / 2.4) ** 2 + (hy / 1.5) ** 2 < 400
        for px, py, n in zip(gx.ravel(), gy.ravel(), counts.ravel()):
            for _ in range(int(n)):
                self._emit(
                    "circle",
                    transform2d.identity()
                    @ transform2d.translate(float(px), float(py))
                    @ transform2d.scale(2, 2),
                )

    def _draw_terrain(self, prev_x: float, prev_y: float) -> tuple[float, float]:
        xs, ys = self.terrain.xs, self.terrain.ys
        for i in range(1, len(xs) - 1):
            avg = (ys[i - 1] + ys[i] + ys[i + 1]) / 3
            if abs(avg - ys[i]) > self.terrain_small_threshold:
                ys[i] += (avg - ys[i]) / 2
            ys[i] = max(ys[i], TERRAIN_MIN_HEIGHT)

            cur_x = xs[i]
            self._emit(
                "square",
                transform2d.identity()
                @ transform2d.translate(prev_x, prev_y)
                @ transform2d.shear((ys[i] - prev_y) / (cur_x - prev_x))
                @ transform2d.scale(cur_x - prev_x, max(prev_y, ys[i])),
            )
            prev_x, prev_y = cur_x, ys[i]
        return prev_x, prev_y

    def _draw_tank(self, tank: Tank, turret_mesh: str, body_mesh: str) -> None:
        if not tank.alive:
            return
        self._emit("cannon", tank.cannon_matrix())
        self._emit(turret_mesh, tank.turret_matrix())
        self._emit(body_mesh, tank.body_matrix())
        self._emit("tracks", tank.tracks_matrix())
        self._emit("health", tank.health_matrix())
        self._emit("frame", tank.health_frame_matrix())
        for step in range(1, PREVIEW_DOTS):
            t = step * PREVIEW_STEP
            self._emit("white_circle", tank.pred_matrix(tank.pred_x(t), tank.pred_y(t)))

    def _draw_shells(self, tank: Tank) -> None:
        if tank.flying_ammo:
            for shell in tank.shells:
                self._emit("circle", shell.model_matrix())

    # Input

    def on_key_press(self, key: int, mods: int) -> None:
        """Fire, toggle the hit-box overlay, or advance the drone-strike code."""
        if key == KEY_SPACE and self.tank_a.fire_cooldown == 0:
            self.tank_a.shoot_ammo()
        if key == KEY_ENTER and self.tank_b.fire_cooldown == 0:
            self.tank_b.shoot_ammo()
        if key == KEY_F3:
            self.show_hit_box = not self.show_hit_box

        if key == DRONE_STRIKE_CODE[0]:
            self._passcode = 1
        for stage in range(1, len(DRONE_STRIKE_CODE)):
            if key == DRONE_STRIKE_CODE[stage] and self._passcode == stage:
                if stage == len(DRONE_STRIKE_CODE) - 1:
                    self._passcode = 0
                    self.dronestrike = True
                else:
                    self._passcode = stage + 1
                break