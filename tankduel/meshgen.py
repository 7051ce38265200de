"""Geometry for the game's sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from tankduel import colors
from tankduel.colors import Color
from tankduel.vertex import VertexFormat

SPRITE_NORMAL = (0.2, 0.8, 0.6)


@dataclass
class Mesh:
    """An indexed triangle mesh."""

    name: str
    vertices: list[VertexFormat] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def nr_indices(self) -> int:
        """Number of indices to draw."""
        return len(self.indices)


def _quad(corners: list[tuple[float, float]], color: Color) -> list[VertexFormat]:
    return [VertexFormat((x, y, 0.0), color, SPRITE_NORMAL) for x, y in corners]


_QUAD_INDICES = [0, 1, 2, 0, 3, 2]


def _fan(points: list[tuple[float, float]], color: Color) -> list[VertexFormat]:
    centre = VertexFormat((0.0, 0.0, 0.0), color, SPRITE_NORMAL)
    return [centre] + [VertexFormat((x, y, 0.0), color, SPRITE_NORMAL) for x, y in points]


def _semi_circle(color: Color) -> tuple[list[VertexFormat], list[int]]:
    step = math.pi / 180
    points = [(math.cos(i * step), math.sin(i * step)) for i in range(181)]
    indices = [k for i in range(1, 181) for k in (0, i, i + 1)]
    return _fan(points, color), indices


def _circle(color: Color) -> tuple[list[VertexFormat], list[int]]:
    step = 2 * math.pi / 360
    points = [(math.cos(i * step), math.sin(i * step)) for i in range(360)]
    indices = [k for i in range(1, 361) for k in (0, i, i % 360 + 1)]
    indices += [0, 360, 1]
    return _fan(points, color), indices


class MeshGenerator:
    """Builds the sprite meshes into a shared name-to-mesh mapping."""

    def __init__(self, meshes: dict[str, Mesh]) -> None:
        self.meshes = meshes

    def create_mesh(self, name: str, vertices: list[VertexFormat], indices: list[int]) -> Mesh:
        """Store a mesh under name and return it."""
        mesh = Mesh(name, list(vertices), list(indices))
        self.meshes[name] = mesh
        return mesh

    def create_base_square_mesh(self) -> Mesh:
        """Unit square hanging below the origin, used for terrain columns."""
        vertices = _quad([(0, 0), (1, 0), (1, -1), (0, -1)], colors.terrain_color())
        return self.create_mesh("square", vertices, _QUAD_INDICES)

    def create_tracks_mesh(self) -> Mesh:
        """Trapezoid for the tank tracks."""
        vertices = _quad([(1, 0), (-1, 0), (-2, 1), (2, 1)], colors.tracks_color())
        return self.create_mesh("tracks", vertices, _QUAD_INDICES)

    def create_main_tank_desert_yellow_box_mesh(self) -> Mesh:
        """Hull of the yellow tank."""
        vertices = _quad([(2, 0), (-2, 0), (-1.3, 1), (1.3, 1)], colors.tank_body_yellow_color())
        return self.create_mesh("desert_yellow_body", vertices, _QUAD_INDICES)

    def create_desert_yellow_semi_circle_mesh(self) -> Mesh:
        """Turret dome of the yellow tank."""
        vertices, indices = _semi_circle(colors.tank_body_yellow_color())
        return self.create_mesh("desert_yellow_semi_circle", vertices, indices)

    def create_main_tank_camo_green_box_mesh(self) -> Mesh:
        """Hull of the green tank."""
        vertices = _quad([(2, 0), (-2, 0), (-1.3, 1), (1.3, 1)], colors.tank_body_green_color())
        return self.create_mesh("camo_green_body", vertices, _QUAD_INDICES)

    def create_camo_green_circle_mesh(self) -> Mesh:
        """Turret dome of the green tank."""
        vertices, indices = _semi_circle(colors.tank_body_green_color())
        return self.create_mesh("camo_green_semi_circle", vertices, indices)

    def create_cannon_mesh(self) -> Mesh:
        """Rectangle for the cannon barrel."""
        vertices = _quad([(0, -1), (1, -1), (1, 1), (0, 1)], colors.tracks_color())
        return self.create_mesh("cannon", vertices, _QUAD_INDICES)

    def create_circle_mesh(self) -> Mesh:
        """Unit disc for shells."""
        vertices, indices = _circle(colors.ammo_color())
        return self.create_mesh("circle", vertices, indices)

    def create_white_circle_mesh(self) -> Mesh:
        """Unit disc for trajectory preview dots."""
        vertices, indices = _circle(colors.pread_color())
        return self.create_mesh("white_circle", vertices, indices)

    def create_health_square(self, color: Color, name: str) -> Mesh:
        """Unit square of the given colour, used for health bars."""
        vertices = _quad([(0, 0), (1, 0), (1, -1), (0, -1)], color)
        return self.create_mesh(name, vertices, _QUAD_INDICES)

    def create_all(self) -> dict[str, Mesh]:
        """Build every sprite the game draws."""
        self.create_base_square_mesh()
        self.create_tracks_mesh()
        self.create_main_tank_desert_yellow_box_mesh()
        self.create_desert_yellow_semi_circle_mesh()
        self.create_main_tank_camo_green_box_mesh()
        self.create_camo_green_circle_mesh()
        self.create_cannon_mesh()
        self.create_circle_mesh()
        self.create_white_circle_mesh()
        self.create_health_square(colors.health(), "health")
        self.create_health_square(colors.frame(), "frame")
        return self.meshes