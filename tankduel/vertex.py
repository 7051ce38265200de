"""Vertex layouts used by meshes."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

NUM_BONES_PER_VERTEX = 4

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]


@dataclass
class VertexFormat:
    """A vertex with position, colour, normal and texture coordinate."""

    position: Vec3
    color: Vec3 = (1.0, 1.0, 1.0)
    normal: Vec3 = (0.0, 1.0, 0.0)
    text_coord: Vec2 = (0.0, 0.0)


@dataclass
class VertexBoneData:
    """Up to four bone influences on one vertex."""

    ids: list[int] = field(default_factory=lambda: [0] * NUM_BONES_PER_VERTEX)
    weights: list[float] = field(default_factory=lambda: [0.0] * NUM_BONES_PER_VERTEX)

    def reset(self) -> None:
        """Clear all bone influences."""
        self.ids = [0] * NUM_BONES_PER_VERTEX
        self.weights = [0.0] * NUM_BONES_PER_VERTEX

    def add_bone_data(self, bone_id: int, weight: float) -> None:
        """Store the influence in the first slot whose weight is zero."""
        for slot, current in enumerate(self.weights):
            if current == 0.0:
                self.ids[slot] = bone_id
                self.weights[slot] = weight
                return
        raise ValueError(f"vertex already has {NUM_BONES_PER_VERTEX} bone influences")


@dataclass
class BoneInfo:
    """Offset and final transforms of one bone."""

    bone_offset: np.ndarray = field(default_factory=lambda: np.identity(4))
    final_transformation: np.ndarray = field(default_factory=lambda: np.identity(4))