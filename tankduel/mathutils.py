"""Small numeric helpers: interpolation, angle conversion, quaternions and bit flags."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple

TO_RADIANS = 0.0174532925194444
TO_DEGREES = 57.29577951308233

VEC3_UP = (0.0, 1.0, 0.0)
VEC3_DOWN = (0.0, -1.0, 0.0)
VEC3_LEFT = (-1.0, 0.0, 0.0)
VEC3_RIGHT = (1.0, 0.0, 0.0)
VEC3_FORWARD = (0.0, 0.0, 1.0)
VEC3_BACKWARD = (0.0, 0.0, -1.0)


class Quat(NamedTuple):
    """A rotation quaternion stored as (w, x, y, z)."""

    w: float
    x: float
    y: float
    z: float


def lerp(v0: float, v1: float, t: float) -> float:
    """Linearly interpolate between v0 and v1."""
    return v0 + (v1 - v0) * t


def upper_bound(a: int, b: int) -> int:
    """Integer division of a by b, rounded up."""
    return (a + b - 1) // b


def radians(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * TO_RADIANS


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * TO_DEGREES


def normalized_rgb(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Map 0-255 colour channels to the 0-1 range."""
    return (r / 255.0, g / 255.0, b / 255.0)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def axis_angle(x: float, y: float, z: float, angle360: float) -> Quat:
    """Build a quaternion rotating angle360 degrees around the axis (x, y, z)."""
    t = radians(angle360) / 2.0
    sin_t = math.sin(t)
    return Quat(math.cos(t), x * sin_t, y * sin_t, z * sin_t)


def get_axis_angle(rotation: Quat, precision: int = 0) -> tuple[float, float, float, float]:
    """Return (axis_x, axis_y, axis_z, angle_degrees) of a quaternion.

    The angle is the arc cosine of w expressed in degrees and rounded; when
    precision is non-zero the axis components are rounded to 1/precision.
    """
    w = max(-1.0, min(1.0, rotation.w))
    angle = math.acos(w)
    if angle == 0:
        return (1.0, 0.0, 0.0, 0.0)

    t = math.sqrt(1 - w * w)
    ax, ay, az = rotation.x / t, rotation.y / t, rotation.z / t
    if precision:
        ax, ay, az = (_round_half_away(c * precision) / precision for c in (ax, ay, az))
    return (ax, ay, az, _round_half_away(degrees(angle)))


def _format_component(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def format_vector(values: Iterable[float]) -> str:
    """Format a vector as "[a b c]"."""
    return "[" + " ".join(_format_component(v) for v in values) + "]"


def set_bit(item: int, bit: int) -> int:
    """Return item with the given bit set."""
    return item | (1 << bit)


def clear_bit(item: int, bit: int) -> int:
    """Return item with the given bit cleared."""
    return item & ~(1 << bit)


def is_bit_set(item: int, bit: int) -> bool:
    """Tell whether the given bit of item is set."""
    return (item & (1 << bit)) != 0