"""Homogeneous 3x3 matrices for 2D transforms."""

from __future__ import annotations

import math

import numpy as np


def identity() -> np.ndarray:
    """Return the 3x3 identity matrix."""
    return np.identity(3)


def translate(tx: float, ty: float) -> np.ndarray:
    """Translation by (tx, ty)."""
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]])


def scale(sx: float, sy: float) -> np.ndarray:
    """Scaling by sx along x and sy along y."""
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


def rotate(radians: float) -> np.ndarray:
    """Counter-clockwise rotation by the given angle in radians."""
    c, s = math.cos(radians), math.sin(radians)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def shear(factor: float) -> np.ndarray:
    """Vertical shear: y grows by factor times x."""
    return np.array([[1.0, 0.0, 0.0], [factor, 1.0, 0.0], [0.0, 0.0, 1.0]])


def apply(matrix: np.ndarray, x: float, y: float) -> tuple[float, float]:
    """Transform the point (x, y) by the matrix."""
    px, py, pw = matrix @ np.array([x, y, 1.0])
    return (float(px / pw), float(py / pw))