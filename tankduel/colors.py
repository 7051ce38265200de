"""Game palette."""

from __future__ import annotations

Color = tuple[float, float, float]

SKY = (51 / 255, 153 / 255, 255 / 255)
TERRAIN = (255 / 255, 255 / 255, 151 / 255)
TRACKS = (140 / 255, 142 / 255, 88 / 255)
BODY_YELLOW = (202 / 255, 141 / 255, 22 / 255)
BODY_GREEN = (120 / 255, 134 / 255, 107 / 255)
AMMO = (64 / 255, 64 / 255, 64 / 255)
PREAD = (255 / 255, 255 / 255, 255 / 255)
HEALTH = (255 / 255, 0 / 255, 255 / 255)
FRAME = (102 / 255, 0 / 255, 102 / 255)


def sky_color() -> Color:
    """Background sky colour."""
    return SKY


def terrain_color() -> Color:
    """Ground colour."""
    return TERRAIN


def tracks_color() -> Color:
    """Tank tracks and cannon colour."""
    return TRACKS


def tank_body_yellow_color() -> Color:
    """Body colour of the first tank."""
    return BODY_YELLOW


def tank_body_green_color() -> Color:
    """Body colour of the second tank."""
    return BODY_GREEN


def ammo_color() -> Color:
    """Projectile colour."""
    return AMMO


def pread_color() -> Color:
    """Trajectory preview colour."""
    return PREAD


def health() -> Color:
    """Health bar fill colour."""
    return HEALTH


def frame() -> Color:
    """Health bar frame colour."""
    return FRAME