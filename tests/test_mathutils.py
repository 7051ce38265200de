import math

import pytest

from tankduel.mathutils import (
    TO_DEGREES,
    TO_RADIANS,
    Quat,
    axis_angle,
    clear_bit,
    degrees,
    format_vector,
    get_axis_angle,
    is_bit_set,
    lerp,
    normalized_rgb,
    radians,
    set_bit,
    upper_bound,
)


@pytest.mark.parametrize("v0,v1", [(0.0, 10.0), (-3.5, 7.25), (4.0, 4.0)])
def test_lerp_endpoints_and_midpoint(v0, v1):
    assert lerp(v0, v1, 0) == v0
    assert lerp(v0, v1, 1) == pytest.approx(v1)
    assert lerp(v0, v1, 0.5) == pytest.approx((v0 + v1) / 2)


@pytest.mark.parametrize("a", range(1, 40))
@pytest.mark.parametrize("b", [1, 3, 8])
def test_upper_bound_is_ceiling(a, b):
    q = upper_bound(a, b)
    assert q * b >= a
    assert (q - 1) * b < a


def test_radians_uses_source_constant():
    assert radians(1) == TO_RADIANS
    assert degrees(1) == TO_DEGREES
    assert radians(180) == pytest.approx(math.pi)


@pytest.mark.parametrize("angle", [0.0, 15.0, 90.0, -270.0])
def test_degrees_radians_round_trip(angle):
    assert degrees(radians(angle)) == pytest.approx(angle)


def test_normalized_rgb_full_channels():
    assert normalized_rgb(255, 255, 255) == (1.0, 1.0, 1.0)
    r, g, b = normalized_rgb(51, 153, 255)
    assert (r, g, b) == (51 / 255, 153 / 255, 1.0)


def test_axis_angle_zero_is_identity():
    assert axis_angle(1, 0, 0, 0) == Quat(1.0, 0.0, 0.0, 0.0)


@pytest.mark.parametrize("angle", [10.0, 45.0, 120.0])
def test_axis_angle_is_unit(angle):
    q = axis_angle(0.0, 0.6, 0.8, angle)
    assert math.sqrt(sum(c * c for c in q)) == pytest.approx(1.0)


def test_get_axis_angle_identity():
    assert get_axis_angle(Quat(1.0, 0.0, 0.0, 0.0)) == (1.0, 0.0, 0.0, 0.0)


def test_get_axis_angle_recovers_axis():
    q = axis_angle(0.0, 1.0, 0.0, 90.0)
    x, y, z, half_angle = get_axis_angle(q)
    assert (x, y, z) == pytest.approx((0.0, 1.0, 0.0))
    assert half_angle * 2 == 90


def test_get_axis_angle_precision_rounds_axis():
    q = axis_angle(0.6, 0.8, 0.0, 60.0)
    x, y, z, _ = get_axis_angle(q, 10)
    assert (x, y, z) == pytest.approx((0.6, 0.8, 0.0))


def test_format_vector():
    assert format_vector([1, 2]) == "[1 2]"
    assert format_vector((0.5, 1.5, 2)) == "[0.5 1.5 2]"


@pytest.mark.parametrize("bit", range(8))
def test_bits_round_trip(bit):
    value = set_bit(0, bit)
    assert is_bit_set(value, bit)
    assert not is_bit_set(value, (bit + 1) % 8)
    assert clear_bit(value, bit) == 0