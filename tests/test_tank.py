import math

import pytest

from tankduel import transform2d
from tankduel.ammo import Ammo
from tankduel.tank import Tank, Terrain


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value


def flat_terrain(n=201, height=10.0):
    return Terrain(xs=[float(i) for i in range(n)], ys=[height] * n)


def sloped_terrain(n=101):
    return Terrain(xs=[float(i) for i in range(n)], ys=[float(i) for i in range(n)])


def test_tank_y_on_flat_terrain():
    terrain = flat_terrain(height=50.0)
    tank = Tank(terrain)
    assert tank.tank_y(10.5) == pytest.approx(50.0 - tank.y_subtract)
    assert tank.tank_y(10.0) == pytest.approx(50.0 - tank.y_subtract)


def test_tank_y_interpolates_slope():
    tank = Tank(sloped_terrain())
    assert tank.tank_y(10.25) == pytest.approx(10.25 - tank.y_subtract)


def test_tank_angle_flat_and_slope():
    assert Tank(flat_terrain()).tank_angle(20.5) == pytest.approx(0.0)
    assert Tank(sloped_terrain()).tank_angle(20.5) == pytest.approx(math.pi / 4)


def test_tank_angle_at_origin_uses_first_segment():
    assert Tank(sloped_terrain()).tank_angle(0.0) == pytest.approx(math.pi / 4)


def test_tracks_matrix_places_origin_at_tank():
    tank = Tank(flat_terrain(), x=30.0, y=40.0)
    m = tank.tracks_matrix()
    assert transform2d.apply(m, 0, 0) == pytest.approx((30.0, 40.0))
    assert transform2d.apply(m, 1, 0) == pytest.approx((50.0, 40.0))


def test_body_and_turret_are_above_tank():
    tank = Tank(flat_terrain(), x=30.0, y=40.0)
    assert transform2d.apply(tank.body_matrix(), 0, 0) == pytest.approx((30.0, 54.0))
    assert transform2d.apply(tank.turret_matrix(), 0, 0) == pytest.approx((30.0, 74.0))


def test_health_bar_width_follows_health():
    tank = Tank(flat_terrain(), x=30.0, y=40.0)
    full = transform2d.apply(tank.health_matrix(), 1, 0)[0] - transform2d.apply(tank.health_matrix(), 0, 0)[0]
    tank.health = 50.0
    half = transform2d.apply(tank.health_matrix(), 1, 0)[0] - transform2d.apply(tank.health_matrix(), 0, 0)[0]
    assert full == pytest.approx(2 * half)


def test_health_frame_is_flipped_vertically():
    tank = Tank(flat_terrain(), x=30.0, y=40.0)
    m = tank.health_frame_matrix()
    assert transform2d.apply(m, 0, 1)[1] < transform2d.apply(m, 0, 0)[1]


def test_cannon_matrix_rotates_with_cannon_angle():
    tank = Tank(flat_terrain(), x=30.0, y=40.0, cannon_angle=math.pi / 2)
    base = transform2d.apply(tank.turret_matrix(), 0, 0)
    tip = transform2d.apply(tank.cannon_matrix(), 1, 0)
    assert tip[0] == pytest.approx(base[0])
    assert tip[1] > base[1]


def test_update_ammo_pos_sets_cannon_mouth():
    tank = Tank(flat_terrain(), x=30.0, y=40.0)
    enemy = Tank(flat_terrain(), x=150.0, y=5.0)
    tank.update_ammo_pos(0.0, enemy)
    assert tank.ammo_x == pytest.approx(30.0 + 55)
    assert tank.ammo_y == pytest.approx(40.0 + 34)
    assert tank.ammo_angle == pytest.approx(0.0)


def test_shoot_ammo_starts_cooldown_and_flight():
    tank = Tank(flat_terrain(), ammo_x=12.0, ammo_y=34.0, ammo_angle=0.5)
    tank.shoot_ammo()
    assert len(tank.shells) == 1
    shell = tank.shells[0]
    assert (shell.x_start, shell.y_start, shell.angle) == (12.0, 34.0, 0.5)
    assert shell.init_speed == 7
    assert tank.fire_cooldown == 5
    assert tank.flying_ammo is True


def test_cooldown_decreases_and_clamps():
    tank = Tank(flat_terrain(), x=30.0, y=5.0, fire_cooldown=5.0)
    enemy = Tank(flat_terrain(), x=150.0, y=5.0)
    tank.update_ammo_pos(10.0, enemy)
    assert tank.fire_cooldown == pytest.approx(5.0 - 10.0 / 10)
    tank.update_ammo_pos(1000.0, enemy)
    assert tank.fire_cooldown == 0.0


def test_shell_leaving_left_edge_is_removed():
    tank = Tank(flat_terrain(), x=100.0, y=5.0)
    enemy = Tank(flat_terrain(), x=190.0, y=5.0)
    tank.shells.append(Ammo(7, x_start=1.0, y_start=100.0, angle=math.pi))
    tank.flying_ammo = True
    tank.update_ammo_pos(1.0, enemy)
    assert tank.shells == []
    assert tank.flying_ammo is False


def test_shell_in_flight_is_kept():
    terrain = flat_terrain()
    tank = Tank(terrain, x=10.0, y=5.0)
    enemy = Tank(terrain, x=190.0, y=5.0)
    tank.shells.append(Ammo(7, x_start=100.0, y_start=150.0, angle=math.pi / 2))
    tank.flying_ammo = True
    tank.update_ammo_pos(1.0, enemy)
    assert len(tank.shells) == 1
    assert tank.shells[0].y > 150.0
    assert tank.flying_ammo is True


def test_shell_hitting_enemy_deals_damage():
    terrain = flat_terrain()
    tank = Tank(terrain, x=10.0, y=5.0, rng=FixedRng(3))
    enemy = Tank(terrain, x=150.0, y=5.0)
    tank.shells.append(Ammo(0, x_start=150.0, y_start=29.0))
    tank.flying_ammo = True
    tank.update_ammo_pos(0.01, enemy)
    assert enemy.health == pytest.approx(88.0)
    assert tank.health == 100
    assert tank.shells == []
    assert tank.flying_ammo is False


def test_dead_enemy_is_not_hit():
    terrain = flat_terrain()
    tank = Tank(terrain, x=10.0, y=5.0, rng=FixedRng(3))
    enemy = Tank(terrain, x=150.0, y=5.0, alive=False)
    tank.shells.append(Ammo(0, x_start=150.0, y_start=29.0))
    tank.flying_ammo = True
    tank.update_ammo_pos(0.01, enemy)
    assert enemy.health == 100
    assert len(tank.shells) == 1


def test_shell_hitting_self():
    terrain = flat_terrain()
    tank = Tank(terrain, x=50.0, y=5.0, rng=FixedRng(2))
    enemy = Tank(terrain, x=190.0, y=5.0)
    tank.shells.append(Ammo(0, x_start=50.0, y_start=29.0))
    tank.flying_ammo = True
    tank.update_ammo_pos(0.01, enemy)
    assert tank.health < 100
    assert enemy.health == 100
    assert tank.shells == []


def test_shell_hitting_ground_digs_crater():
    terrain = flat_terrain(height=10.0)
    tank = Tank(terrain, x=10.0, y=5.0)
    enemy = Tank(terrain, x=190.0, y=5.0)
    tank.shells.append(Ammo(0, x_start=100.0, y_start=12.0))
    tank.flying_ammo = True
    tank.update_ammo_pos(0.01, enemy)
    assert tank.shells == []
    assert terrain.ys[100] < 10.0
    assert min(terrain.ys) < 10.0
    assert terrain.ys[0] == 10.0
    assert terrain.ys[200] == 10.0
    assert terrain.ys[100] <= terrain.ys[90] <= 10.0
    assert enemy.health == 100 and tank.health == 100


def test_prediction_starts_at_cannon_mouth():
    tank = Tank(flat_terrain(), ammo_x=12.0, ammo_y=34.0, ammo_angle=0.3)
    assert tank.pred_x(0) == pytest.approx(12.0)
    assert tank.pred_y(0) == pytest.approx(34.0)


def test_prediction_matches_shell_flight():
    tank = Tank(flat_terrain(), ammo_x=12.0, ammo_y=34.0, ammo_angle=0.7)
    tank.shoot_ammo()
    shell = tank.shells[0]
    shell.update_position(25.0)
    assert tank.pred_x(25.0) == pytest.approx(shell.x)
    assert tank.pred_y(25.0) == pytest.approx(shell.y)


def test_pred_matrix_places_dot():
    tank = Tank(flat_terrain())
    m = tank.pred_matrix(7.0, 9.0)
    assert transform2d.apply(m, 0, 0) == pytest.approx((7.0, 9.0))
    assert transform2d.apply(m, 1, 1) == pytest.approx((8.5, 10.5))