"""
Tests for projectile motion from nova_defense/models/missile.py.

Covers linear interpolation, progress capping, arrival detection and
the rocket / missile manager.
"""

import pytest

from nova_defense.config import MISSILE_SPEED
from nova_defense.models.missile import (
    EnemyRocket,
    MissileManager,
    PlayerMissile,
    Projectile,
)


def _rocket(entity_id=1, start=(0, 0), target=(100, 200), speed=0.25):
    return EnemyRocket(
        entity_id=entity_id,
        start_x=start[0], start_y=start[1],
        target_x=target[0], target_y=target[1],
        speed=speed,
    )


# ── Motion ─────────────────────────────────────────────────────────────────


class TestProjectileMotion:
    def test_starts_at_launch_point(self):
        rocket = _rocket(start=(40, 0))
        assert rocket.current_pos == (40, 0)
        assert rocket.progress == 0.0

    def test_linear_interpolation(self):
        rocket = _rocket()
        rocket.update()
        assert rocket.progress == 0.25
        assert rocket.current_pos == (25.0, 50.0)
        rocket.update()
        assert rocket.current_pos == (50.0, 100.0)

    def test_axes_interpolate_independently(self):
        rocket = _rocket(start=(200, 0), target=(0, 400), speed=0.5)
        rocket.update()
        assert rocket.current_pos == (100.0, 200.0)

    def test_arrives_exactly_on_target(self):
        rocket = _rocket(speed=0.25)
        results = [rocket.update() for _ in range(4)]
        assert results == [False, False, False, True]
        assert rocket.current_pos == rocket.target_pos

    def test_progress_capped_at_one(self):
        rocket = _rocket(speed=0.3)
        for _ in range(4):
            rocket.update()
        assert rocket.progress == 1.0
        assert rocket.has_arrived
        assert rocket.current_pos == (100.0, 200.0)

    def test_progress_strictly_increases(self):
        rocket = _rocket(speed=0.07)
        last = rocket.progress
        while not rocket.update():
            assert rocket.progress > last
            last = rocket.progress
        assert rocket.progress >= 1.0


# ── Player missile ─────────────────────────────────────────────────────────


class TestPlayerMissile:
    def test_default_speed(self):
        missile = PlayerMissile(
            entity_id=1, start_x=96, start_y=680, target_x=300, target_y=200,
        )
        assert missile.speed == MISSILE_SPEED

    def test_records_battery(self):
        missile = PlayerMissile(
            entity_id=1, start_x=96, start_y=680, target_x=300, target_y=200,
            battery_index=2,
        )
        assert missile.battery_index == 2

    def test_is_a_projectile(self):
        assert issubclass(PlayerMissile, Projectile)
        assert issubclass(EnemyRocket, Projectile)

    def test_arrives_within_expected_ticks(self):
        missile = PlayerMissile(
            entity_id=1, start_x=0, start_y=0, target_x=10, target_y=10,
        )
        ticks = 0
        while not missile.update():
            ticks += 1
            assert ticks < 100
        # 0.02 per tick → about 50 ticks
        assert 48 <= ticks <= 51


# ── Manager ────────────────────────────────────────────────────────────────


class TestMissileManager:
    def test_update_returns_arrivals_and_removes_them(self):
        mgr = MissileManager()
        fast = _rocket(entity_id=1, speed=1.0)
        slow = _rocket(entity_id=2, speed=0.25)
        mgr.add_rocket(fast)
        mgr.add_rocket(slow)
        arrived = mgr.update_rockets()
        assert arrived == [fast]
        assert mgr.rockets == [slow]

    def test_arrivals_keep_flight_order(self):
        mgr = MissileManager()
        for i in range(1, 4):
            mgr.add_rocket(_rocket(entity_id=i, speed=1.0))
        arrived = mgr.update_rockets()
        assert [r.entity_id for r in arrived] == [1, 2, 3]
        assert mgr.active_rocket_count == 0

    def test_update_missiles(self):
        mgr = MissileManager()
        missile = PlayerMissile(
            entity_id=5, start_x=0, start_y=0, target_x=10, target_y=10,
            speed=0.5,
        )
        mgr.add_missile(missile)
        assert mgr.update_missiles() == []
        assert mgr.update_missiles() == [missile]
        assert mgr.active_missile_count == 0

    def test_remove_rockets_by_id(self):
        mgr = MissileManager()
        for i in range(1, 4):
            mgr.add_rocket(_rocket(entity_id=i))
        mgr.remove_rockets({1, 3})
        assert [r.entity_id for r in mgr.rockets] == [2]

    def test_reset(self):
        mgr = MissileManager()
        mgr.add_rocket(_rocket())
        mgr.add_missile(PlayerMissile(
            entity_id=2, start_x=0, start_y=0, target_x=1, target_y=1,
        ))
        mgr.reset()
        assert mgr.active_rocket_count == 0
        assert mgr.active_missile_count == 0
