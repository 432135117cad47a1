"""
Tests for battery and city functionality.

Covers Battery, DefenseManager, City and CityManager: layout, firing,
nearest-battery selection and impact matching.
"""

import pytest

from nova_defense.config import (
    BATTERY_AMMO,
    IMPACT_TOLERANCE,
    MISSILE_SPEED,
    NUM_CITIES,
)
from nova_defense.models.city import City, CityManager
from nova_defense.models.defense import Battery, DefenseManager


# ── Battery Tests ───────────────────────────────────────────────────────────


class TestBattery:
    def test_ammo_defaults_to_max(self):
        battery = Battery(battery_index=0, position_x=96, position_y=680, max_ammo=20)
        assert battery.ammo == 20

    def test_fire_decrements_ammo(self):
        battery = Battery(battery_index=1, position_x=480, position_y=680, max_ammo=40)
        missile = battery.fire(7, 300, 200)
        assert battery.ammo == 39
        assert missile.entity_id == 7
        assert missile.start_pos == (480, 680)
        assert missile.target_pos == (300, 200)
        assert missile.speed == MISSILE_SPEED
        assert missile.battery_index == 1

    def test_empty_battery_cannot_fire(self):
        battery = Battery(battery_index=0, position_x=96, position_y=680,
                          max_ammo=20, ammo=0)
        assert not battery.can_fire()
        assert battery.fire(1, 100, 100) is None
        assert battery.ammo == 0

    def test_destroyed_battery_cannot_fire(self):
        battery = Battery(battery_index=0, position_x=96, position_y=680, max_ammo=20)
        battery.destroy()
        assert battery.fire(1, 100, 100) is None
        assert battery.ammo == 20

    def test_ammo_never_negative(self):
        battery = Battery(battery_index=0, position_x=96, position_y=680, max_ammo=3)
        for i in range(10):
            battery.fire(i, 0, 0)
        assert battery.ammo == 0


# ── Defense Manager Tests ───────────────────────────────────────────────────


class TestDefenseManager:
    def test_three_batteries(self):
        mgr = DefenseManager()
        assert len(mgr.batteries) == 3

    def test_ammo_pools(self):
        mgr = DefenseManager()
        assert [b.ammo for b in mgr.batteries] == list(BATTERY_AMMO) == [20, 40, 20]
        assert [b.max_ammo for b in mgr.batteries] == [20, 40, 20]

    def test_layout_follows_play_area(self):
        mgr = DefenseManager(width=1000, height=500)
        xs = [b.position_x for b in mgr.batteries]
        assert xs == pytest.approx([100, 500, 900])
        assert all(b.position_y == 460 for b in mgr.batteries)

    def test_nearest_by_horizontal_distance(self):
        mgr = DefenseManager(width=1000, height=500)
        # Vertical distance is ignored
        assert mgr.nearest_ready(520).battery_index == 1
        assert mgr.nearest_ready(880).battery_index == 2
        assert mgr.nearest_ready(0).battery_index == 0

    def test_tie_goes_to_first(self):
        mgr = DefenseManager(width=1000, height=500)
        left, center, _ = mgr.batteries
        midpoint = (left.position_x + center.position_x) / 2
        assert mgr.nearest_ready(midpoint) is left

    def test_skips_empty_and_destroyed(self):
        mgr = DefenseManager(width=1000, height=500)
        mgr.batteries[1].ammo = 0
        mgr.batteries[2].destroy()
        assert mgr.nearest_ready(900) is mgr.batteries[0]

    def test_none_ready(self):
        mgr = DefenseManager()
        for b in mgr.batteries:
            b.ammo = 0
        assert mgr.nearest_ready(100) is None
        assert mgr.fire_nearest(1, 100, 100) is None

    def test_fire_nearest(self):
        mgr = DefenseManager(width=1000, height=500)
        missile = mgr.fire_nearest(1, 480, 100)
        assert missile.battery_index == 1
        assert mgr.batteries[1].ammo == 39
        assert mgr.total_ammo == 79

    def test_destroy_battery_at(self):
        mgr = DefenseManager(width=1000, height=500)
        hit = mgr.destroy_battery_at(100 + IMPACT_TOLERANCE - 0.5)
        assert hit is mgr.batteries[0]
        assert hit.is_destroyed
        # Already destroyed: nothing left to hit there
        assert mgr.destroy_battery_at(100) is None

    def test_destroy_outside_tolerance(self):
        mgr = DefenseManager(width=1000, height=500)
        assert mgr.destroy_battery_at(100 + IMPACT_TOLERANCE) is None
        assert mgr.active_batteries == mgr.batteries

    def test_all_destroyed(self):
        mgr = DefenseManager()
        assert not mgr.all_destroyed
        for b in mgr.batteries:
            b.destroy()
        assert mgr.all_destroyed
        assert mgr.total_ammo == 0

    def test_reset_restores(self):
        mgr = DefenseManager()
        mgr.batteries[0].destroy()
        mgr.fire_nearest(1, 480, 100)
        mgr.reset()
        assert not any(b.is_destroyed for b in mgr.batteries)
        assert [b.ammo for b in mgr.batteries] == [20, 40, 20]


# ── City Tests ──────────────────────────────────────────────────────────────


class TestCity:
    def test_starts_standing(self):
        city = City(city_index=0, position_x=240, position_y=690)
        assert not city.is_destroyed
        assert city.position == (240, 690)

    def test_destroy(self):
        city = City(city_index=0, position_x=240, position_y=690)
        city.destroy()
        assert city.is_destroyed


class TestCityManager:
    def test_six_cities(self):
        mgr = CityManager()
        assert len(mgr.cities) == NUM_CITIES == 6
        assert mgr.active_count == 6

    def test_layout_between_batteries(self):
        mgr = CityManager(width=1000, height=500)
        xs = [c.position_x for c in mgr.cities]
        assert xs == pytest.approx([250, 350, 450, 550, 650, 750])
        assert all(c.position_y == 470 for c in mgr.cities)

    def test_destroy_city_at(self):
        mgr = CityManager(width=1000, height=500)
        target = mgr.cities[2]
        hit = mgr.destroy_city_at(target.position_x + 3)
        assert hit is target
        assert mgr.active_count == 5

    def test_destroyed_city_not_hit_again(self):
        mgr = CityManager(width=1000, height=500)
        x = mgr.cities[0].position_x
        assert mgr.destroy_city_at(x) is not None
        assert mgr.destroy_city_at(x) is None

    def test_miss(self):
        mgr = CityManager(width=1000, height=500)
        assert mgr.destroy_city_at(300) is None
        assert mgr.active_count == 6

    def test_all_destroyed(self):
        mgr = CityManager()
        for c in mgr.cities:
            c.destroy()
        assert mgr.all_destroyed

    def test_reset(self):
        mgr = CityManager()
        mgr.cities[0].destroy()
        mgr.reset()
        assert mgr.active_count == 6
