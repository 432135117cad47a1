"""
Read-only views of the simulation for the presentation layer.

A snapshot is rebuilt from the live game state on request; nothing in it
aliases a live entity, so a renderer can hold on to one across ticks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nova_defense.game import GameState


@dataclass(frozen=True)
class ProjectileView:
    entity_id: int
    x: float
    y: float
    start_x: float
    start_y: float
    target_x: float
    target_y: float
    progress: float


RocketView = ProjectileView
MissileView = ProjectileView


@dataclass(frozen=True)
class ExplosionView:
    entity_id: int
    x: float
    y: float
    radius: float
    max_radius: float


@dataclass(frozen=True)
class BatteryView:
    battery_index: int
    x: float
    y: float
    ammo: int
    max_ammo: int
    is_destroyed: bool


@dataclass(frozen=True)
class CityView:
    city_index: int
    x: float
    y: float
    is_destroyed: bool


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs for one frame."""

    state: "GameState"
    score: int
    win_score: int
    frame_count: int
    rockets: tuple[ProjectileView, ...]
    missiles: tuple[ProjectileView, ...]
    explosions: tuple[ExplosionView, ...]
    batteries: tuple[BatteryView, ...]
    cities: tuple[CityView, ...]
