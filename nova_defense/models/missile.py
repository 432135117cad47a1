"""
Projectile types for Nova Defense.

Enemy rockets and player missiles share one motion model: a normalised
progress value advances by a fixed speed each tick, and the position is
the linear interpolation between the launch point and the aim point.
Nothing else acts on a projectile in flight.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from nova_defense.config import MISSILE_SPEED
from nova_defense.utils.functions import lerp_point


# ── Motion ─────────────────────────────────────────────────────────────────


@dataclass
class Projectile:
    """Straight-line projectile driven by a progress parameter.

    ``progress`` starts at 0 and reaches exactly 1 on the tick the
    projectile arrives at its target; it never moves backwards.
    """

    entity_id: int
    start_x: float
    start_y: float
    target_x: float
    target_y: float
    speed: float
    progress: float = 0.0
    current_x: float = field(init=False)
    current_y: float = field(init=False)

    def __post_init__(self) -> None:
        self.current_x = self.start_x
        self.current_y = self.start_y

    @property
    def current_pos(self) -> tuple[float, float]:
        return (self.current_x, self.current_y)

    @property
    def start_pos(self) -> tuple[float, float]:
        return (self.start_x, self.start_y)

    @property
    def target_pos(self) -> tuple[float, float]:
        return (self.target_x, self.target_y)

    @property
    def has_arrived(self) -> bool:
        return self.progress >= 1.0

    def update(self) -> bool:
        """Advance one tick.  Returns True on the tick of arrival."""
        self.progress = min(self.progress + self.speed, 1.0)
        self.current_x, self.current_y = lerp_point(
            self.start_x, self.start_y,
            self.target_x, self.target_y,
            self.progress,
        )
        return self.has_arrived


# ── Enemy rocket ───────────────────────────────────────────────────────────


@dataclass
class EnemyRocket(Projectile):
    """Incoming rocket aimed at a city or battery."""


# ── Player missile ─────────────────────────────────────────────────────────


@dataclass
class PlayerMissile(Projectile):
    """Interceptor fired from a battery toward the clicked point.

    Detonates into a full-size blast when it reaches its target.
    """

    speed: float = MISSILE_SPEED
    battery_index: int = -1


# ── Manager ────────────────────────────────────────────────────────────────


@dataclass
class MissileManager:
    """Owns the active rocket and missile lists.

    Both lists are rebuilt every tick from their survivors; arrived
    projectiles are handed back to the caller, in flight order, so it can
    apply the kind-specific impact.
    """

    rockets: list[EnemyRocket] = field(default_factory=list)
    missiles: list[PlayerMissile] = field(default_factory=list)

    def add_rocket(self, rocket: EnemyRocket) -> None:
        self.rockets.append(rocket)

    def add_missile(self, missile: PlayerMissile) -> None:
        self.missiles.append(missile)

    def update_rockets(self) -> list[EnemyRocket]:
        """Advance every rocket; return the ones that reached their target."""
        arrived: list[EnemyRocket] = []
        in_flight: list[EnemyRocket] = []
        for rocket in self.rockets:
            if rocket.update():
                arrived.append(rocket)
            else:
                in_flight.append(rocket)
        self.rockets = in_flight
        return arrived

    def update_missiles(self) -> list[PlayerMissile]:
        """Advance every missile; return the ones that reached their target."""
        arrived: list[PlayerMissile] = []
        in_flight: list[PlayerMissile] = []
        for missile in self.missiles:
            if missile.update():
                arrived.append(missile)
            else:
                in_flight.append(missile)
        self.missiles = in_flight
        return arrived

    def remove_rockets(self, rocket_ids: set[int]) -> None:
        if rocket_ids:
            self.rockets = [
                r for r in self.rockets if r.entity_id not in rocket_ids
            ]

    @property
    def active_rocket_count(self) -> int:
        return len(self.rockets)

    @property
    def active_missile_count(self) -> int:
        return len(self.missiles)

    def reset(self) -> None:
        """Clear both lists (game restart)."""
        self.rockets = []
        self.missiles = []
