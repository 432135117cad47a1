"""
Explosion model for Nova Defense.

An explosion is both a visual effect and a lethal volume: it grows from
a small initial radius to its maximum, then contracts at half speed and
is removed once the radius reaches zero.  Any rocket whose centre lies
strictly inside the current radius is destroyed.

Three flavours are produced by the game:

- blast:  player missile detonation (max 350, growth 5.0)
- chain:  rocket destroyed by an explosion (max 280, growth 5.0)
- impact: rocket reaching the ground (max 20, growth 1.5)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

from nova_defense.config import (
    CHAIN_EXPLOSION_FACTOR,
    EXPLOSION_CONTRACT_FACTOR,
    EXPLOSION_GROWTH_RATE,
    EXPLOSION_INITIAL_RADIUS,
    EXPLOSION_MAX_RADIUS,
    IMPACT_EXPLOSION_GROWTH_RATE,
    IMPACT_EXPLOSION_MAX_RADIUS,
)
from nova_defense.models.missile import EnemyRocket
from nova_defense.utils.functions import distance


# ── Explosion lifecycle ────────────────────────────────────────────────────


class ExplosionState(Enum):
    EXPANDING = auto()
    CONTRACTING = auto()


# ── Explosion ──────────────────────────────────────────────────────────────


@dataclass
class Explosion:
    """A single circular explosion.

    Lifecycle: radius grows by ``growth_rate`` per tick until it reaches
    ``max_radius`` (clamped), then shrinks by half the growth rate per
    tick.  The owning manager prunes it once ``radius <= 0``.
    """

    entity_id: int
    center_x: float
    center_y: float
    max_radius: float = EXPLOSION_MAX_RADIUS
    growth_rate: float = EXPLOSION_GROWTH_RATE

    # Runtime state
    radius: float = EXPLOSION_INITIAL_RADIUS
    state: ExplosionState = ExplosionState.EXPANDING

    @property
    def center_pos(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def is_expanding(self) -> bool:
        return self.state == ExplosionState.EXPANDING

    @property
    def is_active(self) -> bool:
        return self.radius > 0

    def update(self) -> None:
        """Advance one tick of growth or contraction."""
        if self.state == ExplosionState.EXPANDING:
            self.radius += self.growth_rate
            if self.radius >= self.max_radius:
                self.radius = self.max_radius
                self.state = ExplosionState.CONTRACTING
        else:
            self.radius -= self.growth_rate * EXPLOSION_CONTRACT_FACTOR
            if self.radius < 0:
                self.radius = 0.0

    def engulfs(self, x: float, y: float) -> bool:
        """Return True if point (*x*, *y*) lies strictly inside the blast."""
        return distance(self.center_x, self.center_y, x, y) < self.radius


# ── Factories ──────────────────────────────────────────────────────────────


def blast_explosion(entity_id: int, x: float, y: float) -> Explosion:
    """Full-size explosion from a player missile."""
    return Explosion(
        entity_id=entity_id, center_x=x, center_y=y,
        max_radius=EXPLOSION_MAX_RADIUS,
        growth_rate=EXPLOSION_GROWTH_RATE,
    )


def chain_explosion(entity_id: int, x: float, y: float) -> Explosion:
    """Secondary explosion left behind by a destroyed rocket."""
    return Explosion(
        entity_id=entity_id, center_x=x, center_y=y,
        max_radius=EXPLOSION_MAX_RADIUS * CHAIN_EXPLOSION_FACTOR,
        growth_rate=EXPLOSION_GROWTH_RATE,
    )


def impact_explosion(entity_id: int, x: float, y: float) -> Explosion:
    """Small, short-lived explosion where a rocket hits the ground."""
    return Explosion(
        entity_id=entity_id, center_x=x, center_y=y,
        max_radius=IMPACT_EXPLOSION_MAX_RADIUS,
        growth_rate=IMPACT_EXPLOSION_GROWTH_RATE,
    )


# ── Explosion Manager ──────────────────────────────────────────────────────


@dataclass
class ExplosionManager:
    """Holds every active explosion and resolves them against rockets."""

    explosions: list[Explosion] = field(default_factory=list)

    def add(self, explosion: Explosion) -> None:
        self.explosions.append(explosion)

    # Per-tick update ─────────────────────────────────────────────────────

    def update(self) -> None:
        """Grow or shrink every explosion, then prune the spent ones."""
        for exp in self.explosions:
            exp.update()
        self.explosions = [e for e in self.explosions if e.radius > 0]

    # Collision ───────────────────────────────────────────────────────────

    def check_rocket_collisions(
        self, rockets: Iterable[EnemyRocket]
    ) -> list[EnemyRocket]:
        """Return rockets engulfed by an explosion, in kill order.

        Explosions are visited in creation order; each one is tested
        against the rockets still alive at that point, so a rocket is
        reported at most once.  Only explosions present when the call
        starts take part.
        """
        survivors = list(rockets)
        killed: list[EnemyRocket] = []
        for exp in list(self.explosions):
            remaining: list[EnemyRocket] = []
            for rocket in survivors:
                if exp.engulfs(rocket.current_x, rocket.current_y):
                    killed.append(rocket)
                else:
                    remaining.append(rocket)
            survivors = remaining
        return killed

    # Queries ─────────────────────────────────────────────────────────────

    @property
    def active_count(self) -> int:
        return len(self.explosions)

    def reset(self) -> None:
        """Clear all explosions (game restart)."""
        self.explosions = []
