"""
Battery model for Nova Defense.

Implements the three-battery defence line: per-battery ammunition,
nearest-battery selection for the single fire action, and impact
matching.  Losing all three batteries ends the game.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from nova_defense.config import (
    BATTERY_AMMO,
    BATTERY_GROUND_OFFSET,
    BATTERY_X_FRACTIONS,
    IMPACT_TOLERANCE,
    NUM_BATTERIES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from nova_defense.models.missile import PlayerMissile
from nova_defense.utils.functions import within_tolerance


# ── Battery ─────────────────────────────────────────────────────────────────


@dataclass
class Battery:
    """A single missile battery.

    Properties:
        battery_index: 0 = left, 1 = center, 2 = right
        position: (x, y) screen coordinates
        ammo: missiles left (never negative)
        max_ammo: ammo at game start
        is_destroyed: set by a rocket impact, never cleared mid-game
    """

    battery_index: int
    position_x: float
    position_y: float
    max_ammo: int
    ammo: Optional[int] = None
    is_destroyed: bool = False

    def __post_init__(self) -> None:
        if self.ammo is None:
            self.ammo = self.max_ammo

    @property
    def position(self) -> tuple[float, float]:
        return (self.position_x, self.position_y)

    def can_fire(self) -> bool:
        """Return True if this battery can launch a missile."""
        return not self.is_destroyed and self.ammo > 0

    def fire(
        self, entity_id: int, target_x: float, target_y: float
    ) -> Optional[PlayerMissile]:
        """Spend one round and return a missile aimed at the target.

        Returns None if the battery cannot fire.
        """
        if not self.can_fire():
            return None
        self.ammo -= 1
        return PlayerMissile(
            entity_id=entity_id,
            start_x=self.position_x,
            start_y=self.position_y,
            target_x=target_x,
            target_y=target_y,
            battery_index=self.battery_index,
        )

    def destroy(self) -> None:
        self.is_destroyed = True


# ── Defense Manager ─────────────────────────────────────────────────────────


@dataclass
class DefenseManager:
    """Manages the three batteries: layout, selection and impacts."""

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    batteries: list[Battery] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.batteries:
            self.reset()

    def reset(self) -> None:
        """Rebuild the batteries with full ammunition."""
        y = self.height - BATTERY_GROUND_OFFSET
        self.batteries = [
            Battery(
                battery_index=i,
                position_x=self.width * BATTERY_X_FRACTIONS[i],
                position_y=y,
                max_ammo=BATTERY_AMMO[i],
            )
            for i in range(NUM_BATTERIES)
        ]

    # Firing ──────────────────────────────────────────────────────────────

    def nearest_ready(self, x: float) -> Optional[Battery]:
        """Return the battery able to fire whose x is closest to *x*.

        Distance is horizontal only.  Ties go to the first battery found.
        """
        best: Optional[Battery] = None
        best_dist = float("inf")
        for battery in self.batteries:
            if not battery.can_fire():
                continue
            d = abs(battery.position_x - x)
            if d < best_dist:
                best_dist = d
                best = battery
        return best

    def fire_nearest(
        self, entity_id: int, target_x: float, target_y: float
    ) -> Optional[PlayerMissile]:
        """Fire from the nearest ready battery, or return None."""
        battery = self.nearest_ready(target_x)
        if battery is None:
            return None
        return battery.fire(entity_id, target_x, target_y)

    # Impacts ─────────────────────────────────────────────────────────────

    def find_target_at(
        self, x: float, tolerance: float = IMPACT_TOLERANCE
    ) -> Optional[Battery]:
        for battery in self.batteries:
            if not battery.is_destroyed and within_tolerance(
                battery.position_x, x, tolerance
            ):
                return battery
        return None

    def destroy_battery_at(
        self, x: float, tolerance: float = IMPACT_TOLERANCE
    ) -> Optional[Battery]:
        """Destroy and return the first standing battery near *x*, if any."""
        battery = self.find_target_at(x, tolerance)
        if battery is not None:
            battery.destroy()
        return battery

    # Queries ─────────────────────────────────────────────────────────────

    @property
    def active_batteries(self) -> list[Battery]:
        return [b for b in self.batteries if not b.is_destroyed]

    @property
    def total_ammo(self) -> int:
        """Unfired missiles across all standing batteries."""
        return sum(b.ammo for b in self.active_batteries)

    @property
    def all_destroyed(self) -> bool:
        return all(b.is_destroyed for b in self.batteries)
