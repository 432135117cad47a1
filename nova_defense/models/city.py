"""
City model for Nova Defense.

Six cities sit on the ground line between the batteries.  A city is
only ever changed by a rocket impact and stays destroyed until the game
is restarted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from nova_defense.config import (
    CITY_GROUND_OFFSET,
    CITY_X_FRACTIONS,
    IMPACT_TOLERANCE,
    NUM_CITIES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from nova_defense.utils.functions import within_tolerance


# ── City ────────────────────────────────────────────────────────────────────


@dataclass
class City:
    """A single city on the ground line."""

    city_index: int
    position_x: float
    position_y: float
    is_destroyed: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.position_x, self.position_y)

    def destroy(self) -> None:
        self.is_destroyed = True


# ── City Manager ────────────────────────────────────────────────────────────


@dataclass
class CityManager:
    """Lays out the cities for a play area and matches impacts to them."""

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    cities: list[City] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cities:
            self.reset()

    def reset(self) -> None:
        """Rebuild every city, all standing."""
        y = self.height - CITY_GROUND_OFFSET
        self.cities = [
            City(city_index=i, position_x=self.width * frac, position_y=y)
            for i, frac in enumerate(CITY_X_FRACTIONS[:NUM_CITIES])
        ]

    # Destruction ─────────────────────────────────────────────────────────

    def find_target_at(
        self, x: float, tolerance: float = IMPACT_TOLERANCE
    ) -> Optional[City]:
        """Return the first standing city within *tolerance* of *x*."""
        for city in self.cities:
            if not city.is_destroyed and within_tolerance(
                city.position_x, x, tolerance
            ):
                return city
        return None

    def destroy_city_at(
        self, x: float, tolerance: float = IMPACT_TOLERANCE
    ) -> Optional[City]:
        """Destroy and return the first standing city near *x*, if any."""
        city = self.find_target_at(x, tolerance)
        if city is not None:
            city.destroy()
        return city

    # Queries ─────────────────────────────────────────────────────────────

    @property
    def active_cities(self) -> list[City]:
        return [c for c in self.cities if not c.is_destroyed]

    @property
    def active_count(self) -> int:
        return len(self.active_cities)

    @property
    def all_destroyed(self) -> bool:
        return self.active_count == 0
