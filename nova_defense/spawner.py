"""
Enemy rocket spawner for Nova Defense.

Once per tick the game rolls against a spawn probability that grows
linearly with the score; on success a rocket is launched from a random
point on the top edge toward a random surviving city or battery.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from nova_defense.config import (
    ROCKET_SPEED_MAX,
    ROCKET_SPEED_MIN,
    SCREEN_WIDTH,
    SPAWN_BASE_PROBABILITY,
    SPAWN_SCORE_DIVISOR,
)
from nova_defense.models.city import City
from nova_defense.models.defense import Battery
from nova_defense.models.missile import EnemyRocket

logger = logging.getLogger("nova_defense")

Target = Union[City, Battery]


def spawn_probability(score: int) -> float:
    """Per-tick chance of a new rocket.  Uncapped: above 9925 points a
    rocket spawns every tick."""
    return SPAWN_BASE_PROBABILITY + score / SPAWN_SCORE_DIVISOR


@dataclass
class RocketSpawner:
    """Creates enemy rockets.

    Owns its own random generator so a seeded game is reproducible.
    """

    width: float = SCREEN_WIDTH
    seed: Optional[int] = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def should_spawn(self, score: int) -> bool:
        """Roll once against :func:`spawn_probability`."""
        return self.rng.random() < spawn_probability(score)

    def spawn_rocket(
        self, targets: Sequence[Target], entity_id: int
    ) -> Optional[EnemyRocket]:
        """Launch a rocket at one of *targets* chosen uniformly.

        Destroyed targets are skipped; returns None when nothing is left
        to aim at.
        """
        candidates = [t for t in targets if not t.is_destroyed]
        if not candidates:
            return None
        target = self.rng.choice(candidates)
        rocket = EnemyRocket(
            entity_id=entity_id,
            start_x=self.rng.uniform(0, self.width),
            start_y=0.0,
            target_x=target.position_x,
            target_y=target.position_y,
            speed=self.rng.uniform(ROCKET_SPEED_MIN, ROCKET_SPEED_MAX),
        )
        logger.debug(
            f"Rocket {entity_id} launched at ({target.position_x:.0f}, "
            f"{target.position_y:.0f}) speed={rocket.speed:.5f}"
        )
        return rocket
