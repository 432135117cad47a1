"""
Core game logic for Nova Defense.

Owns every piece of simulation state (projectiles, explosions, cities,
batteries, score) and drives the per-tick update.  Each tick runs, in
order:

    1. rocket motion, with ground impacts resolved as rockets arrive
    2. player missile motion, with blasts spawned on arrival
    3. explosion growth / contraction
    4. explosions vs rockets
    5. spawn roll
    6. win / loss check

Impact explosions created in step 1 already exist in step 4 and can
destroy other rockets in the same tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from nova_defense.config import (
    POINTS_PER_KILL,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WIN_SCORE,
)
from nova_defense.models.city import City, CityManager
from nova_defense.models.defense import Battery, DefenseManager
from nova_defense.models.explosion import (
    ExplosionManager,
    blast_explosion,
    chain_explosion,
    impact_explosion,
)
from nova_defense.models.missile import EnemyRocket, MissileManager, PlayerMissile
from nova_defense.snapshot import (
    BatteryView,
    CityView,
    ExplosionView,
    GameSnapshot,
    ProjectileView,
)
from nova_defense.spawner import RocketSpawner
from nova_defense.ui.text import ScoreDisplay
from nova_defense.utils.functions import IdSequence
from nova_defense.utils.input_handler import GameAction, InputEvent
from nova_defense.utils.scheduler import FrameScheduler

logger = logging.getLogger("nova_defense")


# ── Game states ─────────────────────────────────────────────────────────────


class GameState(Enum):
    START = "START"
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"


# ── Game ────────────────────────────────────────────────────────────────────


@dataclass
class Game:
    """Top-level game controller.

    Holds all subsystem managers and drives the per-tick update loop.
    The layout of cities and batteries is derived from the play area
    size, which is fixed for the lifetime of the object.
    """

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    seed: Optional[int] = None
    win_score: int = WIN_SCORE
    state: GameState = GameState.START

    # Subsystems
    missiles: MissileManager = field(default_factory=MissileManager)
    explosions: ExplosionManager = field(default_factory=ExplosionManager)
    cities: CityManager = field(init=False)
    defenses: DefenseManager = field(init=False)
    spawner: RocketSpawner = field(init=False)
    score_display: ScoreDisplay = field(default_factory=ScoreDisplay)
    scheduler: FrameScheduler = field(default_factory=FrameScheduler)
    ids: IdSequence = field(default_factory=IdSequence, repr=False)

    frame_count: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"play area must be positive, got {self.width}x{self.height}"
            )
        self.cities = CityManager(width=self.width, height=self.height)
        self.defenses = DefenseManager(width=self.width, height=self.height)
        self.spawner = RocketSpawner(width=self.width, seed=self.seed)
        self.score_display.target_score = self.win_score

    # ── Score ───────────────────────────────────────────────────────────

    @property
    def score(self) -> int:
        return self.score_display.player_score

    @score.setter
    def score(self, value: int) -> None:
        self.score_display.player_score = value

    # ── Lifecycle ───────────────────────────────────────────────────────

    def reset(self) -> None:
        """Restore the initial layout without changing state."""
        self.score_display.reset()
        self.defenses.reset()
        self.cities.reset()
        self.missiles.reset()
        self.explosions.reset()
        self.ids.reset()
        self.frame_count = 0

    def start(self) -> None:
        """Reset everything and enter PLAYING.

        Used both for the first game and for restarting after a win or
        loss.
        """
        self.reset()
        self._set_state(GameState.PLAYING)
        self.scheduler.request(self._on_frame)

    restart = start

    def stop(self) -> None:
        """Stop requesting frames.  Safe to call in any state."""
        self.scheduler.cancel()

    def _set_state(self, new_state: GameState) -> None:
        if new_state == self.state:
            return
        logger.info(
            f"State {self.state.value} -> {new_state.value} "
            f"(score={self.score}, frame={self.frame_count})"
        )
        self.state = new_state
        if new_state != GameState.PLAYING:
            self.stop()

    def _on_frame(self) -> None:
        self.update()
        if self.state == GameState.PLAYING:
            self.scheduler.request(self._on_frame)

    # ── Per-tick update ─────────────────────────────────────────────────

    def update(self) -> GameState:
        """Advance the game by one tick.

        Returns the current GameState after the update.  Does nothing
        outside PLAYING.
        """
        if self.state != GameState.PLAYING:
            return self.state

        self.frame_count += 1

        # 1. Rockets: arrivals are fully resolved before anything else
        for rocket in self.missiles.update_rockets():
            self._resolve_rocket_impact(rocket)

        # 2. Player missiles
        for missile in self.missiles.update_missiles():
            self._detonate_missile(missile)

        # 3. Explosions
        self.explosions.update()

        # 4. Explosions vs rockets
        self.resolve_collisions()

        # 5. Spawn
        if self.spawner.should_spawn(self.score):
            self.spawn_rocket()

        # 6. Win / loss
        self._check_end_conditions()
        return self.state

    def _check_end_conditions(self) -> None:
        if self.defenses.all_destroyed:
            self._set_state(GameState.LOST)
        elif self.score >= self.win_score:
            self._set_state(GameState.WON)

    # ── Impacts and collisions ──────────────────────────────────────────

    def _resolve_rocket_impact(self, rocket: EnemyRocket) -> None:
        """Destroy at most one structure under the rocket's aim point.

        Cities are checked before batteries.  An impact explosion is
        spawned whether or not anything was hit.
        """
        city = self.cities.destroy_city_at(rocket.target_x)
        if city is not None:
            logger.debug(f"Rocket {rocket.entity_id} destroyed city {city.city_index}")
        else:
            battery = self.defenses.destroy_battery_at(rocket.target_x)
            if battery is not None:
                logger.debug(
                    f"Rocket {rocket.entity_id} destroyed battery "
                    f"{battery.battery_index}"
                )
        self.explosions.add(
            impact_explosion(self.ids.next(), rocket.target_x, rocket.target_y)
        )

    def _detonate_missile(self, missile: PlayerMissile) -> None:
        self.explosions.add(
            blast_explosion(self.ids.next(), missile.target_x, missile.target_y)
        )

    def resolve_collisions(self) -> int:
        """Destroy every rocket inside an explosion.

        Each kill scores POINTS_PER_KILL and leaves a chain explosion at
        the rocket's position.  Returns the number of rockets destroyed.
        """
        killed = self.explosions.check_rocket_collisions(self.missiles.rockets)
        if not killed:
            return 0
        self.missiles.remove_rockets({r.entity_id for r in killed})
        for rocket in killed:
            self.score_display.add(POINTS_PER_KILL)
            self.explosions.add(
                chain_explosion(self.ids.next(), rocket.current_x, rocket.current_y)
            )
        logger.debug(f"{len(killed)} rocket(s) destroyed, score={self.score}")
        return len(killed)

    # ── Spawning ────────────────────────────────────────────────────────

    @property
    def targets(self) -> list[City | Battery]:
        """Every structure a rocket may aim at, cities first."""
        return [*self.cities.active_cities, *self.defenses.active_batteries]

    def spawn_rocket(self) -> Optional[EnemyRocket]:
        """Launch one rocket at a random surviving structure, if any."""
        targets = self.targets
        if not targets:
            return None
        rocket = self.spawner.spawn_rocket(targets, self.ids.next())
        if rocket is not None:
            self.missiles.add_rocket(rocket)
        return rocket

    # ── Player actions ──────────────────────────────────────────────────

    def fire_at(self, x: float, y: float) -> bool:
        """Fire from the ready battery horizontally nearest to *x*.

        Returns False (and changes nothing) outside PLAYING or when no
        battery can fire.
        """
        if self.state != GameState.PLAYING:
            logger.debug(f"Fire at ({x:.0f}, {y:.0f}) ignored in {self.state.value}")
            return False
        if self.defenses.nearest_ready(x) is None:
            logger.debug(f"Fire at ({x:.0f}, {y:.0f}) ignored: no battery ready")
            return False
        missile = self.defenses.fire_nearest(self.ids.next(), x, y)
        self.missiles.add_missile(missile)
        return True

    def handle(self, event: InputEvent) -> bool:
        """Apply one input event.  Returns True if it changed the game."""
        if event.action == GameAction.FIRE:
            return self.fire_at(event.target_x, event.target_y)
        if event.action == GameAction.START:
            if self.state == GameState.PLAYING:
                return False
            self.start()
            return True
        return False

    # ── Presentation ────────────────────────────────────────────────────

    def snapshot(self) -> GameSnapshot:
        """Build a read-only view of the current state."""
        return GameSnapshot(
            state=self.state,
            score=self.score,
            win_score=self.win_score,
            frame_count=self.frame_count,
            rockets=tuple(_projectile_view(r) for r in self.missiles.rockets),
            missiles=tuple(_projectile_view(m) for m in self.missiles.missiles),
            explosions=tuple(
                ExplosionView(
                    entity_id=e.entity_id,
                    x=e.center_x,
                    y=e.center_y,
                    radius=e.radius,
                    max_radius=e.max_radius,
                )
                for e in self.explosions.explosions
            ),
            batteries=tuple(
                BatteryView(
                    battery_index=b.battery_index,
                    x=b.position_x,
                    y=b.position_y,
                    ammo=b.ammo,
                    max_ammo=b.max_ammo,
                    is_destroyed=b.is_destroyed,
                )
                for b in self.defenses.batteries
            ),
            cities=tuple(
                CityView(
                    city_index=c.city_index,
                    x=c.position_x,
                    y=c.position_y,
                    is_destroyed=c.is_destroyed,
                )
                for c in self.cities.cities
            ),
        )


def _projectile_view(p: EnemyRocket | PlayerMissile) -> ProjectileView:
    return ProjectileView(
        entity_id=p.entity_id,
        x=p.current_x,
        y=p.current_y,
        start_x=p.start_x,
        start_y=p.start_y,
        target_x=p.target_x,
        target_y=p.target_y,
        progress=p.progress,
    )
