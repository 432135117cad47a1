"""
Main entry point for Nova Defense.

Initializes pygame, maps mouse/keyboard input to game actions, runs the
60Hz frame loop and draws the simulation snapshot.  No game rules live
here: everything the player can do goes through ``Game.handle``.

Usage:
    python nova-defense.py [OPTIONS]

Options:
    --fullscreen         Launch in fullscreen mode
    --width N            Play area width in pixels (default: 960)
    --height N           Play area height in pixels (default: 720)
    --seed N             Seed the rocket spawner (reproducible games)
    --debug              Enable debug overlays and debug logging
    --log-level LEVEL    Logging level (default: WARNING)
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Optional

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from nova_defense.config import SCREEN_HEIGHT, SCREEN_WIDTH, UPDATE_RATE
from nova_defense.game import Game, GameState
from nova_defense.snapshot import GameSnapshot
from nova_defense.utils.input_handler import GameAction, InputEvent

logger = logging.getLogger("nova_defense")


# ── Constants ───────────────────────────────────────────────────────────────

FRAME_TIME: float = 1.0 / UPDATE_RATE          # ~16.67 ms

MIN_DIMENSION: int = 200
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")

# Palette
COLOR_BACKGROUND = (9, 9, 11)
COLOR_GROUND = (24, 24, 27)
COLOR_CITY = (59, 130, 246)
COLOR_CITY_RUBBLE = (69, 26, 3)
COLOR_BATTERY = (16, 185, 129)
COLOR_BATTERY_RUBBLE = (127, 29, 29)
COLOR_ROCKET = (239, 68, 68)
COLOR_ROCKET_TRAIL = (120, 120, 120)
COLOR_MISSILE = (96, 165, 250)
COLOR_EXPLOSION = (249, 115, 22)
COLOR_TEXT = (255, 255, 255)

BANNER_TITLES: dict[GameState, str] = {
    GameState.START: "NOVA DEFENSE",
    GameState.WON: "MISSION SUCCESS",
    GameState.LOST: "DEFENSE COLLAPSED",
}
BANNER_MESSAGES: dict[GameState, str] = {
    GameState.WON: "You successfully defended the galaxy!",
    GameState.LOST: "All batteries destroyed. The cities have fallen.",
}


# ── Argument parsing ───────────────────────────────────────────────────────


def _dimension(value: str) -> int:
    n = int(value)
    if n < MIN_DIMENSION:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_DIMENSION}")
    return n


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Nova Defense – intercept the rockets, save the cities",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--width", type=_dimension, default=SCREEN_WIDTH,
        metavar="N",
        help=f"Play area width in pixels (default: {SCREEN_WIDTH})",
    )
    parser.add_argument(
        "--height", type=_dimension, default=SCREEN_HEIGHT,
        metavar="N",
        help=f"Play area height in pixels (default: {SCREEN_HEIGHT})",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        metavar="N",
        help="Seed the rocket spawner for a reproducible game",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug overlays (FPS, entity counts) and debug logging",
    )
    parser.add_argument(
        "--log-level", default="WARNING", choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str, debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class NovaDefenseApp:
    """Top-level application wrapper.

    Owns the pygame display, the game, and the main loop.
    """

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fullscreen: bool = False
    debug: bool = False
    seed: Optional[int] = None

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    font: object = field(default=None, repr=False)
    game: Game = field(default_factory=Game)
    running: bool = False

    # Performance tracking
    frame_times: list[float] = field(default_factory=list)
    fps: float = 0.0

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        if pygame is None:
            print("Error: pygame is required. Install with: pip install pygame",
                  file=sys.stderr)
            return False

        try:
            pygame.init()
        except Exception as exc:
            print(f"Error initialising pygame: {exc}", file=sys.stderr)
            return False

        flags = 0
        if self.fullscreen:
            flags |= pygame.FULLSCREEN

        try:
            self.screen = pygame.display.set_mode((self.width, self.height), flags)
        except Exception as exc:
            print(f"Error creating display: {exc}", file=sys.stderr)
            pygame.quit()
            return False

        pygame.display.set_caption("Nova Defense")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 28)

        self.game = Game(width=self.width, height=self.height, seed=self.seed)
        logger.info(f"Display {self.width}x{self.height}, seed={self.seed}")

        self.running = True
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the main loop at 60 FPS."""
        if not self.running:
            return

        try:
            while self.running:
                frame_start = time.perf_counter()

                self._handle_events()
                self.game.scheduler.run_frame()
                self._render()

                self.clock.tick(UPDATE_RATE)

                # Performance tracking
                elapsed = time.perf_counter() - frame_start
                self.frame_times.append(elapsed)
                if len(self.frame_times) > 60:
                    self.frame_times.pop(0)
                if self.frame_times:
                    avg = sum(self.frame_times) / len(self.frame_times)
                    self.fps = 1.0 / avg if avg > 0 else 0.0
        except KeyboardInterrupt:
            pass
        finally:
            self.shutdown()

    # ── Event handling ──────────────────────────────────────────────────

    def translate_event(self, event: object) -> InputEvent:
        """Map one pygame event to a game action.

        Controls:
            Left click / touch – fire at the pointer, or start when idle
            Enter / Space      – start or restart
            ESC / window close – quit
        """
        if event.type == pygame.QUIT:
            return InputEvent(GameAction.QUIT)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            if self.game.state == GameState.PLAYING:
                return InputEvent(GameAction.FIRE, x, y)
            return InputEvent(GameAction.START)
        if event.type == pygame.FINGERDOWN:
            if self.game.state == GameState.PLAYING:
                x, y = event.x * self.width, event.y * self.height
                return InputEvent(GameAction.FIRE, x, y)
            return InputEvent(GameAction.START)
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return InputEvent(GameAction.QUIT)
            if event.key in (pygame.K_RETURN, pygame.K_SPACE):
                return InputEvent(GameAction.START)
        return InputEvent(GameAction.NONE)

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            action = self.translate_event(event)
            if action.action == GameAction.QUIT:
                self.running = False
            elif action.action != GameAction.NONE:
                self.game.handle(action)

    # ── Rendering ───────────────────────────────────────────────────────

    def _render(self) -> None:
        """Draw the current snapshot."""
        if self.screen is None:
            return

        snap = self.game.snapshot()
        self.screen.fill(COLOR_BACKGROUND)
        pygame.draw.rect(
            self.screen, COLOR_GROUND,
            (0, self.height - 20, self.width, 20),
        )

        self._render_structures(snap)
        self._render_projectiles(snap)
        for exp in snap.explosions:
            pygame.draw.circle(
                self.screen, COLOR_EXPLOSION,
                (int(exp.x), int(exp.y)), max(int(exp.radius), 1), 2,
            )

        self._render_hud(snap)
        if snap.state != GameState.PLAYING:
            self._render_banner(snap)
        if self.debug:
            self._render_debug(snap)

        pygame.display.flip()

    def _render_structures(self, snap: GameSnapshot) -> None:
        for city in snap.cities:
            if city.is_destroyed:
                rect = (city.x - 15, self.height - 25, 30, 5)
                pygame.draw.rect(self.screen, COLOR_CITY_RUBBLE, rect)
            else:
                rect = (city.x - 15, self.height - 35, 30, 15)
                pygame.draw.rect(self.screen, COLOR_CITY, rect)

        for b in snap.batteries:
            if b.is_destroyed:
                rect = (b.x - 20, self.height - 25, 40, 5)
                pygame.draw.rect(self.screen, COLOR_BATTERY_RUBBLE, rect)
                continue
            pygame.draw.rect(
                self.screen, COLOR_BATTERY, (b.x - 15, self.height - 60, 30, 40)
            )
            ammo = self.font.render(str(b.ammo), True, COLOR_TEXT)
            self.screen.blit(
                ammo, (b.x - ammo.get_width() // 2, self.height - 85)
            )

    def _render_projectiles(self, snap: GameSnapshot) -> None:
        for r in snap.rockets:
            pygame.draw.line(
                self.screen, COLOR_ROCKET_TRAIL,
                (r.start_x, r.start_y), (r.x, r.y), 2,
            )
            pygame.draw.circle(self.screen, COLOR_ROCKET, (int(r.x), int(r.y)), 3)
        for m in snap.missiles:
            pygame.draw.line(
                self.screen, COLOR_MISSILE,
                (m.start_x, m.start_y), (m.x, m.y), 1,
            )
            # Aim marker
            tx, ty = int(m.target_x), int(m.target_y)
            pygame.draw.line(self.screen, COLOR_MISSILE, (tx - 4, ty - 4), (tx + 4, ty + 4))
            pygame.draw.line(self.screen, COLOR_MISSILE, (tx - 4, ty + 4), (tx + 4, ty - 4))

    def _render_hud(self, snap: GameSnapshot) -> None:
        display = self.game.score_display
        score = self.font.render(display.format_score(), True, COLOR_TEXT)
        target = self.font.render(display.format_target(), True, COLOR_TEXT)
        self.screen.blit(score, (16, 12))
        self.screen.blit(target, (self.width - target.get_width() - 16, 12))

    def banner_lines(self, state: GameState) -> list[str]:
        """Title, optional message and prompt for the overlay in *state*."""
        lines = [BANNER_TITLES[state]]
        if state in BANNER_MESSAGES:
            lines.append(BANNER_MESSAGES[state])
        lines.append(
            "CLICK TO START" if state == GameState.START
            else "CLICK TO PLAY AGAIN"
        )
        return lines

    def _render_banner(self, snap: GameSnapshot) -> None:
        """Draw the start / win / loss message."""
        texts = self.banner_lines(snap.state)
        texts.append(self.game.score_display.format_best_score())
        surfaces = [self.font.render(t, True, COLOR_TEXT) for t in texts]

        y = self.height // 2 - surfaces[0].get_height() * 2
        for surf in surfaces:
            self.screen.blit(surf, (self.width // 2 - surf.get_width() // 2, y))
            y += surf.get_height() + 12

    def frame_budget_text(self) -> str:
        """Average frame time against the per-frame budget, in ms."""
        avg = sum(self.frame_times) / len(self.frame_times) if self.frame_times else 0.0
        return f"Frame time: {avg * 1000:.1f} / {FRAME_TIME * 1000:.1f} ms"

    def _render_debug(self, snap: GameSnapshot) -> None:
        """Draw debug overlays (FPS, entity counts)."""
        texts = [
            f"FPS: {self.fps:.1f}",
            self.frame_budget_text(),
            f"Frame: {snap.frame_count}",
            f"Rockets: {len(snap.rockets)}",
            f"Missiles: {len(snap.missiles)}",
            f"Explosions: {len(snap.explosions)}",
        ]
        y = 40
        for text in texts:
            surface = self.font.render(text, True, (0, 255, 0))
            self.screen.blit(surface, (16, y))
            y += 20

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Stop the game loop and quit pygame."""
        self.running = False
        self.game.stop()
        if pygame is not None:
            pygame.quit()


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    configure_logging(args.log_level, args.debug)

    app = NovaDefenseApp(
        width=args.width,
        height=args.height,
        fullscreen=args.fullscreen,
        debug=args.debug,
        seed=args.seed,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
