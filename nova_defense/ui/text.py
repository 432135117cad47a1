"""
UI text utilities for Nova Defense.

Provides score tracking and HUD text helpers.
"""

from __future__ import annotations

from dataclasses import dataclass

from nova_defense.config import WIN_SCORE


@dataclass
class ScoreDisplay:
    """Tracks and formats the player score.

    ``best_score`` is the best score of the current run of the program; it
    is never written anywhere.
    """

    player_score: int = 0
    best_score: int = 0
    target_score: int = WIN_SCORE

    def add(self, points: int) -> None:
        """Add *points* to the player score and update the best score."""
        self.player_score += points
        if self.player_score > self.best_score:
            self.best_score = self.player_score

    def reset(self) -> None:
        """Reset player score (best score persists)."""
        self.player_score = 0

    def format_score(self) -> str:
        return f"SCORE: {self.player_score}"

    def format_target(self) -> str:
        return f"TARGET: {self.target_score}"

    def format_best_score(self) -> str:
        return f"BEST: {self.best_score}"
