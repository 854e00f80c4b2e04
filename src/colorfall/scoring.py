"""Score accumulation, level thresholds and fall-speed derivation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .game_state import GameState


@dataclass(frozen=True)
class ScoringRules:
    """Constants driving score, level progression and gravity speed."""

    points_per_cell: int = 10
    soft_drop_points: int = 1
    level_step: int = 500
    base_interval_ms: int = 1000
    interval_step_ms: int = 100
    min_interval_ms: int = 200

    def points_for_clear(self, cleared: int, level: int) -> int:
        """Return the score awarded for clearing ``cleared`` cells in one pass."""

        if cleared <= 0:
            return 0
        return cleared * self.points_per_cell * level

    def should_level_up(self, score: int, level: int) -> bool:
        return score >= level * self.level_step

    def fall_interval_ms(self, level: int) -> int:
        """Return the automatic fall interval for ``level``.

        Level 1 falls every ``base_interval_ms``; each further level shaves
        ``interval_step_ms`` off, never going below ``min_interval_ms``.
        """

        return max(
            self.min_interval_ms,
            self.base_interval_ms - (level - 1) * self.interval_step_ms,
        )


def award_clear(state: "GameState", cleared: int) -> bool:
    """Add the points for a clearing pass and run the level check once.

    Returns ``True`` when the level went up, in which case
    ``state.fall_interval_ms`` has already been updated.  A score that jumps
    over several thresholds still only gains one level per call.
    """

    rules = state.config.rules
    state.score += rules.points_for_clear(cleared, state.level)
    if rules.should_level_up(state.score, state.level):
        state.level += 1
        state.fall_interval_ms = rules.fall_interval_ms(state.level)
        return True
    return False


def award_soft_drop(state: "GameState") -> None:
    """Credit one player-initiated soft-drop step."""

    state.score += state.config.rules.soft_drop_points
