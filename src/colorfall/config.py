"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from .scoring import ScoringRules


# Dimensions of the default playfield.
WIDTH = 10
HEIGHT = 20
# Number of distinct block colours; grid cells hold ``0..COLORS``.
COLORS = 6
# Delay between consecutive chain-resolution passes.
CHAIN_DELAY_MS = 100


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings for one game session."""

    rows: int = HEIGHT
    cols: int = WIDTH
    colors: int = COLORS
    chain_delay_ms: int = CHAIN_DELAY_MS
    rules: ScoringRules = field(default_factory=ScoringRules)

    def __post_init__(self) -> None:
        if self.rows < 3 or self.cols < 3:
            raise ValueError("Grid must be at least 3x3")
        if not 1 <= self.colors <= 255:
            raise ValueError("colors must be between 1 and 255")
        if self.chain_delay_ms < 0:
            raise ValueError("chain_delay_ms must not be negative")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GameConfig":
        """Build a config from a flat mapping.

        Keys matching :class:`ScoringRules` fields are routed to the nested
        rules object.  Unknown keys raise ``ValueError``.
        """

        own = {f.name for f in fields(cls)} - {"rules"}
        rule_names = {f.name for f in fields(ScoringRules)}
        top: dict[str, Any] = {}
        rules: dict[str, Any] = {}
        for key, value in data.items():
            if key in own:
                top[key] = value
            elif key in rule_names:
                rules[key] = value
            else:
                raise ValueError(f"Unknown config key: {key}")
        return cls(rules=ScoringRules(**rules), **top)


DEFAULT_CONFIG = GameConfig()
