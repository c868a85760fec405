"""Record types shared across the package."""

from .player import (
    COLUMN_KEYS,
    LOW_SAMPLE_THRESHOLD,
    POSITION_NAMES,
    PlayerRecord,
    Position,
    resolve_column,
)

__all__ = [
    "COLUMN_KEYS",
    "LOW_SAMPLE_THRESHOLD",
    "POSITION_NAMES",
    "PlayerRecord",
    "Position",
    "resolve_column",
]
