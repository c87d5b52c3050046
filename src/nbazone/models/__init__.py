"""Value types shared across the nbazone layers."""

from .player import (
    RATE_FIELDS,
    SHOOTING_PAIRS,
    CareerTotals,
    ChartRow,
    PlayerProfile,
    PlayerSummary,
    SeasonRecord,
    SeriesPoint,
)

__all__ = [
    "RATE_FIELDS",
    "SHOOTING_PAIRS",
    "CareerTotals",
    "ChartRow",
    "PlayerProfile",
    "PlayerSummary",
    "SeasonRecord",
    "SeriesPoint",
]
