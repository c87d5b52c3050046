"""Career aggregation and season alignment."""

from .career import aggregate, check_season_record
from .compare import align, season_series
from .numeric import finite_or_none, round_half_away, safe_ratio, weighted_mean

__all__ = [
    "aggregate",
    "align",
    "check_season_record",
    "finite_or_none",
    "round_half_away",
    "safe_ratio",
    "season_series",
    "weighted_mean",
]
