"""Season-indexed series for single-player and two-player charts."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Union

from nbazone.config import DEFAULT_STAT, RateStatKey, get_stat_config
from nbazone.models import ChartRow, SeasonRecord, SeriesPoint

from .numeric import finite_or_none, round_half_away


def _project(record: SeasonRecord, field: str) -> Optional[float]:
    value = finite_or_none(getattr(record, field))
    if value is None:
        return None
    return round_half_away(value, 2)


def align(
    seasons_a: Iterable[SeasonRecord],
    seasons_b: Iterable[SeasonRecord],
    stat_key: Union[str, RateStatKey],
) -> List[ChartRow]:
    """Outer-join two players' seasons on season year for one rate stat.

    Every season present on either side yields exactly one row, sorted
    ascending. A side without a record for that season, or whose value is not
    finite, is left as ``None`` rather than zero. The stat only selects the
    projected values; the set of seasons does not depend on it.
    """

    field = get_stat_config(stat_key).field
    rows: Dict[int, Dict[str, Optional[float]]] = {}

    for record in seasons_a:
        row = rows.setdefault(record.season, {"value_a": None, "value_b": None})
        row["value_a"] = _project(record, field)

    for record in seasons_b:
        row = rows.setdefault(record.season, {"value_a": None, "value_b": None})
        row["value_b"] = _project(record, field)

    return [ChartRow(season=season, **rows[season]) for season in sorted(rows)]


def season_series(
    seasons: Iterable[SeasonRecord],
    stat_key: Union[str, RateStatKey] = DEFAULT_STAT,
) -> List[SeriesPoint]:
    """Project one player's seasons onto a single rate stat, ascending by season.

    A season listed twice keeps its later record. Non-finite values stay
    ``None``; an empty input gives an empty series.
    """

    field = get_stat_config(stat_key).field
    values: Dict[int, Optional[float]] = {}
    for record in seasons:
        values[record.season] = _project(record, field)
    return [SeriesPoint(season=season, value=values[season]) for season in sorted(values)]
