"""Career totals derived from a player's season records."""

from __future__ import annotations

from typing import Iterable, List

from nbazone.errors import InvalidSeasonRecord
from nbazone.models import RATE_FIELDS, SHOOTING_PAIRS, CareerTotals, SeasonRecord

from .numeric import safe_ratio, weighted_mean


def aggregate(seasons: Iterable[SeasonRecord]) -> CareerTotals:
    """Reduce one player's seasons into games-weighted career totals.

    Rates are weighted by games played and fall back to ``0.0`` when the
    career has no games. Shooting percentages are pooled makes over pooled
    attempts and stay ``None`` when nothing was attempted. Records are used
    as given; player ids and counter ranges are not checked.
    """

    records: List[SeasonRecord] = list(seasons)
    values: dict[str, object] = {
        "games_played": sum(record.games_played for record in records),
    }
    for field in RATE_FIELDS:
        values[field] = weighted_mean(
            (getattr(record, field), record.games_played) for record in records
        )
    for made_field, attempted_field, pct_field in SHOOTING_PAIRS:
        made = sum(getattr(record, made_field) for record in records)
        attempted = sum(getattr(record, attempted_field) for record in records)
        values[pct_field] = safe_ratio(made, attempted)
    return CareerTotals(**values)


def check_season_record(record: SeasonRecord) -> SeasonRecord:
    """Raise ``InvalidSeasonRecord`` for negative counters or makes above attempts."""

    problems: list[str] = []
    if record.games_played < 0:
        problems.append(f"games_played is negative ({record.games_played})")
    for field in RATE_FIELDS:
        value = getattr(record, field)
        if value < 0:
            problems.append(f"{field} is negative ({value})")
    for made_field, attempted_field, _ in SHOOTING_PAIRS:
        made = getattr(record, made_field)
        attempted = getattr(record, attempted_field)
        if made < 0 or attempted < 0:
            problems.append(f"{made_field}/{attempted_field} has a negative count")
        elif made > attempted:
            problems.append(f"{made_field} ({made}) exceeds {attempted_field} ({attempted})")
    if problems:
        raise InvalidSeasonRecord(record.season, problems)
    return record
