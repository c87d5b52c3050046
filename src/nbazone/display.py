"""Plain-text formatting for player bios, season tables and comparisons."""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from nbazone.models import RATE_FIELDS, PlayerProfile, SeasonRecord, SeriesPoint
from nbazone.stats import aggregate
from nbazone.stats.service import Comparison


SEASON_TABLE_HEADER: tuple[str, ...] = (
    "Season",
    "GP",
    "MPG",
    "PPG",
    "RPG",
    "APG",
    "SPG",
    "BPG",
    "TPG",
    "FG%",
    "3P%",
    "FT%",
)


def display_value(value: Union[str, int, float, None]) -> str:
    if value is None or value == "":
        return "N/A"
    return str(value)


def format_height(inches: Optional[int]) -> str:
    if inches is None:
        return "N/A"
    feet, remainder = divmod(inches, 12)
    return f"{feet}′ {remainder}″"


def format_weight(lbs: Optional[int]) -> str:
    if lbs is None:
        return "N/A"
    return f"{lbs} lbs"


def format_draft(profile: PlayerProfile) -> str:
    if profile.draft_year is None:
        return "N/A"
    # round and pick are missing for some older drafts
    round_ = profile.draft_round if profile.draft_round is not None else "—"
    pick = profile.draft_number if profile.draft_number is not None else "—"
    return f"Drafted {profile.draft_year} • Round {round_} • Pick {pick}"


def format_pct(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value * 100:.1f}"


def format_rate(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:.2f}"


def bio_lines(profile: PlayerProfile) -> List[str]:
    return [
        profile.full_name,
        f"Position: {display_value(profile.position)}",
        f"Height: {format_height(profile.height_in)}",
        f"Weight: {format_weight(profile.bodyweight_lbs)}",
        f"Birth date: {display_value(profile.birth_date)}",
        f"Country: {display_value(profile.country)}",
        f"College: {display_value(profile.last_attend)}",
        f"Draft: {format_draft(profile)}",
    ]


def season_table(seasons: Sequence[SeasonRecord]) -> List[List[str]]:
    """Return header, newest-first season rows and a career row.

    An empty season list yields no rows at all so callers can print their own
    "no data" message.
    """

    if not seasons:
        return []
    rows: List[List[str]] = [list(SEASON_TABLE_HEADER)]
    for record in sorted(seasons, key=lambda s: s.season, reverse=True):
        rows.append(
            [str(record.season), str(record.games_played)]
            + [format_rate(getattr(record, field)) for field in RATE_FIELDS]
            + [
                format_pct(record.field_goal_pct),
                format_pct(record.three_point_pct),
                format_pct(record.free_throw_pct),
            ]
        )
    totals = aggregate(seasons)
    rows.append(
        ["Career", str(totals.games_played)]
        + [format_rate(getattr(totals, field)) for field in RATE_FIELDS]
        + [
            format_pct(totals.field_goal_pct),
            format_pct(totals.three_point_pct),
            format_pct(totals.free_throw_pct),
        ]
    )
    return rows


def comparison_table(comparison: Comparison) -> List[List[str]]:
    if not comparison.rows:
        return []
    rows: List[List[str]] = [
        ["Season", comparison.player_a.full_name or "Player A", comparison.player_b.full_name or "Player B"]
    ]
    for row in comparison.rows:
        rows.append([str(row.season), format_rate(row.value_a), format_rate(row.value_b)])
    return rows


def render_table(rows: Sequence[Sequence[str]]) -> str:
    if not rows:
        return ""
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    lines = []
    for row in rows:
        cells = [row[0].ljust(widths[0])] + [cell.rjust(width) for cell, width in zip(row[1:], widths[1:])]
        lines.append("  ".join(cells).rstrip())
    return "\n".join(lines)


def series_table(points: Sequence[SeriesPoint], unit: str) -> List[List[str]]:
    if not points:
        return []
    rows: List[List[str]] = [["Season", unit]]
    for point in points:
        rows.append([str(point.season), format_rate(point.value)])
    return rows
