"""Canonical player and season models shared by the client, core and API layers."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PlayerSummary(BaseModel):
    """Search hit returned by the stats service."""

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class PlayerProfile(PlayerSummary):
    """Biography fields for a single player."""

    birth_date: Optional[str] = Field(default=None, alias="birthDate")
    last_attend: Optional[str] = Field(default=None, alias="lastAttend")
    country: Optional[str] = None
    height_in: Optional[int] = Field(default=None, alias="heightIn")
    height_cm: Optional[int] = Field(default=None, alias="heightCm")
    bodyweight_lbs: Optional[int] = Field(default=None, alias="bodyweightLbs")
    position: Optional[str] = None
    draft_year: Optional[int] = Field(default=None, alias="draftYear")
    draft_round: Optional[int] = Field(default=None, alias="draftRound")
    draft_number: Optional[int] = Field(default=None, alias="draftNumber")


class SeasonRecord(BaseModel):
    """One player's per-game box score summary for a single season.

    Counters are not range checked here; see ``check_season_record`` for the
    opt-in validation used by strict clients.
    """

    player_id: int = Field(alias="playerId")
    season: int
    games_played: int = Field(default=0, alias="gamesPlayed")

    minutes: float = Field(default=0.0, alias="mpg")
    points: float = Field(default=0.0, alias="ppg")
    rebounds: float = Field(default=0.0, alias="rpg")
    assists: float = Field(default=0.0, alias="apg")
    steals: float = Field(default=0.0, alias="spg")
    blocks: float = Field(default=0.0, alias="bpg")
    turnovers: float = Field(default=0.0, alias="tpg")

    field_goals_made: int = Field(default=0, alias="fgm")
    field_goals_attempted: int = Field(default=0, alias="fga")
    three_point_made: int = Field(default=0, alias="fg3m")
    three_point_attempted: int = Field(default=0, alias="fg3a")
    free_throw_made: int = Field(default=0, alias="ftm")
    free_throw_attempted: int = Field(default=0, alias="fta")

    field_goal_pct: Optional[float] = Field(default=None, alias="fgPct")
    three_point_pct: Optional[float] = Field(default=None, alias="fg3Pct")
    free_throw_pct: Optional[float] = Field(default=None, alias="ftPct")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


RATE_FIELDS: tuple[str, ...] = (
    "minutes",
    "points",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "turnovers",
)

# (makes, attempts, derived percentage) for each shooting pair
SHOOTING_PAIRS: tuple[tuple[str, str, str], ...] = (
    ("field_goals_made", "field_goals_attempted", "field_goal_pct"),
    ("three_point_made", "three_point_attempted", "three_point_pct"),
    ("free_throw_made", "free_throw_attempted", "free_throw_pct"),
)


class CareerTotals(BaseModel):
    """Games-weighted career view derived from a player's season records.

    Rate means default to ``0.0`` for a career without games, while shooting
    percentages stay ``None`` when no attempts were recorded.
    """

    games_played: int = 0
    minutes: float = 0.0
    points: float = 0.0
    rebounds: float = 0.0
    assists: float = 0.0
    steals: float = 0.0
    blocks: float = 0.0
    turnovers: float = 0.0
    field_goal_pct: Optional[float] = None
    three_point_pct: Optional[float] = None
    free_throw_pct: Optional[float] = None

    model_config = ConfigDict(frozen=True)


class ChartRow(BaseModel):
    """One season of a two-player comparison; a missing side stays ``None``."""

    season: int
    value_a: Optional[float] = None
    value_b: Optional[float] = None

    model_config = ConfigDict(frozen=True)


class SeriesPoint(BaseModel):
    """One season of a single-player chart; ``None`` marks a non-finite value."""

    season: int
    value: Optional[float] = None

    model_config = ConfigDict(frozen=True)
