from __future__ import annotations

from typing import List

from pydantic import BaseModel

from nbazone.models import CareerTotals, ChartRow, PlayerProfile, PlayerSummary, SeasonRecord, SeriesPoint


class PlayerSummaryResponse(BaseModel):
    id: int
    first_name: str
    last_name: str

    @classmethod
    def from_summary(cls, summary: PlayerSummary) -> "PlayerSummaryResponse":
        return cls(id=summary.id, first_name=summary.first_name, last_name=summary.last_name)


class PlayerReportResponse(BaseModel):
    profile: PlayerProfile
    seasons: List[SeasonRecord]
    career: CareerTotals


class CompareResponse(BaseModel):
    stat: str
    title: str
    unit: str
    player_a: PlayerSummaryResponse
    player_b: PlayerSummaryResponse
    rows: List[ChartRow]


class SeriesResponse(BaseModel):
    stat: str
    title: str
    unit: str
    points: List[SeriesPoint]
