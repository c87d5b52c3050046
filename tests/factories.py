"""Builders and fakes shared by the test modules."""

from __future__ import annotations

from typing import Dict, List

from nbazone.errors import PlayerNotFoundError
from nbazone.models import PlayerProfile, PlayerSummary, SeasonRecord


def season(player_id: int = 1, season: int = 2020, **kwargs) -> SeasonRecord:
    return SeasonRecord(player_id=player_id, season=season, **kwargs)


class FakeProvider:
    """In-memory stats provider keyed by player id."""

    def __init__(self, profiles: Dict[int, PlayerProfile], seasons: Dict[int, List[SeasonRecord]]):
        self.profiles = profiles
        self.seasons = seasons
        self.calls: list[tuple[str, object]] = []

    def search_players(self, text: str) -> List[PlayerSummary]:
        self.calls.append(("search", text))
        query = text.strip().lower()
        if not query:
            return []
        return [
            PlayerSummary(id=p.id, first_name=p.first_name, last_name=p.last_name)
            for p in self.profiles.values()
            if query in p.full_name.lower()
        ]

    def get_player(self, player_id: int) -> PlayerProfile:
        self.calls.append(("player", player_id))
        if player_id not in self.profiles:
            raise PlayerNotFoundError("Error fetching player: 404 Not Found", status_code=404)
        return self.profiles[player_id]

    def get_seasons(self, player_id: int) -> List[SeasonRecord]:
        self.calls.append(("seasons", player_id))
        if player_id not in self.profiles:
            raise PlayerNotFoundError("Error fetching player seasons: 404 Not Found", status_code=404)
        return list(self.seasons.get(player_id, []))
