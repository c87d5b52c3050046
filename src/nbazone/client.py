"""HTTP client for the remote player stats service."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from nbazone.config_loader import ClientProfile
from nbazone.errors import PlayerNotFoundError, StatsServiceError
from nbazone.models import PlayerProfile, PlayerSummary, SeasonRecord
from nbazone.stats.career import check_season_record


logger = logging.getLogger(__name__)

_SUMMARIES = TypeAdapter(List[PlayerSummary])
_SEASONS = TypeAdapter(List[SeasonRecord])


class StatsProvider(Protocol):
    def search_players(self, text: str) -> List[PlayerSummary]: ...

    def get_player(self, player_id: int) -> PlayerProfile: ...

    def get_seasons(self, player_id: int) -> List[SeasonRecord]: ...


class StatsClient:
    """Thin synchronous wrapper around the stats service REST endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        strict: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.strict = strict
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_profile(cls, profile: ClientProfile, **kwargs: Any) -> "StatsClient":
        return cls(profile.base_url, timeout=profile.timeout, **kwargs)

    def __enter__(self) -> "StatsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, path: str, what: str, params: Optional[dict[str, str]] = None) -> Any:
        logger.debug("GET %s params=%s", path, params)
        try:
            resp = self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise StatsServiceError(f"Error fetching {what}: {exc}") from exc
        if resp.is_error:
            message = f"Error fetching {what}: {resp.status_code} {resp.reason_phrase}"
            if resp.status_code == 404:
                raise PlayerNotFoundError(message, status_code=resp.status_code)
            raise StatsServiceError(message, status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise StatsServiceError(f"Error fetching {what}: response is not JSON") from exc

    def search_players(self, text: str) -> List[PlayerSummary]:
        query = text.strip()
        if not query:
            return []
        payload = self._get("/players", "players", params={"search": query})
        try:
            return _SUMMARIES.validate_python(payload)
        except ValidationError as exc:
            raise StatsServiceError(f"Error fetching players: invalid payload ({exc.error_count()} errors)") from exc

    def get_player(self, player_id: int) -> PlayerProfile:
        payload = self._get(f"/players/{player_id}", "player")
        try:
            return PlayerProfile.model_validate(payload)
        except ValidationError as exc:
            raise StatsServiceError(f"Error fetching player: invalid payload ({exc.error_count()} errors)") from exc

    def get_seasons(self, player_id: int) -> List[SeasonRecord]:
        payload = self._get(f"/players/{player_id}/seasons", "player seasons")
        try:
            seasons = _SEASONS.validate_python(payload)
        except ValidationError as exc:
            raise StatsServiceError(
                f"Error fetching player seasons: invalid payload ({exc.error_count()} errors)"
            ) from exc
        mismatched = [s.season for s in seasons if s.player_id != player_id]
        if mismatched:
            logger.warning(
                "Seasons %s returned for player %s carry a different player id", mismatched, player_id
            )
        if self.strict:
            for season in seasons:
                check_season_record(season)
        return seasons
