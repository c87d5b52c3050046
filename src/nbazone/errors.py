"""Exceptions raised by the nbazone glue layers."""

from __future__ import annotations


class NBAZoneError(RuntimeError):
    """Base class for nbazone failures."""


class StatsServiceError(NBAZoneError):
    """Raised when the remote stats service cannot satisfy a request."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PlayerNotFoundError(StatsServiceError):
    """Raised when the stats service has no player for the requested id."""


class InvalidSeasonRecord(NBAZoneError, ValueError):
    """Raised by strict validation when a season carries impossible counters."""

    def __init__(self, season: int, problems: list[str]):
        self.season = season
        self.problems = list(problems)
        super().__init__(f"season {season}: " + "; ".join(self.problems))
