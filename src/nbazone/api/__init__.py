"""REST API exposing career totals and player comparisons."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, List, TypeVar

from fastapi import FastAPI, HTTPException, Query

from nbazone.api.schemas import CompareResponse, PlayerReportResponse, PlayerSummaryResponse, SeriesResponse
from nbazone.client import StatsClient, StatsProvider
from nbazone.config import DEFAULT_STAT, StatConfig, get_stat_config
from nbazone.config_loader import ClientProfile
from nbazone.errors import PlayerNotFoundError, StatsServiceError
from nbazone.models import CareerTotals, PlayerProfile, SeasonRecord
from nbazone.stats import aggregate, season_series
from nbazone.stats.service import build_comparison, build_player_report


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _resolve_stat(stat: str) -> StatConfig:
    try:
        return get_stat_config(stat)
    except KeyError as exc:
        raise HTTPException(status_code=400, detail=f"Unknown stat {stat!r}") from exc


def _call_provider(fn: Callable[[], T]) -> T:
    try:
        return fn()
    except PlayerNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc
    except StatsServiceError as exc:
        logger.warning("Stats service request failed: %s", exc.message)
        raise HTTPException(status_code=502, detail=exc.message) from exc


def create_app(provider: StatsProvider | None = None) -> FastAPI:
    owned_client: StatsClient | None = None
    if provider is None:
        owned_client = StatsClient.from_profile(ClientProfile.from_env())
        provider = owned_client

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        if owned_client is not None:
            owned_client.close()

    app = FastAPI(title="nbazone stats", lifespan=lifespan)
    app.state.provider = provider

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=List[PlayerSummaryResponse])
    def search_players(search: str = Query("")) -> List[PlayerSummaryResponse]:
        hits = _call_provider(lambda: provider.search_players(search))
        return [PlayerSummaryResponse.from_summary(hit) for hit in hits]

    @app.get("/players/{player_id}", response_model=PlayerProfile)
    def get_player(player_id: int) -> PlayerProfile:
        return _call_provider(lambda: provider.get_player(player_id))

    @app.get("/players/{player_id}/seasons", response_model=List[SeasonRecord])
    def get_seasons(player_id: int) -> List[SeasonRecord]:
        seasons = _call_provider(lambda: provider.get_seasons(player_id))
        return sorted(seasons, key=lambda s: s.season)

    @app.get("/players/{player_id}/career", response_model=CareerTotals)
    def get_career(player_id: int) -> CareerTotals:
        seasons = _call_provider(lambda: provider.get_seasons(player_id))
        return aggregate(seasons)

    @app.get("/players/{player_id}/report", response_model=PlayerReportResponse)
    def get_report(player_id: int) -> PlayerReportResponse:
        report = _call_provider(lambda: build_player_report(provider, player_id))
        return PlayerReportResponse(profile=report.profile, seasons=report.seasons, career=report.career)

    @app.get("/players/{player_id}/chart", response_model=SeriesResponse)
    def get_chart(player_id: int, stat: str = Query(DEFAULT_STAT.value)) -> SeriesResponse:
        config = _resolve_stat(stat)
        seasons = _call_provider(lambda: provider.get_seasons(player_id))
        return SeriesResponse(
            stat=config.key,
            title=config.title,
            unit=config.unit,
            points=season_series(seasons, config.key),
        )

    @app.get("/compare", response_model=CompareResponse)
    def compare(
        a: int = Query(...),
        b: int = Query(...),
        stat: str = Query(DEFAULT_STAT.value),
    ) -> CompareResponse:
        config = _resolve_stat(stat)
        comparison = _call_provider(lambda: build_comparison(provider, a, b, config.key))
        return CompareResponse(
            stat=comparison.stat.key,
            title=comparison.stat.title,
            unit=comparison.stat.unit,
            player_a=PlayerSummaryResponse.from_summary(comparison.player_a),
            player_b=PlayerSummaryResponse.from_summary(comparison.player_b),
            rows=comparison.rows,
        )

    return app
