"""Fetch player data through a stats provider and derive report values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Union

from nbazone.client import StatsProvider
from nbazone.config import DEFAULT_STAT, RateStatKey, StatConfig, get_stat_config
from nbazone.models import CareerTotals, ChartRow, PlayerProfile, SeasonRecord

from .career import aggregate
from .compare import align


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerReport:
    profile: PlayerProfile
    seasons: List[SeasonRecord]
    career: CareerTotals


@dataclass(frozen=True)
class Comparison:
    stat: StatConfig
    player_a: PlayerProfile
    player_b: PlayerProfile
    rows: List[ChartRow]


def build_player_report(provider: StatsProvider, player_id: int) -> PlayerReport:
    profile = provider.get_player(player_id)
    seasons = sorted(provider.get_seasons(player_id), key=lambda s: s.season)
    logger.debug("Loaded %d seasons for player %s", len(seasons), player_id)
    return PlayerReport(profile=profile, seasons=seasons, career=aggregate(seasons))


def build_comparison(
    provider: StatsProvider,
    player_a_id: int,
    player_b_id: int,
    stat: Union[str, RateStatKey] = DEFAULT_STAT,
) -> Comparison:
    """Load both players independently, then align their seasons on ``stat``."""

    config = get_stat_config(stat)
    player_a = provider.get_player(player_a_id)
    seasons_a = provider.get_seasons(player_a_id)
    player_b = provider.get_player(player_b_id)
    seasons_b = provider.get_seasons(player_b_id)
    rows = align(seasons_a, seasons_b, config.key)
    logger.debug(
        "Aligned %d/%d seasons for %s vs %s into %d rows",
        len(seasons_a),
        len(seasons_b),
        player_a_id,
        player_b_id,
        len(rows),
    )
    return Comparison(stat=config, player_a=player_a, player_b=player_b, rows=rows)
