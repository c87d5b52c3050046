from __future__ import annotations

import pytest

from nbazone.models import PlayerProfile

from tests.factories import FakeProvider, season


@pytest.fixture
def provider() -> FakeProvider:
    profiles = {
        23: PlayerProfile(
            id=23,
            first_name="LeBron",
            last_name="James",
            position="F",
            height_in=81,
            bodyweight_lbs=250,
            country="USA",
            draft_year=2003,
            draft_round=1,
            draft_number=1,
        ),
        30: PlayerProfile(id=30, first_name="Stephen", last_name="Curry", position="G", height_in=74),
        99: PlayerProfile(id=99, first_name="Rookie", last_name="Nobody"),
    }
    seasons = {
        23: [
            season(23, 2021, games_played=45, points=30.3, rebounds=8.2, assists=6.2, minutes=37.2,
                   field_goals_made=504, field_goals_attempted=1047, three_point_made=128,
                   three_point_attempted=359, free_throw_made=227, free_throw_attempted=301),
            season(23, 2020, games_played=67, points=25.0, rebounds=7.7, assists=7.8, minutes=33.4,
                   field_goals_made=643, field_goals_attempted=1249, three_point_made=148,
                   three_point_attempted=406, free_throw_made=270, free_throw_attempted=387),
        ],
        30: [
            season(30, 2021, games_played=64, points=25.5, rebounds=5.2, assists=6.3, minutes=34.5),
            season(30, 2022, games_played=56, points=29.4, rebounds=6.1, assists=6.3, minutes=34.7),
        ],
        99: [],
    }
    return FakeProvider(profiles, seasons)
