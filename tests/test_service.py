import pytest

from nbazone.errors import PlayerNotFoundError
from nbazone.stats.service import build_comparison, build_player_report


def test_build_player_report_sorts_seasons_and_aggregates(provider):
    report = build_player_report(provider, 23)

    assert report.profile.full_name == "LeBron James"
    assert [s.season for s in report.seasons] == [2020, 2021]
    assert report.career.games_played == 112
    assert report.career.points == pytest.approx((67 * 25.0 + 45 * 30.3) / 112)
    assert report.career.field_goal_pct == pytest.approx(1147 / 2296)


def test_build_player_report_without_seasons(provider):
    report = build_player_report(provider, 99)

    assert report.seasons == []
    assert report.career.games_played == 0
    assert report.career.field_goal_pct is None


def test_build_comparison_aligns_both_players(provider):
    comparison = build_comparison(provider, 23, 30, "rpg")

    assert comparison.stat.key == "rpg"
    assert comparison.player_b.full_name == "Stephen Curry"
    assert [(r.season, r.value_a, r.value_b) for r in comparison.rows] == [
        (2020, 7.7, None),
        (2021, 8.2, 5.2),
        (2022, None, 6.1),
    ]


def test_build_comparison_defaults_to_points(provider):
    comparison = build_comparison(provider, 30, 23)

    assert comparison.stat.key == "ppg"
    assert comparison.rows[0].value_b == 25.0


def test_build_comparison_unknown_stat_fetches_nothing(provider):
    with pytest.raises(KeyError):
        build_comparison(provider, 23, 30, "xyz")

    assert provider.calls == []


def test_build_comparison_missing_player(provider):
    with pytest.raises(PlayerNotFoundError):
        build_comparison(provider, 23, 1234)
