import decimal
import math

import pytest

from nbazone.stats import finite_or_none, round_half_away, safe_ratio, weighted_mean


def test_weighted_mean_zero_weight_is_zero():
    assert weighted_mean([]) == 0.0
    assert weighted_mean([(12.0, 0), (30.0, 0)]) == 0.0


def test_weighted_mean_weights_values():
    assert weighted_mean([(10.0, 1), (20.0, 3)]) == pytest.approx(17.5)


def test_safe_ratio():
    assert safe_ratio(1, 4) == 0.25
    assert safe_ratio(0, 0) is None
    assert safe_ratio(5, 0) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (2.675, 2.68),
        (1.005, 1.01),
        (-1.005, -1.01),
        (0.125, 0.13),
        (-0.125, -0.13),
        (25.0, 25.0),
        (3.14159, 3.14),
    ],
)
def test_round_half_away(value, expected):
    assert round_half_away(value, 2) == expected


def test_round_half_away_other_places():
    assert round_half_away(2.5, 0) == 3.0
    assert round_half_away(-2.5, 0) == -3.0
    assert round_half_away(0.0625, 3) == 0.063


def test_finite_or_none():
    assert finite_or_none(None) is None
    assert finite_or_none(math.nan) is None
    assert finite_or_none(-math.inf) is None
    assert finite_or_none(4) == 4.0


def test_round_half_away_large_values_pass_through():
    assert round_half_away(1e30, 2) == 1e30
    assert round_half_away(-1.5e26, 2) == -1.5e26
    assert round_half_away(1e-7, 2) == 0.0


def test_round_half_away_ignores_ambient_decimal_context():
    expected = [round_half_away(v, 2) for v in (1234.5678, 2.675, 99.995)]

    with decimal.localcontext() as ctx:
        ctx.prec = 3
        ctx.rounding = decimal.ROUND_DOWN
        ctx.traps[decimal.Inexact] = True
        assert [round_half_away(v, 2) for v in (1234.5678, 2.675, 99.995)] == expected

    assert expected == [1234.57, 2.68, 100.0]
