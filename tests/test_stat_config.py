import pytest

from nbazone.config import DEFAULT_STAT, RateStatKey, get_stat_config, iter_stat_configs


def test_get_stat_config_is_case_insensitive():
    config = get_stat_config("PPG")
    assert config.field == "points"
    assert config.unit == "PPG"


def test_get_stat_config_accepts_enum():
    assert get_stat_config(RateStatKey.MPG).field == "minutes"


def test_iter_stat_configs_display_order():
    assert [config.key for config in iter_stat_configs()] == ["ppg", "rpg", "apg", "mpg"]
    assert DEFAULT_STAT is RateStatKey.PPG


def test_get_stat_config_missing_raises():
    with pytest.raises(KeyError):
        get_stat_config("plus_minus")
