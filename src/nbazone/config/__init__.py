"""Configuration helpers for comparison stats."""

from .stats import DEFAULT_STAT, RateStatKey, StatConfig, get_stat_config, iter_stat_configs

__all__ = [
    "DEFAULT_STAT",
    "RateStatKey",
    "StatConfig",
    "get_stat_config",
    "iter_stat_configs",
]
