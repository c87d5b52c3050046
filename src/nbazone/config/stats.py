"""Rate stats that can be charted in a two-player comparison."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Union


class RateStatKey(str, Enum):
    PPG = "ppg"
    RPG = "rpg"
    APG = "apg"
    MPG = "mpg"


@dataclass(frozen=True)
class StatConfig:
    key: str
    field: str
    title: str
    unit: str


_STAT_CONFIGS: Dict[str, StatConfig] = {
    "ppg": StatConfig(key="ppg", field="points", title="Points Per Game (PPG)", unit="PPG"),
    "rpg": StatConfig(key="rpg", field="rebounds", title="Rebounds Per Game (RPG)", unit="RPG"),
    "apg": StatConfig(key="apg", field="assists", title="Assists Per Game (APG)", unit="APG"),
    "mpg": StatConfig(key="mpg", field="minutes", title="Minutes Per Game (MPG)", unit="MPG"),
}

DEFAULT_STAT = RateStatKey.PPG


def iter_stat_configs() -> Iterable[StatConfig]:
    """Return all configured stats in display order."""

    return _STAT_CONFIGS.values()


def get_stat_config(key: Union[str, RateStatKey]) -> StatConfig:
    """Fetch the config for a stat key, raising KeyError if missing."""

    raw = key.value if isinstance(key, RateStatKey) else str(key)
    normalized = raw.strip().lower()
    if normalized not in _STAT_CONFIGS:
        raise KeyError(f"No rate stat configured for key={key!r}")
    return _STAT_CONFIGS[normalized]
