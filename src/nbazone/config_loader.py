"""Persist and load stats service connection profiles."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_BASE_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 10.0


@dataclass
class ClientProfile:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def load(cls, path: Path) -> "ClientProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            base_url=data.get("base_url", DEFAULT_BASE_URL),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
        )

    @classmethod
    def from_env(
        cls,
        base: Optional["ClientProfile"] = None,
        environ: Mapping[str, str] | None = None,
    ) -> "ClientProfile":
        """Apply ``NBAZONE_API_URL`` and ``NBAZONE_TIMEOUT`` on top of ``base``."""

        env = os.environ if environ is None else environ
        profile = base or cls()
        base_url = env.get("NBAZONE_API_URL") or profile.base_url
        timeout = profile.timeout
        raw_timeout = env.get("NBAZONE_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"NBAZONE_TIMEOUT must be numeric, got {raw_timeout!r}") from None
        return cls(base_url=base_url, timeout=timeout)

    def save(self, path: Path) -> None:
        payload = {
            "base_url": self.base_url,
            "timeout": self.timeout,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
