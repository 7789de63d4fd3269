"""Runtime configuration profiles for grinpow."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional

PROFILE = os.getenv("GRINPOW_PROFILE", "default")

PROFILES: Dict[str, Dict[str, str]] = {
    "default": {
        "GRINPOW_WORKERS": "4",
        "GRINPOW_LOG_LEVEL": "INFO",
        "GRINPOW_DIFF_DECIMALS": "2",
    },
    "validator": {
        "GRINPOW_WORKERS": "1",
        "GRINPOW_LOG_LEVEL": "WARNING",
        "GRINPOW_DIFF_DECIMALS": "2",
    },
    "pool": {
        "GRINPOW_WORKERS": "16",
        "GRINPOW_LOG_LEVEL": "INFO",
        "GRINPOW_DIFF_DECIMALS": "3",
    },
}


@dataclass(frozen=True)
class Settings:
    workers: int = 4
    log_level: str = "INFO"
    alt_scale: Optional[int] = None
    diff_decimals: int = 2


def apply_profile() -> None:
    profile = os.getenv("GRINPOW_PROFILE", PROFILE)
    if not profile:
        return
    settings = PROFILES.get(profile)
    if not settings:
        return
    for key, value in settings.items():
        os.environ.setdefault(key, value)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip(), 0)
    except ValueError:
        return default


def get_settings() -> Settings:
    """Read settings from the environment, falling back to defaults on bad values."""
    workers = _env_int("GRINPOW_WORKERS", Settings.workers)
    if workers < 1:
        workers = 1

    log_level = os.getenv("GRINPOW_LOG_LEVEL", Settings.log_level).strip().upper() or Settings.log_level

    alt_scale = _env_int("GRINPOW_AR_SCALE", None)
    if alt_scale is not None and alt_scale < 0:
        alt_scale = None

    diff_decimals = _env_int("GRINPOW_DIFF_DECIMALS", Settings.diff_decimals)
    if diff_decimals < 0:
        diff_decimals = 0

    return Settings(
        workers=workers,
        log_level=log_level,
        alt_scale=alt_scale,
        diff_decimals=diff_decimals,
    )
