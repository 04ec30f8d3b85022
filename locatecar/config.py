"""Application settings, read from the environment with sane defaults."""

import os
from pathlib import Path

from locatecar.utils.constants import DEFAULT_PAGE_SIZE, DEFAULT_TIMEZONE

BASE_DIR = Path(__file__).resolve().parents[1]


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


class Config:
    """
    Defaults for `create_app`. Keys are copied into `app.config`;
    a mapping passed to `create_app` overrides them.

    Set LOCATECAR_DATA_DIR to "" to keep everything in memory.
    """

    DATA_DIR = os.getenv("LOCATECAR_DATA_DIR", str(BASE_DIR / "data"))
    REPORTS_DIR = os.getenv("LOCATECAR_REPORTS_DIR", str(BASE_DIR / "reports"))
    TIMEZONE = os.getenv("LOCATECAR_TIMEZONE", DEFAULT_TIMEZONE)
    PAGE_SIZE = _int_env("LOCATECAR_PAGE_SIZE", DEFAULT_PAGE_SIZE)
    LOG_LEVEL = os.getenv("LOCATECAR_LOG_LEVEL", "INFO")
