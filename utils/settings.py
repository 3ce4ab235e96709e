# settings.py
from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# ───────────────────────── .env LOAD ─────────────────────────
_ENV_LOADED = load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=True)

DEFAULT_BASE_URL = "https://fsa-crud-2aa9294fe819.herokuapp.com/api"
DEFAULT_COHORT = "2506-ftb-ct-web-pt"
DEFAULT_TIMEOUT = 15.0


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_log_level(name: str, default: int = logging.INFO) -> int:
    raw = (os.getenv(name) or "").strip().upper()
    level = logging.getLevelName(raw) if raw else default
    return level if isinstance(level, int) else default


PARTY_API_BASE_URL = os.getenv("PARTY_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
PARTY_API_COHORT = os.getenv("PARTY_API_COHORT", DEFAULT_COHORT).strip("/")
PARTY_API_TIMEOUT = _env_float("PARTY_API_TIMEOUT", DEFAULT_TIMEOUT)
PARTY_LOG_LEVEL = _env_log_level("PARTY_LOG_LEVEL")

# Every endpoint hangs off this
API = f"{PARTY_API_BASE_URL}/{PARTY_API_COHORT}"
