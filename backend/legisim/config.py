"""Settings for the legislature simulator.

Everything can be overridden through environment variables or a ``.env`` file.
"""
from __future__ import annotations

import logging
import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

LOGGER = logging.getLogger(__name__)


def _int_env(key: str, fallback: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return fallback
    try:
        return int(raw)
    except ValueError:
        LOGGER.warning("Ignoring non-integer %s=%r, using %d.", key, raw, fallback)
        return fallback


def _optional_int_env(key: str) -> Optional[int]:
    raw = os.getenv(key, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        LOGGER.warning("Ignoring non-integer %s=%r.", key, raw)
        return None


# Election form defaults
DEFAULT_SIZE: int = _int_env("LEGISIM_DEFAULT_SIZE", 100)
DEFAULT_PARTIES: int = _int_env("LEGISIM_DEFAULT_PARTIES", 3)
DEFAULT_ISSUES: int = _int_env("LEGISIM_DEFAULT_ISSUES", 3)

# Fixed seed for every election that doesn't bring its own (unset = fresh randomness)
SEED: Optional[int] = _optional_int_env("LEGISIM_SEED")

LOG_LEVEL: str = os.getenv("LEGISIM_LOG_LEVEL", "INFO").upper()

# Allow multiple origins for local dev (5173, 5174, etc)
CORS_ORIGINS: List[str] = [
    o.strip()
    for o in os.getenv(
        "LEGISIM_CORS_ORIGINS",
        "http://localhost:5173,http://localhost:5174,http://localhost:8000",
    ).split(",")
    if o.strip()
]
