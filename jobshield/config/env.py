"""
Environment variable loading and parsing for JobShield.

- JOBSHIELD_SEED: random_state for the sequence model fit (default: 42)
- JOBSHIELD_TRAIN_MAX_ITER: optimizer iterations for the fit (default: 500)
- JOBSHIELD_LEARNING_RATE: adam learning rate (default: 0.001)
- JOBSHIELD_SENTIMENT_ENABLED / JOBSHIELD_SEQUENCE_ENABLED: 0 pins that
  service to its fallback heuristic (default: enabled)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from jobshield.jobshield_logging import get_logger

logger = get_logger(__name__)

# Project root: config is jobshield/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def load_jobshield_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    load_dotenv(_ENV_PATH, override=False)


def get_env_int(name: str, default: int) -> int:
    """Return int env value; default when unset or unparsable."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("config_invalid_int", name=name, value=raw, default=default)
        return default


def get_env_float(name: str, default: float) -> float:
    """Return float env value; default when unset or unparsable."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("config_invalid_float", name=name, value=raw, default=default)
        return default


def get_env_bool(name: str, default: bool) -> bool:
    """Return bool env value (1/true/yes/on, 0/false/no/off); default otherwise."""
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    logger.warning("config_invalid_bool", name=name, value=raw, default=default)
    return default
