"""
Tests for settings loaded from the environment.
"""

from __future__ import annotations

import pytest

from jobshield.config import Settings, get_settings

ENV_NAMES = (
    "JOBSHIELD_SEED",
    "JOBSHIELD_TRAIN_MAX_ITER",
    "JOBSHIELD_LEARNING_RATE",
    "JOBSHIELD_SENTIMENT_ENABLED",
    "JOBSHIELD_SEQUENCE_ENABLED",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """No env: documented defaults."""
    s = get_settings()
    assert s == Settings()
    assert s.seed == 42
    assert s.train_max_iter == 500
    assert s.learning_rate == 0.001
    assert s.sentiment_enabled and s.sequence_enabled


def test_env_overrides(monkeypatch):
    """Env values are parsed into typed settings."""
    monkeypatch.setenv("JOBSHIELD_SEED", "7")
    monkeypatch.setenv("JOBSHIELD_TRAIN_MAX_ITER", "120")
    monkeypatch.setenv("JOBSHIELD_LEARNING_RATE", "0.01")
    monkeypatch.setenv("JOBSHIELD_SEQUENCE_ENABLED", "off")
    s = get_settings()
    assert s.seed == 7
    assert s.train_max_iter == 120
    assert s.learning_rate == 0.01
    assert s.sequence_enabled is False
    assert s.sentiment_enabled is True


def test_invalid_values_fall_back_to_defaults(monkeypatch):
    """Unparsable or out-of-range values use defaults."""
    monkeypatch.setenv("JOBSHIELD_SEED", "abc")
    monkeypatch.setenv("JOBSHIELD_TRAIN_MAX_ITER", "0")
    monkeypatch.setenv("JOBSHIELD_LEARNING_RATE", "-1")
    monkeypatch.setenv("JOBSHIELD_SENTIMENT_ENABLED", "maybe")
    s = get_settings()
    assert s.seed == 42
    assert s.train_max_iter == 500
    assert s.learning_rate == 0.001
    assert s.sentiment_enabled is True


def test_settings_validation():
    """Direct construction validates ranges."""
    with pytest.raises(ValueError):
        Settings(train_max_iter=0)
    with pytest.raises(ValueError):
        Settings(learning_rate=0)
