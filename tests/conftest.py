"""
Pytest fixtures for JobShield tests: settings, a fitted sequence model,
and stub models with a fixed legitimate-class probability.
"""

from __future__ import annotations

import numpy as np
import pytest

from jobshield.config.settings import Settings
from jobshield.ml.train_model import train_sequence_model


class FixedProbaModel:
    """Stands in for a fitted classifier: always predicts legit probability p."""

    classes_ = np.array([0, 1])

    def __init__(self, p: float, fail: bool = False) -> None:
        self.p = p
        self.fail = fail
        self.calls = 0

    def predict_proba(self, X):
        self.calls += 1
        if self.fail:
            raise RuntimeError("inference exploded")
        return np.array([[1 - self.p, self.p]] * len(X))


@pytest.fixture
def settings() -> Settings:
    """Default settings with a shorter fit for test speed."""
    return Settings(seed=42, train_max_iter=200)


@pytest.fixture(scope="session")
def trained_model():
    """Sequence model fitted once per session with the default settings."""
    return train_sequence_model(Settings())


@pytest.fixture
def fixed_proba_model():
    """Factory for FixedProbaModel."""
    return FixedProbaModel
