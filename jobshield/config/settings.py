"""
Application settings.

Loads configuration from environment variables and the project .env file
and exposes a typed, immutable Settings object. Services receive Settings
through their constructor; nothing reads the environment at scoring time.
"""

from __future__ import annotations

from dataclasses import dataclass

from jobshield.config.env import (
    get_env_bool,
    get_env_float,
    get_env_int,
    load_jobshield_env,
)

DEFAULT_SEED = 42
DEFAULT_TRAIN_MAX_ITER = 500
DEFAULT_LEARNING_RATE = 0.001


@dataclass(frozen=True)
class Settings:
    """
    Settings for both analysis services.

    seed: random_state for the sequence model fit; same seed, same model.
    train_max_iter: optimizer iterations for the fit.
    learning_rate: adam initial learning rate.
    sentiment_enabled / sequence_enabled: False pins the service to its fallback.
    """

    seed: int = DEFAULT_SEED
    train_max_iter: int = DEFAULT_TRAIN_MAX_ITER
    learning_rate: float = DEFAULT_LEARNING_RATE
    sentiment_enabled: bool = True
    sequence_enabled: bool = True

    def __post_init__(self) -> None:
        if self.train_max_iter < 1:
            raise ValueError("train_max_iter must be >= 1")
        if self.learning_rate <= 0:
            raise ValueError("learning_rate must be > 0")


def get_settings() -> Settings:
    """
    Return settings built from the environment.

    Returns:
        Settings with seed, train_max_iter, learning_rate and the two
        service switches. Invalid values fall back to defaults.
    """
    load_jobshield_env()
    max_iter = get_env_int("JOBSHIELD_TRAIN_MAX_ITER", DEFAULT_TRAIN_MAX_ITER)
    learning_rate = get_env_float("JOBSHIELD_LEARNING_RATE", DEFAULT_LEARNING_RATE)
    return Settings(
        seed=get_env_int("JOBSHIELD_SEED", DEFAULT_SEED),
        train_max_iter=max_iter if max_iter >= 1 else DEFAULT_TRAIN_MAX_ITER,
        learning_rate=learning_rate if learning_rate > 0 else DEFAULT_LEARNING_RATE,
        sentiment_enabled=get_env_bool("JOBSHIELD_SENTIMENT_ENABLED", True),
        sequence_enabled=get_env_bool("JOBSHIELD_SEQUENCE_ENABLED", True),
    )
