"""
Data models for analysis engine output.

ScoreResult is what every scorer, fallback and service returns; the UI
renders it via to_dict(). ScoringFailure is the explicit failure side of
a scoring attempt, converted to a ScoreResult at the service boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

LEGITIMACY_THRESHOLD = 50.0
MIN_SCORE = 0.0
MAX_SCORE = 100.0


class ScoreSource(str, Enum):
    MODEL = "model"
    FALLBACK = "fallback"


def clamp_score(score: float) -> float:
    """Clamp to [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, float(score)))


@dataclass(frozen=True)
class ScoreResult:
    """
    Legitimacy verdict for one posting.

    is_legitimate is always overall_score > 50 and confidence always equals
    overall_score; build through from_score() to keep both true.
    """

    is_legitimate: bool
    confidence: float
    risk_factors: tuple[str, ...]
    legitimacy_factors: tuple[str, ...]
    overall_score: float
    source: ScoreSource = field(default=ScoreSource.MODEL, compare=False)
    """Which path produced the result; not part of value equality."""

    @classmethod
    def from_score(
        cls,
        score: float,
        risk_factors: Iterable[str] = (),
        legitimacy_factors: Iterable[str] = (),
        source: ScoreSource = ScoreSource.MODEL,
    ) -> "ScoreResult":
        s = clamp_score(score)
        return cls(
            is_legitimate=s > LEGITIMACY_THRESHOLD,
            confidence=s,
            risk_factors=tuple(risk_factors),
            legitimacy_factors=tuple(legitimacy_factors),
            overall_score=s,
            source=source,
        )

    def to_dict(self) -> dict[str, Any]:
        """UI payload (camelCase keys)."""
        return {
            "isLegitimate": self.is_legitimate,
            "confidence": self.confidence,
            "riskFactors": list(self.risk_factors),
            "legitimacyFactors": list(self.legitimacy_factors),
            "overallScore": self.overall_score,
        }


@dataclass(frozen=True)
class SentimentPrediction:
    """Top label from a sentiment classifier; score in [0, 1]."""

    label: str
    score: float


@dataclass(frozen=True)
class ScoringFailure:
    """
    Failed scoring attempt.

    error is the InitializationFailure or InferenceFailure that names the
    cause; the service logs it and substitutes its fallback result.
    """

    error: Exception

    @property
    def reason(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


ScoringOutcome = ScoreResult | ScoringFailure
