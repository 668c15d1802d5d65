"""
Sequence-flavored ("LSTM-flavored") legitimacy scorer.

Runs the padded lexical feature vector through the model fitted at
initialization (train_model.train_sequence_model) and turns the
legitimate-class probability into a score and threshold-keyed factors.
"""

from __future__ import annotations

from sklearn.neural_network import MLPClassifier

from jobshield.analysis_engine.models import ScoreResult
from jobshield.ml.feature_extractor import build_model_input
from jobshield.ml.train_model import predict_legit_proba

SUSPICIOUS_RAW_LIMIT = 50.0
STRONG_FRAUD_RAW = 30.0
STRONG_LEGIT_RAW = 70.0
SHORT_TEXT_CHARS = 100
DETAILED_TEXT_CHARS = 2000


def rescale_raw_score(raw_score: float) -> float:
    """
    raw if raw > 50 else 100 - raw.

    Low raw scores (model leans fraudulent) map to high legitimacy; this
    mirrors the established scoring behavior and is kept as-is.
    """
    return raw_score if raw_score > SUSPICIOUS_RAW_LIMIT else 100 - raw_score


def raw_score_factors(raw_score: float, text_length: int) -> tuple[list[str], list[str]]:
    """Risk and legitimacy factors keyed on the raw model score and text length."""
    risk_factors: list[str] = []
    legitimacy_factors: list[str] = []

    if raw_score <= SUSPICIOUS_RAW_LIMIT:
        risk_factors.append("LSTM model detected suspicious patterns")
        risk_factors.append("Neural network analysis suggests potential fraud")
        if raw_score < STRONG_FRAUD_RAW:
            risk_factors.append("Strong indication of fraudulent content")
    else:
        legitimacy_factors.append("LSTM model confirms legitimate patterns")
        legitimacy_factors.append("Neural network analysis supports authenticity")
        if raw_score > STRONG_LEGIT_RAW:
            legitimacy_factors.append("High confidence in content legitimacy")

    if text_length < SHORT_TEXT_CHARS:
        risk_factors.append("Job posting is unusually short")
    elif text_length > DETAILED_TEXT_CHARS:
        legitimacy_factors.append("Detailed job description provided")

    return risk_factors, legitimacy_factors


class SequenceScorer:
    """Scores text with a fitted classifier; read-only after construction."""

    def __init__(self, model: MLPClassifier) -> None:
        self._model = model

    def raw_score(self, text: str) -> float:
        """Legitimate-class probability x 100."""
        return predict_legit_proba(self._model, build_model_input(text)) * 100

    def score(self, text: str) -> ScoreResult:
        text = text or ""
        raw = self.raw_score(text)
        risk_factors, legitimacy_factors = raw_score_factors(raw, len(text))
        return ScoreResult.from_score(
            rescale_raw_score(raw),
            risk_factors=risk_factors,
            legitimacy_factors=legitimacy_factors,
        )
