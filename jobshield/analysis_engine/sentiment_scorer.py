"""
Sentiment-flavored ("BERT-flavored") legitimacy scorer.

A sentiment label and confidence set the base score; fraud-pattern
penalties computed directly from the text are applied on top. The
classifier is injectable; the default is a deterministic lexicon
classifier standing in for a transformer sentiment model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from jobshield.analysis_engine.fallback import simple_fallback
from jobshield.analysis_engine.models import ScoreResult, SentimentPrediction, clamp_score
from jobshield.ml.keywords import (
    FRAUD_KEYWORDS,
    LEGIT_KEYWORDS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    count_keywords,
)

SentimentClassifier = Callable[[str], SentimentPrediction]

NEUTRAL_BASE_SCORE = 50.0
HIGH_CONFIDENCE = 80.0
FRAUD_KEYWORD_PENALTY = 8
LEGIT_KEYWORD_BONUS = 5
SHORT_TEXT_CHARS = 200
LONG_TEXT_CHARS = 1000
SHORT_TEXT_PENALTY = 10
LONG_TEXT_BONUS = 5

# Lexicon classifier: score grows with the positive/negative hit margin
LEXICON_BASE_CONFIDENCE = 0.6
LEXICON_STEP = 0.1
LEXICON_MAX_CONFIDENCE = 0.99


def lexicon_sentiment(text: str) -> SentimentPrediction:
    """
    Deterministic sentiment from POSITIVE_WORDS / NEGATIVE_WORDS hits.

    More positive hits -> "positive", more negative -> "negative", tie ->
    "neutral". score = min(0.99, 0.6 + 0.1 * |positive - negative|).
    """
    margin = count_keywords(text, POSITIVE_WORDS) - count_keywords(text, NEGATIVE_WORDS)
    if margin > 0:
        label = "positive"
    elif margin < 0:
        label = "negative"
    else:
        label = "neutral"
    score = min(LEXICON_MAX_CONFIDENCE, LEXICON_BASE_CONFIDENCE + LEXICON_STEP * abs(margin))
    return SentimentPrediction(label=label, score=score)


def base_score_for(label: str, confidence: float) -> float:
    """Map sentiment label and confidence (0–100) to a base legitimacy score."""
    label = label.lower()
    if "positive" in label or "neutral" in label:
        return min(100.0, 60 + confidence * 0.4)
    if "negative" in label:
        return max(0.0, 40 - confidence * 0.3)
    return NEUTRAL_BASE_SCORE


@dataclass
class FraudPatterns:
    """Penalty (positive lowers the score) and the factors that explain it."""

    score_penalty: float = 0.0
    risk_factors: list[str] = field(default_factory=list)
    legitimacy_factors: list[str] = field(default_factory=list)


def detect_fraud_patterns(text: str) -> FraudPatterns:
    """
    penalty = fraud_hits*8 - legit_hits*5, +10 under 200 chars, -5 over 1000 chars.

    Uses the raw (unnormalized) hit counts over FRAUD_KEYWORDS and LEGIT_KEYWORDS.
    """
    out = FraudPatterns()
    fraud_count = count_keywords(text, FRAUD_KEYWORDS)
    legit_count = count_keywords(text, LEGIT_KEYWORDS)

    if fraud_count > 0:
        out.score_penalty += fraud_count * FRAUD_KEYWORD_PENALTY
        out.risk_factors.append(f"{fraud_count} suspicious keyword(s) detected")
    if legit_count > 0:
        out.score_penalty -= legit_count * LEGIT_KEYWORD_BONUS
        out.legitimacy_factors.append(f"{legit_count} professional term(s) detected")

    if len(text) < SHORT_TEXT_CHARS:
        out.score_penalty += SHORT_TEXT_PENALTY
        out.risk_factors.append("Job posting is unusually short")
    elif len(text) > LONG_TEXT_CHARS:
        out.score_penalty -= LONG_TEXT_BONUS
        out.legitimacy_factors.append("Detailed job description provided")
    return out


class SentimentScorer:
    """Scores text from a sentiment prediction plus fraud-pattern penalties."""

    def __init__(self, classifier: SentimentClassifier | None = lexicon_sentiment) -> None:
        self._classifier = classifier

    @property
    def available(self) -> bool:
        return self._classifier is not None

    def score(self, text: str) -> ScoreResult:
        """
        Score one posting.

        Factor order: sentiment factors, fraud-pattern factors, then a
        high-confidence factor when the classifier confidence exceeds 80.
        Without a classifier, returns the simple fallback result.
        """
        text = text or ""
        if self._classifier is None:
            return simple_fallback(text)

        prediction = self._classifier(text)
        label = prediction.label.lower()
        confidence = float(prediction.score) * 100

        patterns = detect_fraud_patterns(text)
        legitimacy_score = clamp_score(base_score_for(label, confidence) - patterns.score_penalty)

        risk_factors: list[str] = []
        legitimacy_factors: list[str] = []
        if "negative" in label:
            risk_factors.append("Negative tone detected in job posting")
            risk_factors.append("Aggressive or concerning language patterns")
        else:
            legitimacy_factors.append("Professional tone detected")
            legitimacy_factors.append("Appropriate language for job postings")

        risk_factors.extend(patterns.risk_factors)
        legitimacy_factors.extend(patterns.legitimacy_factors)

        if confidence > HIGH_CONFIDENCE:
            if legitimacy_score < 50:
                risk_factors.append("High confidence in detecting suspicious patterns")
            else:
                legitimacy_factors.append("High confidence in content legitimacy")

        return ScoreResult.from_score(
            legitimacy_score,
            risk_factors=risk_factors,
            legitimacy_factors=legitimacy_factors,
        )
