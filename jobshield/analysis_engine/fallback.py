"""
Keyword-counting fallback heuristics.

Always available, no model. The simple heuristic backs the sentiment
service; the enhanced one (extended lists, length and caps adjustments)
backs the sequence service.
"""

from __future__ import annotations

from jobshield.analysis_engine.models import ScoreResult, ScoreSource
from jobshield.ml.feature_extractor import uppercase_ratio
from jobshield.ml.keywords import (
    EXTENDED_LEGIT_WORDS,
    EXTENDED_SUSPICIOUS_WORDS,
    SIMPLE_LEGIT_WORDS,
    SIMPLE_SUSPICIOUS_WORDS,
    count_keywords,
)

SIMPLE_BASE_SCORE = 70
SIMPLE_LEGIT_BONUS = 10
SIMPLE_SUSPICIOUS_PENALTY = 15

ENHANCED_BASE_SCORE = 60
ENHANCED_LEGIT_BONUS = 8
ENHANCED_SUSPICIOUS_PENALTY = 12
SHORT_TEXT_CHARS = 200
LONG_TEXT_CHARS = 1000
SHORT_TEXT_PENALTY = 15
LONG_TEXT_BONUS = 10
CAPS_RATIO_LIMIT = 0.3
CAPS_PENALTY = 10


def simple_fallback(text: str) -> ScoreResult:
    """score = clamp(70 + legit*10 - suspicious*15, 0, 100)."""
    text = text or ""
    suspicious = count_keywords(text, SIMPLE_SUSPICIOUS_WORDS)
    legit = count_keywords(text, SIMPLE_LEGIT_WORDS)
    score = SIMPLE_BASE_SCORE + legit * SIMPLE_LEGIT_BONUS - suspicious * SIMPLE_SUSPICIOUS_PENALTY
    return ScoreResult.from_score(
        score,
        risk_factors=["Suspicious keywords detected"] if suspicious > 0 else [],
        legitimacy_factors=["Professional language detected"] if legit > 0 else [],
        source=ScoreSource.FALLBACK,
    )


def enhanced_fallback(text: str) -> ScoreResult:
    """
    score = clamp(60 + legit*8 - suspicious*12 + length_adj + caps_adj, 0, 100).

    length_adj: -15 under 200 chars, +10 over 1000 chars.
    caps_adj: -10 when more than 30% of characters are A-Z.
    """
    text = text or ""
    suspicious = count_keywords(text, EXTENDED_SUSPICIOUS_WORDS)
    legit = count_keywords(text, EXTENDED_LEGIT_WORDS)

    score = ENHANCED_BASE_SCORE
    score += legit * ENHANCED_LEGIT_BONUS
    score -= suspicious * ENHANCED_SUSPICIOUS_PENALTY

    if len(text) < SHORT_TEXT_CHARS:
        score -= SHORT_TEXT_PENALTY
    elif len(text) > LONG_TEXT_CHARS:
        score += LONG_TEXT_BONUS

    if uppercase_ratio(text) > CAPS_RATIO_LIMIT:
        score -= CAPS_PENALTY

    risk = (
        ["Suspicious keywords detected", "Pattern analysis suggests caution"]
        if suspicious > 0
        else []
    )
    legit_factors = (
        ["Professional terminology detected", "Structured content analysis"]
        if legit > 0
        else []
    )
    return ScoreResult.from_score(
        score,
        risk_factors=risk,
        legitimacy_factors=legit_factors,
        source=ScoreSource.FALLBACK,
    )
