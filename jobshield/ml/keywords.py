"""
Keyword tables used by feature extraction, scorers and fallbacks.

Membership and order are fixed: scores and tests depend on them. All
entries are lowercase and matched as case-insensitive substrings.
"""

from __future__ import annotations

from typing import Iterable

# Feature extraction (fraud / legit counts) and sentiment-scorer penalty
FRAUD_KEYWORDS = (
    "urgent",
    "immediate",
    "work from home",
    "no experience",
    "easy money",
    "guaranteed",
    "quick cash",
)
LEGIT_KEYWORDS = (
    "benefits",
    "qualifications",
    "company",
    "responsibilities",
    "experience required",
    "salary",
)

# Sentiment-like lexicon (feature slots 5 and 6, default sentiment classifier)
POSITIVE_WORDS = ("excellent", "great", "professional", "competitive", "benefits")
NEGATIVE_WORDS = ("scam", "urgent", "guaranteed", "easy", "quick")

# Simple fallback heuristic
SIMPLE_SUSPICIOUS_WORDS = (
    "urgent",
    "immediate",
    "work from home",
    "no experience",
    "easy money",
    "guaranteed",
)
SIMPLE_LEGIT_WORDS = (
    "benefits",
    "qualifications",
    "company",
    "responsibilities",
    "experience required",
)

# Enhanced fallback heuristic (supersets of the simple lists)
EXTENDED_SUSPICIOUS_WORDS = SIMPLE_SUSPICIOUS_WORDS + (
    "quick cash",
    "no interview",
    "start today",
    "millionaire",
    "rich quick",
)
EXTENDED_LEGIT_WORDS = SIMPLE_LEGIT_WORDS + (
    "salary",
    "location",
    "requirements",
    "about us",
    "what we offer",
    "apply now",
)


def count_keywords(text: str, keywords: Iterable[str]) -> int:
    """Number of list entries found in text (case-insensitive substring); each entry counts once."""
    lowered = text.lower()
    return sum(1 for word in keywords if word in lowered)
