"""
Lexical feature extraction for job posting text.

Builds the fixed-order numeric feature vector used by the sequence model
and the enhanced fallback. No scoring logic; pure function of the text.
"""

from __future__ import annotations

import re

import numpy as np

from jobshield.ml.keywords import (
    FRAUD_KEYWORDS,
    LEGIT_KEYWORDS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    count_keywords,
)

# Core features in extraction order; the model input appends two reserved slots
CORE_FEATURE_NAMES = [
    "length_ratio",
    "word_count_ratio",
    "fraud_keyword_density",
    "legit_keyword_density",
    "positive_word_density",
    "negative_word_density",
    "uppercase_ratio",
    "punctuation_density",
]
RESERVED_FEATURE_NAMES = ["reserved_0", "reserved_1"]
FEATURE_NAMES = CORE_FEATURE_NAMES + RESERVED_FEATURE_NAMES

N_CORE_FEATURES = len(CORE_FEATURE_NAMES)
MODEL_INPUT_WIDTH = len(FEATURE_NAMES)

_UPPERCASE_RE = re.compile(r"[A-Z]")
_PUNCTUATION_RE = re.compile(r"[!?]")


def get_feature_names() -> list[str]:
    """Return model input column names in order."""
    return list(FEATURE_NAMES)


def uppercase_ratio(text: str) -> float:
    """Share of characters matching [A-Z]; 0.0 for empty text."""
    if not text:
        return 0.0
    return len(_UPPERCASE_RE.findall(text)) / len(text)


def punctuation_density(text: str) -> float:
    """Share of characters that are '!' or '?'; 0.0 for empty text."""
    if not text:
        return 0.0
    return len(_PUNCTUATION_RE.findall(text)) / len(text)


def extract_features(text: str) -> np.ndarray:
    """
    Extract the 8 core lexical features from posting text.

    Order: length/1000, words/100, fraud hits/10, legit hits/10,
    positive hits/5, negative hits/5, uppercase ratio, !? density.
    Returns 1D numpy array of shape (8,) float64, all finite and >= 0.
    """
    text = text or ""
    features = [
        len(text) / 1000,
        len(text.split()) / 100,
        count_keywords(text, FRAUD_KEYWORDS) / 10,
        count_keywords(text, LEGIT_KEYWORDS) / 10,
        count_keywords(text, POSITIVE_WORDS) / 5,
        count_keywords(text, NEGATIVE_WORDS) / 5,
        uppercase_ratio(text),
        punctuation_density(text),
    ]
    return np.asarray(features, dtype=np.float64)


def to_model_input(features: np.ndarray) -> np.ndarray:
    """
    Pad a core feature vector to the model's fixed input width (10).

    Reserved slots are zero. Raises ValueError if features is not 8 wide.
    """
    x = np.asarray(features, dtype=np.float64).ravel()
    if x.shape[0] != N_CORE_FEATURES:
        raise ValueError(f"expected {N_CORE_FEATURES} core features, got {x.shape[0]}")
    return np.concatenate([x, np.zeros(MODEL_INPUT_WIDTH - N_CORE_FEATURES)])


def build_model_input(text: str) -> np.ndarray:
    """extract_features + to_model_input."""
    return to_model_input(extract_features(text))
