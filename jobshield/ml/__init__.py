"""
JobShield ML layer.

Keyword tables, lexical feature extraction, and the one-time synthetic
fit of the sequence-flavored model.
"""

from jobshield.ml.feature_extractor import (
    FEATURE_NAMES,
    build_model_input,
    extract_features,
    to_model_input,
)
from jobshield.ml.train_model import predict_legit_proba, train_sequence_model

__all__ = [
    "FEATURE_NAMES",
    "build_model_input",
    "extract_features",
    "predict_legit_proba",
    "to_model_input",
    "train_sequence_model",
]
