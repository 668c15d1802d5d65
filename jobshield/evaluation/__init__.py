"""
Offline evaluation of analysis services against a labeled corpus.
"""

from jobshield.evaluation.dataset import DEFAULT_TEST_CASES, TestCase
from jobshield.evaluation.evaluator import CaseOutcome, Evaluator
from jobshield.evaluation.metrics import (
    EvaluationRecord,
    ModelMetrics,
    calculate_auc,
    compute_metrics,
)

__all__ = [
    "DEFAULT_TEST_CASES",
    "CaseOutcome",
    "EvaluationRecord",
    "Evaluator",
    "ModelMetrics",
    "TestCase",
    "calculate_auc",
    "compute_metrics",
]
