"""
Binary-classification metrics over evaluation records.

Confusion counts, accuracy, precision, recall and F1 come from
scikit-learn with zero_division=0. AUC is a rank-based trapezoidal
estimate over records sorted by prediction (descending, stable).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    confusion_matrix,
    f1_score,
    precision_score,
    recall_score,
)

from jobshield.jobshield_logging import get_logger

logger = get_logger(__name__)

DECISION_THRESHOLD = 0.5
METRIC_NAMES = ("accuracy", "precision", "recall", "f1_score", "auc")


@dataclass(frozen=True)
class EvaluationRecord:
    """One model's outcome on one test case."""

    prediction: float
    binary_prediction: int
    actual: int
    correct: bool

    @classmethod
    def from_score(cls, overall_score: float, actual: int) -> "EvaluationRecord":
        """prediction = score/100; binary = 1 if prediction > 0.5."""
        prediction = float(overall_score) / 100
        binary = 1 if prediction > DECISION_THRESHOLD else 0
        return cls(
            prediction=prediction,
            binary_prediction=binary,
            actual=int(actual),
            correct=binary == int(actual),
        )


@dataclass(frozen=True)
class ModelMetrics:
    accuracy: float
    precision: float
    recall: float
    f1_score: float
    auc: float
    tp: int
    tn: int
    fp: int
    fn: int

    @property
    def total(self) -> int:
        return self.tp + self.tn + self.fp + self.fn

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


EMPTY_METRICS = ModelMetrics(
    accuracy=0.0, precision=0.0, recall=0.0, f1_score=0.0, auc=0.0, tp=0, tn=0, fp=0, fn=0
)


def calculate_auc(records: Sequence[EvaluationRecord]) -> float:
    """
    Trapezoidal ROC area.

    Records are swept in descending prediction order (ties keep input
    order); after each record (fpr, tpr) is updated and
    auc += (fpr - prev_fpr) * (tpr + prev_tpr) / 2, starting from (0, 0).
    Returns 0.0 when either class is absent (ROC undefined).
    """
    if not records:
        return 0.0
    predictions = np.array([r.prediction for r in records], dtype=np.float64)
    actual = np.array([r.actual for r in records], dtype=np.int64)
    total_pos = int(np.sum(actual == 1))
    total_neg = int(np.sum(actual == 0))
    if total_pos == 0 or total_neg == 0:
        logger.warning("auc_undefined_single_class", positives=total_pos, negatives=total_neg)
        return 0.0

    order = np.argsort(-predictions, kind="stable")
    sorted_actual = actual[order]
    tpr = np.concatenate([[0.0], np.cumsum(sorted_actual == 1) / total_pos])
    fpr = np.concatenate([[0.0], np.cumsum(sorted_actual == 0) / total_neg])
    return float(np.sum(np.diff(fpr) * (tpr[1:] + tpr[:-1]) / 2))


def compute_metrics(records: Sequence[EvaluationRecord]) -> ModelMetrics:
    """
    Aggregate metrics for one model's records.

    tp + tn + fp + fn == len(records); accuracy == (tp + tn) / len(records).
    Empty input returns all-zero metrics.
    """
    if not records:
        return EMPTY_METRICS

    y_true = np.array([r.actual for r in records], dtype=np.int64)
    y_pred = np.array([r.binary_prediction for r in records], dtype=np.int64)

    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
    return ModelMetrics(
        accuracy=float(accuracy_score(y_true, y_pred)),
        precision=float(precision_score(y_true, y_pred, labels=[0, 1], zero_division=0)),
        recall=float(recall_score(y_true, y_pred, labels=[0, 1], zero_division=0)),
        f1_score=float(f1_score(y_true, y_pred, labels=[0, 1], zero_division=0)),
        auc=calculate_auc(records),
        tp=int(tp),
        tn=int(tn),
        fp=int(fp),
        fn=int(fn),
    )
