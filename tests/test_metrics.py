"""
Tests for evaluation metrics: confusion counts, zero-denominator rules,
and the trapezoidal AUC including its stable tie order.
"""

from __future__ import annotations

import pytest

from jobshield.evaluation.metrics import (
    EvaluationRecord,
    ModelMetrics,
    calculate_auc,
    compute_metrics,
)


def _rec(prediction: float, actual: int) -> EvaluationRecord:
    return EvaluationRecord.from_score(prediction * 100, actual)


def test_record_from_score_threshold():
    """prediction = score/100; binary is 1 only strictly above 0.5."""
    r = EvaluationRecord.from_score(50, 1)
    assert r.prediction == 0.5
    assert r.binary_prediction == 0
    assert r.correct is False
    r = EvaluationRecord.from_score(75, 1)
    assert r.binary_prediction == 1 and r.correct is True


def test_auc_perfect_ranking():
    """Positive ranked above negative -> 1.0."""
    assert calculate_auc([_rec(0.9, 1), _rec(0.1, 0)]) == 1.0


def test_auc_inverted_ranking():
    """Negative ranked above positive -> 0.0."""
    assert calculate_auc([_rec(0.1, 1), _rec(0.9, 0)]) == 0.0


def test_auc_mixed_ranking():
    """pos, neg, pos, neg in descending order -> 0.75."""
    records = [_rec(0.3, 1), _rec(0.1, 0), _rec(0.9, 1), _rec(0.8, 0)]
    assert calculate_auc(records) == pytest.approx(0.75)


def test_auc_ties_follow_input_order():
    """Equal predictions are swept in input order."""
    assert calculate_auc([_rec(0.5, 1), _rec(0.5, 0)]) == 1.0
    assert calculate_auc([_rec(0.5, 0), _rec(0.5, 1)]) == 0.0


def test_auc_single_class_is_zero():
    """ROC is undefined without both classes; reported as 0.0."""
    assert calculate_auc([_rec(0.9, 1), _rec(0.2, 1)]) == 0.0
    assert calculate_auc([]) == 0.0


def test_compute_metrics_balanced():
    """One of each confusion cell -> all rate metrics 0.5."""
    records = [_rec(0.9, 1), _rec(0.8, 0), _rec(0.3, 1), _rec(0.1, 0)]
    m = compute_metrics(records)
    assert (m.tp, m.tn, m.fp, m.fn) == (1, 1, 1, 1)
    assert m.accuracy == pytest.approx(0.5)
    assert m.precision == pytest.approx(0.5)
    assert m.recall == pytest.approx(0.5)
    assert m.f1_score == pytest.approx(0.5)
    assert m.auc == pytest.approx(0.75)


def test_compute_metrics_zero_denominators():
    """Nothing predicted positive: precision, recall and F1 are 0, not NaN."""
    records = [_rec(0.2, 1), _rec(0.1, 0), _rec(0.3, 0)]
    m = compute_metrics(records)
    assert m.tp == 0 and m.fp == 0
    assert m.precision == 0.0
    assert m.recall == 0.0
    assert m.f1_score == 0.0
    assert m.accuracy == pytest.approx(2 / 3)


def test_compute_metrics_perfect():
    """All correct -> 1.0 across the board."""
    m = compute_metrics([_rec(0.9, 1), _rec(0.7, 1), _rec(0.2, 0)])
    assert m.accuracy == m.precision == m.recall == m.f1_score == m.auc == 1.0


@pytest.mark.parametrize(
    "pairs",
    [
        [(0.9, 1)],
        [(0.2, 0), (0.6, 0), (0.4, 1)],
        [(0.51, 1), (0.5, 1), (0.49, 0), (0.99, 0), (0.0, 1)],
    ],
)
def test_confusion_consistency(pairs):
    """tp + tn + fp + fn == n and accuracy == (tp + tn) / n."""
    records = [_rec(p, a) for p, a in pairs]
    m = compute_metrics(records)
    assert m.tp + m.tn + m.fp + m.fn == len(records) == m.total
    assert m.accuracy == pytest.approx((m.tp + m.tn) / len(records))


def test_compute_metrics_empty():
    """No records -> all zeros."""
    m = compute_metrics([])
    assert isinstance(m, ModelMetrics)
    assert m.total == 0
    assert m.to_dict()["accuracy"] == 0.0
