"""
Plain-text evaluation report and tabular exports.

Every format_* function returns a list of lines; the CLI prints them.
Comparisons are challenger vs baseline (difference = challenger - baseline).
"""

from __future__ import annotations

from typing import Mapping, Sequence

import pandas as pd

from jobshield.evaluation.evaluator import CaseOutcome
from jobshield.evaluation.metrics import METRIC_NAMES, ModelMetrics

RULE_WIDTH = 60
PREVIEW_CHARS = 50
CHECK = "✓"
CROSS = "✗"


def _mark(flag: bool) -> str:
    return CHECK if flag else CROSS


def format_case_lines(
    outcome: CaseOutcome,
    total: int,
    display_names: Mapping[str, str] | None = None,
) -> list[str]:
    """Header, per-model predictions with the true label, then verdict marks."""
    display_names = display_names or {}
    case = outcome.test_case
    preview = case.text[:PREVIEW_CHARS]
    lines = [f'[{outcome.index + 1}/{total}] Testing: {case.category.upper()} - "{preview}..."']

    predictions: list[str] = []
    verdicts: list[str] = []
    correct: list[str] = []
    for name in list(outcome.records) + list(outcome.failures):
        label = display_names.get(name, name.upper())
        if name in outcome.failures:
            predictions.append(f"{label}: error")
            verdicts.append(f"{label}: -")
            correct.append("-")
            continue
        record = outcome.records[name]
        result = outcome.results[name]
        predictions.append(f"{label}: {record.prediction:.3f} ({record.binary_prediction})")
        verdicts.append(f"{label}: {_mark(result.is_legitimate)}")
        correct.append(_mark(record.correct))

    lines.append("  " + " | ".join(predictions + [f"Actual: {case.label}"]))
    lines.append("  " + " | ".join(verdicts + [f"Correct: {'/'.join(correct)}"]))
    lines.append("")
    return lines


def _signed(value: float) -> str:
    text = f"{value:.3f}"
    return f"+{text}" if float(text) > 0 else text


def format_comparison_table(
    metrics: Mapping[str, ModelMetrics],
    baseline: str,
    challenger: str,
    display_names: Mapping[str, str] | None = None,
) -> list[str]:
    """Metric | baseline | challenger | Difference (challenger - baseline), 3 decimals."""
    display_names = display_names or {}
    base_label = display_names.get(baseline, baseline.upper())
    chall_label = display_names.get(challenger, challenger.upper())
    base, chall = metrics[baseline], metrics[challenger]

    lines = [
        "SIDE-BY-SIDE COMPARISON:",
        "-" * RULE_WIDTH,
        f"{'Metric':<15} {base_label:<12} {chall_label:<12} {'Difference':<12}".rstrip(),
        "-" * RULE_WIDTH,
    ]
    for metric in METRIC_NAMES:
        b = getattr(base, metric)
        c = getattr(chall, metric)
        lines.append(f"{metric:<15} {b:<12.3f} {c:<12.3f} {_signed(c - b):<12}".rstrip())
    lines.append("-" * RULE_WIDTH)
    return lines


def count_metrics_won(challenger: ModelMetrics, baseline: ModelMetrics) -> int:
    """Number of METRIC_NAMES where challenger is strictly higher."""
    return sum(1 for m in METRIC_NAMES if getattr(challenger, m) > getattr(baseline, m))


def format_winner_analysis(
    metrics: Mapping[str, ModelMetrics],
    baseline: str,
    challenger: str,
    display_names: Mapping[str, str] | None = None,
) -> list[str]:
    display_names = display_names or {}
    base_label = display_names.get(baseline, baseline.upper())
    chall_label = display_names.get(challenger, challenger.upper())
    base, chall = metrics[baseline], metrics[challenger]
    won = count_metrics_won(chall, base)

    lines = [
        "WINNER ANALYSIS:",
        f"{chall_label} outperforms {base_label} in {won}/{len(METRIC_NAMES)} metrics",
    ]
    winner = chall_label if chall.auc > base.auc else base_label
    lines.append(f"{winner} WINS: Higher AUC indicates better overall performance")
    return lines


def format_confusion_breakdown(
    metrics: Mapping[str, ModelMetrics],
    order: Sequence[str],
    display_names: Mapping[str, str] | None = None,
) -> list[str]:
    """TP / TN / FP / FN per model, in the given order."""
    display_names = display_names or {}
    lines = ["DETAILED BREAKDOWN:", "-" * 40]
    for i, name in enumerate(order):
        m = metrics[name]
        if i:
            lines.append("")
        lines.append(f"{display_names.get(name, name.upper())} Confusion Matrix (n={m.total}):")
        lines.append(f"  True Positives:  {m.tp}")
        lines.append(f"  True Negatives:  {m.tn}")
        lines.append(f"  False Positives: {m.fp}")
        lines.append(f"  False Negatives: {m.fn}")
    return lines


def format_key_insights(
    metrics: Mapping[str, ModelMetrics],
    baseline: str,
    challenger: str,
    display_names: Mapping[str, str] | None = None,
) -> list[str]:
    """Lines for each dimension where the challenger beats the baseline; empty section otherwise."""
    display_names = display_names or {}
    label = display_names.get(challenger, challenger.upper())
    base, chall = metrics[baseline], metrics[challenger]
    lines = ["KEY INSIGHTS:"]
    if chall.fp < base.fp:
        lines.append(f"{label} has fewer false positives (better at avoiding false alarms)")
    if chall.fn < base.fn:
        lines.append(f"{label} has fewer false negatives (better at catching fraud)")
    if chall.auc > base.auc:
        lines.append(f"{label} has higher AUC (better overall discrimination ability)")
    if len(lines) == 1:
        lines.append(f"{label} does not improve on false positives, false negatives or AUC")
    return lines


def metrics_frame(metrics: Mapping[str, ModelMetrics]) -> pd.DataFrame:
    """DataFrame indexed by metric name (METRIC_NAMES + confusion counts), one column per model."""
    rows = list(METRIC_NAMES) + ["tp", "tn", "fp", "fn"]
    data = {name: [getattr(m, row) for row in rows] for name, m in metrics.items()}
    return pd.DataFrame(data, index=rows)


def predictions_frame(outcomes: Sequence[CaseOutcome], models: Sequence[str]) -> pd.DataFrame:
    """One row per case: index, category, label, then <model>_prediction / <model>_binary (NaN on failure)."""
    rows = []
    for outcome in outcomes:
        row: dict[str, object] = {
            "case": outcome.index + 1,
            "category": outcome.test_case.category,
            "label": outcome.test_case.label,
        }
        for name in models:
            record = outcome.records.get(name)
            row[f"{name}_prediction"] = record.prediction if record else float("nan")
            row[f"{name}_binary"] = record.binary_prediction if record else pd.NA
        rows.append(row)
    return pd.DataFrame(rows)


def format_report(
    metrics: Mapping[str, ModelMetrics],
    baseline: str,
    challenger: str,
    display_names: Mapping[str, str] | None = None,
) -> list[str]:
    """Metrics table, winner analysis, confusion breakdown and insights."""
    lines = ["PERFORMANCE METRICS", "=" * RULE_WIDTH]
    lines += format_comparison_table(metrics, baseline, challenger, display_names)
    lines.append("")
    lines += format_winner_analysis(metrics, baseline, challenger, display_names)
    lines.append("")
    lines += format_confusion_breakdown(metrics, [baseline, challenger], display_names)
    lines.append("")
    lines += format_key_insights(metrics, baseline, challenger, display_names)
    return lines
