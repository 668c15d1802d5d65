"""
Evaluate the sentiment (BERT-flavored) and sequence (LSTM-flavored)
services on the labeled corpus and print a comparison report.

Prints per-case predictions, a metrics table (accuracy, precision,
recall, F1, AUC with signed differences), a winner analysis and the
confusion matrices. Optionally writes per-case predictions and the
metrics table to CSV.

Usage:
  python -m jobshield.tools.evaluate_models
  python -m jobshield.tools.evaluate_models --seed 7 --csv predictions.csv
  python -m jobshield.tools.evaluate_models --metrics-csv metrics.csv
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import sys
from pathlib import Path
from typing import Sequence

from jobshield.analysis_engine.service import AnalysisService, build_default_services
from jobshield.config.settings import get_settings
from jobshield.evaluation.dataset import DEFAULT_TEST_CASES
from jobshield.evaluation.evaluator import Evaluator
from jobshield.evaluation.report import format_case_lines, format_report, metrics_frame, predictions_frame
from jobshield.jobshield_logging import get_logger

logger = get_logger(__name__)

RULE_WIDTH = 60


async def run_evaluation(
    services: dict[str, AnalysisService],
    baseline: str,
    challenger: str,
    csv_path: Path | None = None,
    metrics_csv_path: Path | None = None,
) -> None:
    """
    Evaluate services on the default corpus and print the full report to stdout.

    csv_path gets one row per case; metrics_csv_path gets the metric x model table.
    """
    test_cases = DEFAULT_TEST_CASES
    display_names = {name: s.display_name for name, s in services.items()}
    # Challenger first, as in the per-case lines of the report
    ordered = {challenger: services[challenger], baseline: services[baseline]}

    print(f"COMPREHENSIVE MODEL EVALUATION: {display_names[challenger]} vs {display_names[baseline]}")
    print("=" * RULE_WIDTH)
    print(f"Testing on {len(test_cases)} job postings...\n")

    evaluator = Evaluator()
    metrics = await evaluator.evaluate(ordered, test_cases)

    for outcome in evaluator.case_outcomes:
        for line in format_case_lines(outcome, len(test_cases), display_names):
            print(line)

    print()
    for line in format_report(metrics, baseline, challenger, display_names):
        print(line)

    if csv_path is not None:
        frame = predictions_frame(evaluator.case_outcomes, list(ordered))
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(csv_path, index=False)
        logger.info("evaluation_predictions_saved", path=str(csv_path), rows=len(frame))

    if metrics_csv_path is not None:
        frame = metrics_frame({name: metrics[name] for name in (baseline, challenger)})
        metrics_csv_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(metrics_csv_path, index_label="metric")
        logger.info("evaluation_metrics_saved", path=str(metrics_csv_path), models=list(frame.columns))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare the BERT-flavored and LSTM-flavored legitimacy scorers on the labeled corpus.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the sequence model fit (default: JOBSHIELD_SEED or 42)",
    )
    parser.add_argument(
        "--baseline",
        default="lstm",
        choices=["bert", "lstm"],
        help="Model the differences are measured against (default: lstm)",
    )
    parser.add_argument(
        "--challenger",
        default="bert",
        choices=["bert", "lstm"],
        help="Model compared to the baseline (default: bert)",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Optional path for a per-case predictions CSV",
    )
    parser.add_argument(
        "--metrics-csv",
        type=Path,
        default=None,
        help="Optional path for a metrics CSV (metric rows, one column per model)",
    )
    args = parser.parse_args(argv)
    if args.baseline == args.challenger:
        parser.error("--baseline and --challenger must differ")

    try:
        settings = get_settings()
        if args.seed is not None:
            settings = dataclasses.replace(settings, seed=args.seed)
        services = build_default_services(settings)
        asyncio.run(
            run_evaluation(services, args.baseline, args.challenger, args.csv, args.metrics_csv)
        )
    except Exception as e:
        logger.error("evaluation_aborted", error=str(e), exc_info=True)
        print("ERROR:", e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
