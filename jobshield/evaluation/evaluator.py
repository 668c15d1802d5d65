"""
Offline evaluator: runs a labeled corpus through analysis services.

Cases are processed sequentially in corpus order; for each case every
model is awaited in mapping order. A failure of one model on one case is
logged and that case is left out of that model's records only, so models
can end up with different sample counts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from jobshield.analysis_engine.models import ScoreResult
from jobshield.analysis_engine.service import AnalysisService
from jobshield.core.exceptions import EvaluationCaseFailure
from jobshield.evaluation.dataset import DEFAULT_TEST_CASES, TestCase
from jobshield.evaluation.metrics import EvaluationRecord, ModelMetrics, compute_metrics
from jobshield.jobshield_logging import get_logger

logger = get_logger(__name__)


@dataclass
class CaseOutcome:
    """Per-case predictions for the models that answered."""

    index: int
    test_case: TestCase
    records: dict[str, EvaluationRecord] = field(default_factory=dict)
    results: dict[str, ScoreResult] = field(default_factory=dict)
    failures: dict[str, EvaluationCaseFailure] = field(default_factory=dict)


class Evaluator:
    """
    Compare analysis services on a labeled corpus.

    After evaluate(), records holds each model's EvaluationRecord sequence
    in corpus order and case_outcomes holds the per-case view.
    """

    def __init__(self) -> None:
        self.records: dict[str, list[EvaluationRecord]] = {}
        self.case_outcomes: list[CaseOutcome] = []

    async def _evaluate_case(
        self,
        index: int,
        test_case: TestCase,
        models: Mapping[str, AnalysisService],
    ) -> CaseOutcome:
        outcome = CaseOutcome(index=index, test_case=test_case)
        for name, service in models.items():
            try:
                result = await service.analyze(test_case.text)
                record = EvaluationRecord.from_score(result.overall_score, test_case.label)
            except Exception as e:
                failure = EvaluationCaseFailure(name, index, e)
                outcome.failures[name] = failure
                logger.warning(
                    "evaluation_case_failed",
                    model=name,
                    case_index=index,
                    category=test_case.category,
                    error=str(e),
                    exc_info=True,
                )
                continue
            outcome.results[name] = result
            outcome.records[name] = record
            self.records[name].append(record)
        return outcome

    async def evaluate(
        self,
        models: Mapping[str, AnalysisService],
        test_cases: Sequence[TestCase] = DEFAULT_TEST_CASES,
    ) -> dict[str, ModelMetrics]:
        """
        Run every case through every model and return metrics per model name.

        Resets records and case_outcomes from any previous run.
        """
        self.records = {name: [] for name in models}
        self.case_outcomes = []
        logger.info("evaluation_started", models=list(models), n_cases=len(test_cases))

        for index, test_case in enumerate(test_cases):
            outcome = await self._evaluate_case(index, test_case, models)
            self.case_outcomes.append(outcome)

        metrics = {name: compute_metrics(records) for name, records in self.records.items()}
        sample_counts = {name: len(records) for name, records in self.records.items()}
        if len(set(sample_counts.values())) > 1:
            logger.warning("evaluation_sample_counts_diverge", sample_counts=sample_counts)
        logger.info(
            "evaluation_complete",
            sample_counts=sample_counts,
            auc={name: round(m.auc, 4) for name, m in metrics.items()},
        )
        return metrics
