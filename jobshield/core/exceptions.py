"""
Application-level exceptions.

None of these escape AnalysisService.analyze or Evaluator.evaluate; they
name the failure in logs and in the explicit ScoringFailure result.
"""

from __future__ import annotations


class JobShieldError(Exception):
    """Base class for JobShield errors."""


class InitializationFailure(JobShieldError):
    """Classifier or model failed to construct or train. The service stays on its fallback."""


class InferenceFailure(JobShieldError):
    """A single analyze call failed mid-computation. Recovered per call via the fallback."""


class EvaluationCaseFailure(JobShieldError):
    """One model failed one test case during evaluation. The case is omitted for that model."""

    def __init__(self, model: str, case_index: int, cause: BaseException) -> None:
        super().__init__(f"model {model!r} failed on case {case_index}: {cause}")
        self.model = model
        self.case_index = case_index
        self.cause = cause
