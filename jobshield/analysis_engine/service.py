"""
Analysis services: the never-failing analyze(text) entry point.

Each service wraps one scorer variant. Initialization (classifier load or
model fit) runs once per instance as a single asyncio task that concurrent
callers share; a failed initialization pins the instance to its fallback
heuristic for its lifetime. Scoring errors are turned into an explicit
ScoringFailure and replaced by the fallback result at the boundary, so
analyze() always returns a ScoreResult.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable

from sklearn.neural_network import MLPClassifier

from jobshield.analysis_engine.fallback import enhanced_fallback, simple_fallback
from jobshield.analysis_engine.models import ScoreResult, ScoringFailure, ScoringOutcome
from jobshield.analysis_engine.sentiment_scorer import (
    SentimentClassifier,
    SentimentScorer,
    lexicon_sentiment,
)
from jobshield.analysis_engine.sequence_scorer import SequenceScorer
from jobshield.config.settings import Settings
from jobshield.core.exceptions import InferenceFailure, InitializationFailure
from jobshield.jobshield_logging.logger import bind_score_source, bind_service
from jobshield.ml.train_model import train_sequence_model

SequenceTrainer = Callable[[Settings], MLPClassifier]


class AnalysisService(ABC):
    """
    Base service. Subclasses set name / display_name and implement
    _build_scorer() (blocking; run in a worker thread) and fallback().
    """

    name = "base"
    display_name = "BASE"

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._scorer: Any = None
        self._init_error: InitializationFailure | None = None
        self._init_task: asyncio.Task | None = None
        self._log = bind_service(self.name)

    @property
    def is_ready(self) -> bool:
        """True once the scorer is built."""
        return self._scorer is not None

    @property
    def is_degraded(self) -> bool:
        """True when initialization failed and every call uses the fallback."""
        return self._init_error is not None

    @abstractmethod
    def _build_scorer(self) -> Any:
        """Build the scorer (blocking). Raise InitializationFailure if unavailable."""
        ...

    @abstractmethod
    def fallback(self, text: str) -> ScoreResult:
        """Heuristic result used whenever the scorer cannot answer."""
        ...

    async def ensure_ready(self) -> bool:
        """
        Initialize once; return True if the scorer is available.

        The first caller starts the initialization task; concurrent callers
        await that same task through a shield, so cancelling one caller
        leaves the others (and the task) running. No-op after success or
        after failure. A cancelled initialization counts as a failure.
        """
        if self._scorer is not None:
            return True
        if self._init_error is not None:
            return False
        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self._initialize_once())
        try:
            await asyncio.shield(self._init_task)
        except asyncio.CancelledError:
            # Only the caller was cancelled; the task keeps running
            if not self._init_task.cancelled():
                raise
        return self._scorer is not None

    initialize = ensure_ready

    def _pin_to_fallback(self, error: InitializationFailure) -> None:
        self._init_error = error
        self._log.warning(
            "analysis_init_failed",
            error=str(error),
            fallback="enabled",
        )

    async def _initialize_once(self) -> None:
        self._log.info("analysis_init_started")
        try:
            scorer = await asyncio.to_thread(self._build_scorer)
        except asyncio.CancelledError:
            self._pin_to_fallback(InitializationFailure("initialization cancelled"))
            raise
        except Exception as e:
            if isinstance(e, InitializationFailure):
                self._pin_to_fallback(e)
            else:
                self._pin_to_fallback(InitializationFailure(f"{type(e).__name__}: {e}"))
            return
        self._scorer = scorer
        self._log.info("analysis_init_complete")

    async def _try_analyze(self, text: str) -> ScoringOutcome:
        if not await self.ensure_ready():
            return ScoringFailure(self._init_error or InitializationFailure("scorer unavailable"))
        try:
            return self._scorer.score(text)
        except Exception as e:
            return ScoringFailure(InferenceFailure(f"{type(e).__name__}: {e}"))

    async def analyze(self, text: str) -> ScoreResult:
        """
        Score one posting. Never raises on scoring or initialization
        failure; those yield the fallback result. Cancellation of the
        calling task still propagates.
        """
        text = "" if text is None else str(text)
        try:
            outcome = await self._try_analyze(text)
        except Exception as e:
            outcome = ScoringFailure(InferenceFailure(f"{type(e).__name__}: {e}"))

        if isinstance(outcome, ScoringFailure):
            result = self.fallback(text)
            log = bind_score_source(self._log, result.source)
            if isinstance(outcome.error, InitializationFailure):
                log.debug("analysis_fallback_pinned", reason=outcome.reason, score=result.overall_score)
            else:
                log.warning("analysis_fallback", reason=outcome.reason, score=result.overall_score)
            return result

        bind_score_source(self._log, outcome.source).debug(
            "analysis_complete",
            score=outcome.overall_score,
            is_legitimate=outcome.is_legitimate,
        )
        return outcome


class SentimentAnalysisService(AnalysisService):
    """Sentiment-flavored ("BERT") service; simple fallback."""

    name = "bert"
    display_name = "BERT"

    def __init__(
        self,
        settings: Settings | None = None,
        classifier: SentimentClassifier | None = lexicon_sentiment,
    ) -> None:
        super().__init__(settings)
        self._classifier = classifier

    def _build_scorer(self) -> SentimentScorer:
        if not self.settings.sentiment_enabled:
            raise InitializationFailure("sentiment classifier disabled by configuration")
        if self._classifier is None:
            raise InitializationFailure("no sentiment classifier configured")
        return SentimentScorer(self._classifier)

    def fallback(self, text: str) -> ScoreResult:
        return simple_fallback(text)


class SequenceAnalysisService(AnalysisService):
    """Sequence-flavored ("LSTM") service; trains once, enhanced fallback."""

    name = "lstm"
    display_name = "LSTM"

    def __init__(
        self,
        settings: Settings | None = None,
        trainer: SequenceTrainer = train_sequence_model,
    ) -> None:
        super().__init__(settings)
        self._trainer = trainer

    def _build_scorer(self) -> SequenceScorer:
        if not self.settings.sequence_enabled:
            raise InitializationFailure("sequence model disabled by configuration")
        return SequenceScorer(self._trainer(self.settings))

    def fallback(self, text: str) -> ScoreResult:
        return enhanced_fallback(text)


def build_default_services(settings: Settings | None = None) -> dict[str, AnalysisService]:
    """Return {"bert": SentimentAnalysisService, "lstm": SequenceAnalysisService} sharing settings."""
    settings = settings or Settings()
    return {
        SentimentAnalysisService.name: SentimentAnalysisService(settings),
        SequenceAnalysisService.name: SequenceAnalysisService(settings),
    }
