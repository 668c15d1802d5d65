"""
Tests for the analysis services: never-failing analyze(), single-flight
initialization, fallback pinning after failed init, and per-call recovery.
"""

from __future__ import annotations

import asyncio
import threading
import time
from unittest.mock import patch

import pytest

from jobshield.analysis_engine.fallback import enhanced_fallback, simple_fallback
from jobshield.analysis_engine.models import ScoreSource, SentimentPrediction
from jobshield.analysis_engine.sentiment_scorer import SentimentScorer
from jobshield.analysis_engine.service import (
    AnalysisService,
    SentimentAnalysisService,
    SequenceAnalysisService,
    build_default_services,
)
from jobshield.config.settings import Settings

TEXT = "Great company with excellent benefits and a competitive salary."


def test_sentiment_service_matches_scorer():
    """Healthy service returns the scorer's result."""
    service = SentimentAnalysisService(Settings())
    result = asyncio.run(service.analyze(TEXT))
    assert result == SentimentScorer().score(TEXT)
    assert result.source is ScoreSource.MODEL
    assert service.is_ready and not service.is_degraded


def test_sentiment_classifier_error_falls_back_per_call():
    """Classifier raising mid-call yields the simple fallback; service stays ready."""

    def broken(text):
        raise RuntimeError("tokenizer crashed")

    service = SentimentAnalysisService(Settings(), classifier=broken)
    result = asyncio.run(service.analyze(TEXT))
    assert result == simple_fallback(TEXT)
    assert result.source is ScoreSource.FALLBACK
    assert service.is_ready and not service.is_degraded


def test_sentiment_missing_classifier_pins_fallback():
    """No classifier: initialization fails once and every call uses the fallback."""
    service = SentimentAnalysisService(Settings(), classifier=None)
    first = asyncio.run(service.analyze("urgent immediate guaranteed"))
    assert first.overall_score == 25
    assert service.is_degraded
    assert asyncio.run(service.ensure_ready()) is False


def test_sentiment_disabled_by_settings():
    """sentiment_enabled=False behaves like an unavailable classifier."""
    service = SentimentAnalysisService(Settings(sentiment_enabled=False))
    result = asyncio.run(service.analyze(TEXT))
    assert result == simple_fallback(TEXT)
    assert service.is_degraded


def test_sequence_init_failure_uses_enhanced_fallback_and_trains_once():
    """Trainer failure is attempted once; later calls go straight to the fallback."""
    calls = []

    def failing_trainer(settings):
        calls.append(settings)
        raise ValueError("fit diverged")

    service = SequenceAnalysisService(Settings(), trainer=failing_trainer)

    async def run():
        a = await service.analyze("URGENT no interview")
        b = await service.analyze("URGENT no interview")
        return a, b

    a, b = asyncio.run(run())
    assert a == enhanced_fallback("URGENT no interview")
    assert a == b
    assert len(calls) == 1
    assert service.is_degraded and not service.is_ready


def test_single_flight_initialization(fixed_proba_model):
    """Concurrent ensure_ready callers share one initialization."""
    calls = []
    lock = threading.Lock()

    def trainer(settings):
        with lock:
            calls.append(1)
        return fixed_proba_model(0.9)

    service = SequenceAnalysisService(Settings(), trainer=trainer)

    async def run():
        return await asyncio.gather(*[service.ensure_ready() for _ in range(8)])

    results = asyncio.run(run())
    assert results == [True] * 8
    assert len(calls) == 1
    # Idempotent after success
    assert asyncio.run(service.initialize()) is True
    assert len(calls) == 1


def test_sequence_inference_failure_recovers_per_call(fixed_proba_model):
    """A failing prediction falls back for that call only."""
    model = fixed_proba_model(0.9)
    service = SequenceAnalysisService(Settings(), trainer=lambda settings: model)

    healthy = asyncio.run(service.analyze("z" * 150))
    assert healthy.overall_score == pytest.approx(90)

    model.fail = True
    degraded = asyncio.run(service.analyze("z" * 150))
    assert degraded == enhanced_fallback("z" * 150)
    assert not service.is_degraded

    model.fail = False
    assert asyncio.run(service.analyze("z" * 150)) == healthy


def test_sequence_service_with_real_model_is_idempotent(settings):
    """Same text twice with a trained model gives the same result."""
    service = SequenceAnalysisService(settings)

    async def run():
        return await service.analyze(TEXT), await service.analyze(TEXT)

    first, second = asyncio.run(run())
    assert first == second
    assert first.source is ScoreSource.MODEL


@pytest.mark.parametrize("text", [None, "", 12345])
def test_analyze_never_raises_on_odd_input(text):
    """Non-string input is coerced; a ScoreResult is always returned."""
    for service in build_default_services(Settings(train_max_iter=50)).values():
        result = asyncio.run(service.analyze(text))
        assert 0 <= result.overall_score <= 100
        assert result.is_legitimate == (result.overall_score > 50)


def test_analyze_survives_unexpected_internal_error():
    """Errors outside the scorer (e.g. in ensure_ready) still yield the fallback."""
    service = SentimentAnalysisService(Settings())
    with patch.object(SentimentAnalysisService, "ensure_ready", side_effect=RuntimeError("boom")):
        result = asyncio.run(service.analyze(TEXT))
    assert result == simple_fallback(TEXT)


def test_build_default_services_names():
    """Default services are keyed bert and lstm and share settings."""
    settings = Settings(seed=3)
    services = build_default_services(settings)
    assert list(services) == ["bert", "lstm"]
    assert services["bert"].settings is settings
    assert services["lstm"].display_name == "LSTM"


def test_custom_classifier_is_used():
    """Injected classifier drives the base score."""
    service = SentimentAnalysisService(
        Settings(), classifier=lambda text: SentimentPrediction("negative", 1.0)
    )
    result = asyncio.run(service.analyze("z" * 300))
    assert result.overall_score == pytest.approx(10)
    assert result.risk_factors[0] == "Negative tone detected in job posting"


def _slow_trainer(model, delay=0.3):
    def trainer(settings):
        time.sleep(delay)
        return model

    return trainer


def test_cancelled_caller_does_not_break_shared_initialization(fixed_proba_model):
    """Cancelling one waiting analyze() leaves the other waiter and later calls on the model."""
    service = SequenceAnalysisService(Settings(), trainer=_slow_trainer(fixed_proba_model(0.9)))

    async def run():
        impatient = asyncio.create_task(service.analyze(TEXT))
        patient = asyncio.create_task(service.analyze(TEXT))
        await asyncio.sleep(0.05)
        impatient.cancel()
        with pytest.raises(asyncio.CancelledError):
            await impatient
        return await patient, await service.analyze(TEXT)

    patient, later = asyncio.run(run())
    assert patient.source is ScoreSource.MODEL
    assert patient.overall_score == pytest.approx(90)
    assert later == patient
    assert service.is_ready and not service.is_degraded


def test_wait_for_timeout_on_analyze_does_not_poison_service(fixed_proba_model):
    """A caller timing out during initialization does not affect the next call."""
    service = SequenceAnalysisService(Settings(), trainer=_slow_trainer(fixed_proba_model(0.9)))

    async def run():
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(service.analyze(TEXT), timeout=0.05)
        return await service.analyze(TEXT)

    result = asyncio.run(run())
    assert result.source is ScoreSource.MODEL


def test_cancelled_initialization_pins_fallback(fixed_proba_model):
    """If the initialization task itself is cancelled, waiters and later calls get the fallback."""
    service = SequenceAnalysisService(Settings(), trainer=_slow_trainer(fixed_proba_model(0.9)))

    async def run():
        waiter = asyncio.create_task(service.analyze(TEXT))
        await asyncio.sleep(0.05)
        service._init_task.cancel()
        return await waiter, await service.analyze(TEXT)

    during, after = asyncio.run(run())
    assert during == enhanced_fallback(TEXT)
    assert after == enhanced_fallback(TEXT)
    assert service.is_degraded and not service.is_ready


def test_analysis_service_is_abstract():
    """The base service cannot be instantiated without a scorer and fallback."""
    with pytest.raises(TypeError):
        AnalysisService(Settings())
