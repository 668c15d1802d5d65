"""
Analysis engine: legitimacy scorers, fallbacks, and the service façade.

Entry point for consumers is AnalysisService.analyze(text) -> ScoreResult.
"""

from jobshield.analysis_engine.models import ScoreResult, ScoreSource, SentimentPrediction
from jobshield.analysis_engine.service import (
    AnalysisService,
    SentimentAnalysisService,
    SequenceAnalysisService,
    build_default_services,
)

__all__ = [
    "AnalysisService",
    "ScoreResult",
    "ScoreSource",
    "SentimentAnalysisService",
    "SentimentPrediction",
    "SequenceAnalysisService",
    "build_default_services",
]
