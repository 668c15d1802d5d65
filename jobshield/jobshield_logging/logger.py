"""
Structured logging for the analysis services, the evaluator and the CLIs.

Every record carries event_type, timestamp, level and logger. Service
loggers also carry service (bert / lstm) and, on scoring events, source
(model / fallback) so fallback substitutions can be counted per service.
Score-like floats are rounded before rendering.

Imports nothing from jobshield so every module can log at import time.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# json (default) or console
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

# Keys holding 0-100 scores or 0-1 probabilities
SCORE_KEYS = frozenset({"score", "confidence", "prediction", "raw_score", "loss"})
SCORE_DIGITS = 4


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601, UTC)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog 'event' becomes event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _round_scores(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Round float values under SCORE_KEYS to SCORE_DIGITS places."""
    for key in SCORE_KEYS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, float):
            event_dict[key] = round(value, SCORE_DIGITS)
    return event_dict


def configure_structlog() -> None:
    """Configure structlog once at import. Output goes to stderr; reports own stdout."""
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _round_scores,
        _normalize_event,
    ]
    if LOG_FORMAT == "json":
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )
    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("evaluation_complete", sample_counts={"bert": 13, "lstm": 13})
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_service(service: str) -> structlog.BoundLogger:
    """Logger for one analysis service; service is bound to every record."""
    return get_logger("jobshield.analysis_engine.service").bind(service=service)


def bind_score_source(logger: structlog.BoundLogger, source: Any) -> structlog.BoundLogger:
    """Bind which path produced a score ("model" or "fallback"); accepts the enum or its value."""
    return logger.bind(source=getattr(source, "value", source))
