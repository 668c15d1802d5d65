"""
Structured logging for JobShield.

Use get_logger() in all modules; services use bind_service().
"""

from jobshield.jobshield_logging.logger import bind_score_source, bind_service, get_logger

__all__ = ["bind_score_source", "bind_service", "get_logger"]
