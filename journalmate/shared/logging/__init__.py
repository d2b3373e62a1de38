"""Logging configuration and utilities."""

from journalmate.shared.logging.config import (
    StructuredFormatter,
    configure_service_logging,
    log_state_transition,
    setup_logging,
    summarize_session,
)

__all__ = [
    "StructuredFormatter",
    "configure_service_logging",
    "log_state_transition",
    "setup_logging",
    "summarize_session",
]
