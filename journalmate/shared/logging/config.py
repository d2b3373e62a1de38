"""
Logging configuration for the planning service.

Two output styles share one entry point: a human-readable line format for
local runs and JSON lines for log shippers. Session state transitions are
logged as structured events either way.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

if TYPE_CHECKING:
    from journalmate.slot_filling.schemas import PlanningSession


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("httpcore", "httpx", "openai")


class StructuredFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Keys: ``timestamp`` (record creation time, UTC), ``level``, ``logger``,
    ``message``, plus ``extra`` when the record carries structured data and
    ``exception`` when it carries exc_info.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        structured = getattr(record, "extra", None)
        if structured:
            entry["extra"] = structured

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: str = "journalmate",
    json_lines: bool = True,
) -> logging.Logger:
    """
    Attach handlers to the named logger, replacing any it already has.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to also write logs to
        logger_name: Logger to configure
        json_lines: JSON output if True, the line format otherwise

    Returns:
        The configured logger. It no longer propagates to the root logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers = []
    logger.propagate = False

    if json_lines:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def configure_service_logging(
    json_lines: bool = False,
    level: int = logging.INFO,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Process-wide logging for the API server.

    The root logger always gets the line format so third-party output stays
    readable; with ``json_lines`` the ``journalmate`` logger switches to
    JSON.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # Override any prior basicConfig calls
    )

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    if json_lines:
        setup_logging(level=level, logger_name="journalmate")


def summarize_session(session: "PlanningSession") -> Dict[str, Any]:
    """Key session fields for log events; never includes answer values."""
    return {
        "session_id": session.session_id,
        "domain": session.domain.value,
        "mode": session.mode.value,
        "status": session.status.value,
        "fields_collected": len(session.collected_fields),
        "pending_question_index": session.pending_question_index,
    }


def log_state_transition(
    event: str,
    session: "PlanningSession",
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO,
) -> None:
    """
    Log a planning session state transition event.

    Args:
        event: Name of the event (e.g., "session_started", "session_ready")
        session: Session whose key fields are summarised
        extra: Additional context to include in the log
        logger: Logger instance to use. If not provided, uses "journalmate".
        level: Log level for the event
    """
    if logger is None:
        logger = logging.getLogger("journalmate")

    payload: Dict[str, Any] = {
        "event": event,
        "state_summary": summarize_session(session),
    }
    if extra:
        payload["extra"] = extra

    logger.log(
        level,
        f"[session={session.session_id}] State transition: {event} "
        f"(status={session.status.value})",
        extra={"extra": payload},
    )
