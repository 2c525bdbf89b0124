"""
structlog setup for the API.

``setup_logging()`` runs once in create_app(); modules then call
``get_logger(__name__)`` and log snake_case events with keyword context:

    log.info("booking_created", booking_id=str(booking.id), plan_id=plan)

``log_format="json"`` renders one JSON object per line for production;
anything else uses the coloured dev console. Keys that look like credentials
or sign-in codes are masked before rendering.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import EventDict, Processor

from config import LoggingSettings

REDACTED = "***REDACTED***"

# exact key matches
REDACTED_FIELDS = frozenset(
    {"password", "authorization", "cookie", "code", "code_hash", "access_token"}
)
# substring matches
_SENSITIVE_FRAGMENTS = ("password", "token", "key", "secret")
_STRUCTURAL_KEYS = frozenset({"event", "level", "logger", "timestamp"})

_QUIET_LOGGERS = ("httpx", "httpcore", "pymongo")


def get_logger(name: str) -> BoundLogger:
    return structlog.get_logger(name)


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return lowered in REDACTED_FIELDS or any(frag in lowered for frag in _SENSITIVE_FRAGMENTS)


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """structlog processor masking the values of sensitive-looking keys."""
    for key in event_dict:
        if key not in _STRUCTURAL_KEYS and _is_sensitive(key):
            event_dict[key] = REDACTED
    return event_dict


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True, pad_event=15, sort_keys=False)


def _processors(log_format: str) -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
        _renderer(log_format),
    ]


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    settings = settings or LoggingSettings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=_processors(settings.log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    get_logger(__name__).info(
        "logging_initialized", log_level=settings.log_level, log_format=settings.log_format
    )
