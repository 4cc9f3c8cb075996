"""Structured logging configuration using structlog.

Provides JSON output for production (parseable by log aggregators) and
pretty console output for development. Logs go to stderr by default:
stdout usually belongs to the host process's tool protocol.
"""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog
from structlog.types import EventDict, WrappedLogger

if TYPE_CHECKING:
    from ollama_tools.config import Settings

_REDACTED = "***"
_SECRET_KEYS = frozenset({"api_key", "authorization", "ollama_api_key"})


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add application context to all log events."""
    event_dict["app"] = "ollama-tools"
    return event_dict


def redact_secrets(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask credential-bearing fields such as the Ollama Cloud API key."""
    for key in event_dict:
        if key.lower() in _SECRET_KEYS and event_dict[key]:
            event_dict[key] = _REDACTED
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Environment name (development, production)
        stream: Output stream (defaults to sys.stderr)

    In production mode:
        - JSON output for machine parsing
        - ISO timestamps
        - Exception info included

    In development mode:
        - Pretty colored console output
        - Human-readable formatting
    """
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        redact_secrets,
    ]

    is_production = environment.lower() == "production"

    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        shared_processors.append(structlog.processors.ExceptionPrettyPrinter())
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(log_level_int)

    root_logger = logging.getLogger()
    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level_int)

    # Per-request noise from the HTTP stack
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if is_production else "console",
    )


def configure_logging_from_settings(settings: "Settings") -> None:
    """Configure logging from application settings."""
    configure_logging(log_level=settings.LOG_LEVEL, environment=settings.ENVIRONMENT)
