"""
Structured logging for the Tolgee provider.

Records are rendered by structlog and written as JSON lines to stdout.
Translation text and remote payloads stay out of the logs unless
``LOG_TRANSLATION_CONTENT`` is enabled; credentials are always masked.
"""

import logging
import sys
import time
from typing import Any, Dict, Optional
import structlog
from structlog.stdlib import LoggerFactory
from pythonjsonlogger import jsonlogger
from tolgee_translation.config import settings

# Fields that may carry catalogue text or a remote payload echoing it
CONTENT_FIELDS = frozenset({"text", "messages", "files", "response_body"})

# Substrings marking credential fields
CREDENTIAL_MARKERS = ("api_key", "apikey", "password", "token", "secret")

REDACTED = "[REDACTED]"


def mask_credential(value: str) -> str:
    """Keep only the first and last characters of a credential."""
    if len(value) <= 8:
        return "****"
    return f"{value[:4]}...{value[-4:]}"


def add_environment(logger, method_name, event_dict):
    event_dict.setdefault("environment", settings.environment.value)
    return event_dict


def redact_sensitive_fields(logger, method_name, event_dict):
    """Drop translation content and mask credentials before rendering."""
    for field in list(event_dict):
        value = event_dict[field]
        name = field.lower()

        if name in CONTENT_FIELDS and not settings.log_translation_content:
            event_dict[field] = REDACTED
        elif any(marker in name.replace("-", "_") for marker in CREDENTIAL_MARKERS):
            if isinstance(value, str):
                event_dict[field] = mask_credential(value)

    return event_dict


def setup_logging(level: Optional[str] = None):
    """Route structlog through a JSON stdout handler on the root logger."""
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(
        fmt="%(levelname)s %(name)s %(message)s",
        rename_fields={"levelname": "level", "name": "logger"},
    ))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_environment,
            redact_sensitive_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **context) -> structlog.BoundLogger:
    """Get a structured logger, optionally bound to context fields."""
    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger


class LoggerMixin:
    """Gives a class a logger bound to its ``log_context``."""

    def log_context(self) -> Dict[str, Any]:
        """Fields attached to every record of this instance."""
        return {}

    @property
    def logger(self) -> structlog.BoundLogger:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__, **self.log_context())
        return self._logger

    def log_latency(self, operation: str, start_time: float, **kwargs):
        """Log how long an operation took."""
        self.logger.info(
            f"{operation}_completed",
            latency_ms=round((time.time() - start_time) * 1000, 2),
            **kwargs
        )


setup_logging()
