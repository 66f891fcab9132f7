"""Centralized logging configuration for the Gmail client entry points."""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Iterable

REDACTED = "[REDACTED]"

NOISY_LOGGERS = ("urllib3", "requests", "google.auth", "google_auth_oauthlib")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for log aggregator compatibility.

    Produces one JSON object per line (NDJSON) with fields:
    timestamp, level, logger, message, and optionally exception.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # exc_text may already hold a redacted rendering
        if record.exc_text:
            log_entry["exception"] = record.exc_text
        elif record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


class SecretRedactingFilter(logging.Filter):
    """Replaces known secret values in log records with a placeholder.

    The message is rendered once with its args and the secrets are
    scrubbed from the result. Exception text is rendered and scrubbed
    the same way.
    """

    def __init__(self, secrets: Iterable[str] = ()):
        super().__init__()
        self._secrets: set[str] = set()
        self.add_secrets(secrets)

    def add_secrets(self, secrets: Iterable[str]) -> None:
        self._secrets.update(s for s in secrets if s)

    def redact(self, text: str) -> str:
        # Longest first so a secret containing another is fully replaced
        for secret in sorted(self._secrets, key=len, reverse=True):
            text = text.replace(secret, REDACTED)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True
        record.msg = self.redact(record.getMessage())
        record.args = None
        if record.exc_info and record.exc_info[0] is not None:
            # Formatters reuse a cached exc_text instead of re-rendering exc_info
            record.exc_text = self.redact(
                logging.Formatter().formatException(record.exc_info)
            )
        return True

    def clear(self) -> None:
        self._secrets.clear()


_redactor = SecretRedactingFilter()


def register_secrets(*secrets: str) -> None:
    """Add values that must never appear in log output."""
    _redactor.add_secrets(secrets)


def clear_secrets() -> None:
    """Forget every registered secret."""
    _redactor.clear()


def configure_logging(
    level_override: str | None = None, secrets: Iterable[str] = ()
) -> None:
    """Configure logging based on environment variables.

    Args:
        level_override: If set, takes precedence over LOG_LEVEL env var.
        secrets: Values to redact from every log line.

    Environment variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR).
            Defaults to INFO.
        LOG_FORMAT: Output format. "json" for JSON lines,
            anything else for human-readable. Defaults to "text".
    """
    level_name = (level_override or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    log_format = os.getenv("LOG_FORMAT", "text").lower()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.addFilter(_redactor)
    register_secrets(*secrets)

    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
