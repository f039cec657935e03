"""Logging capability, sanitization, and secure logging setup.

The request pipeline only needs a logger with ``info`` and ``error``; any
object providing both can be injected into :class:`~blnk_client.BlnkClient`.
By default the stdlib ``blnk_client`` logger is used.
"""

import copy
import logging
import re
import sys
from typing import Any, Dict, Protocol, runtime_checkable

LOGGER_NAME = "blnk_client"

# Patterns for sensitive data detection
SENSITIVE_PATTERNS = {
    "bearer_token": re.compile(r"Bearer\s+[A-Za-z0-9_-]+", re.IGNORECASE),
    "blnk_key": re.compile(r"X-Blnk-Key[\"']?\s*[:=]\s*[\"']?[^\s,\"'}]+", re.IGNORECASE),
    "api_key": re.compile(r"[A-Za-z0-9]{32,}"),
}

# Headers that should never be logged
SENSITIVE_HEADERS = {
    "authorization",
    "x-blnk-key",
    "x-api-key",
    "cookie",
    "set-cookie",
}


@runtime_checkable
class Logger(Protocol):
    """Minimal logging capability used by the request pipeline."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


def default_logger() -> logging.Logger:
    """Return the package logger used when none is injected."""
    return logging.getLogger(LOGGER_NAME)


def sanitize_string(value: str) -> str:
    """Redact API keys and tokens found in ``value``.

    :param value: String to sanitize
    :type value: str
    :return: Sanitized string with sensitive data redacted
    :rtype: str
    """
    if not value:
        return value
    for pattern_name, pattern in SENSITIVE_PATTERNS.items():
        value = pattern.sub(f"<{pattern_name}:REDACTED>", value)
    return value


def sanitize_headers(headers: Dict[str, Any]) -> Dict[str, Any]:
    """Sanitize HTTP headers for logging.

    :param headers: Dictionary of HTTP headers
    :type headers: Dict[str, Any]
    :return: Sanitized headers dictionary
    :rtype: Dict[str, Any]
    """
    if not headers:
        return headers
    sanitized = copy.deepcopy(dict(headers))
    for key, value in sanitized.items():
        if key.lower() in SENSITIVE_HEADERS:
            if isinstance(value, str) and len(value) > 0:
                sanitized[key] = f"<REDACTED:length={len(value)}>"
            else:
                sanitized[key] = "<REDACTED>"
    return sanitized


class SanitizingFormatter(logging.Formatter):
    """Formatter that removes API keys and tokens from log messages."""

    def format(self, record: logging.LogRecord) -> str:
        if record.args:
            try:
                record.msg = sanitize_string(record.msg % record.args)
                record.args = None
            except (TypeError, ValueError):
                record.msg = sanitize_string(str(record.msg))
        else:
            record.msg = sanitize_string(str(record.msg))
        return super().format(record)


_LOGGING_CONFIGURED = False


def setup_logging(level: str = "INFO") -> None:
    """Set up sanitized logging for the ``blnk_client`` logger.

    Installs a stdout handler with :class:`SanitizingFormatter`. Calling it
    again only updates the level.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :type level: str
    """
    global _LOGGING_CONFIGURED

    logger = default_logger()
    logger.setLevel(getattr(logging, level.upper()))
    if _LOGGING_CONFIGURED:
        logger.debug("Logging already configured, skipping duplicate setup")
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        SanitizingFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False

    # httpx logs every request at INFO, including full URLs
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True
