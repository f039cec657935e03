"""Tests for log sanitization and the logging capability."""

import logging
from unittest.mock import MagicMock

from blnk_client.utils.logging import (
    LOGGER_NAME,
    Logger,
    SanitizingFormatter,
    default_logger,
    sanitize_headers,
    sanitize_string,
    setup_logging,
)


def test_sanitize_string_redacts_keys_and_tokens():
    text = "Authorization: Bearer abc123 X-Blnk-Key: supersecret"
    sanitized = sanitize_string(text)

    assert "abc123" not in sanitized
    assert "supersecret" not in sanitized
    assert "<bearer_token:REDACTED>" in sanitized


def test_sanitize_string_redacts_long_opaque_values():
    key = "a" * 40
    assert key not in sanitize_string(f"using key {key}")


def test_sanitize_headers_keeps_safe_headers():
    headers = {"X-Blnk-Key": "secret", "Accept": "application/json"}
    sanitized = sanitize_headers(headers)

    assert sanitized["X-Blnk-Key"] == "<REDACTED:length=6>"
    assert sanitized["Accept"] == "application/json"
    # Original mapping is untouched
    assert headers["X-Blnk-Key"] == "secret"


def test_formatter_sanitizes_interpolated_args():
    formatter = SanitizingFormatter("%(message)s")
    record = logging.LogRecord(
        "blnk_client", logging.INFO, __file__, 1, "sending %s", ("X-Blnk-Key=secret",), None
    )

    output = formatter.format(record)

    assert "secret" not in output
    assert output.startswith("sending ")


def test_logger_capability():
    assert isinstance(default_logger(), Logger)
    assert isinstance(MagicMock(), Logger)
    assert not isinstance(object(), Logger)
    assert default_logger().name == LOGGER_NAME


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG")
    setup_logging("WARNING")

    logger = logging.getLogger(LOGGER_NAME)
    sanitizing = [h for h in logger.handlers if isinstance(h.formatter, SanitizingFormatter)]

    assert len(sanitizing) == 1
    assert logger.level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING
