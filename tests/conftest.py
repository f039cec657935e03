import sys
from pathlib import Path
from typing import Callable, List
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from blnk_client import BlnkClient, ClientConfig  # noqa: E402

BASE_URL = "http://blnk.test/"


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    # Add custom markers for test organization
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set the environment variables read by ClientConfig.

    Tests that need a missing setting remove it with ``monkeypatch.delenv``.
    """
    monkeypatch.setenv("BLNK_BASE_URL", BASE_URL)
    monkeypatch.delenv("BLNK_API_KEY", raising=False)
    monkeypatch.setenv("BLNK_RETRY_COUNT", "3")
    monkeypatch.setenv("BLNK_RETRY_DELAY", "2")
    monkeypatch.setenv("BLNK_TIMEOUT", "10")
    monkeypatch.setenv("BLNK_LOG_LEVEL", "INFO")
    yield


@pytest.fixture
def sleeps(monkeypatch) -> List[float]:
    """Replace asyncio.sleep with a recorder so retries run instantly."""
    recorded: List[float] = []

    async def fake_sleep(delay):
        recorded.append(delay)

    monkeypatch.setattr("blnk_client.utils.http.retry.asyncio.sleep", fake_sleep)
    return recorded


@pytest.fixture
def mock_logger():
    """Logger double with the info/error capability."""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def make_client(mock_logger) -> Callable[..., BlnkClient]:
    """Build a BlnkClient whose transport is an httpx.MockTransport.

    ``handler`` receives each ``httpx.Request`` and returns an
    ``httpx.Response`` (or raises an httpx transport error).
    """

    def _make(handler, **config_values) -> BlnkClient:
        values = {"base_url": BASE_URL, "retry_count": 3, "retry_delay": 2.0}
        values.update(config_values)
        transport = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return BlnkClient(
            ClientConfig(**values), transport=transport, logger=mock_logger
        )

    return _make


@pytest.fixture
def mock_client():
    """Client double exposing the ClientInterface used by services."""
    client = MagicMock()
    client.new_request = MagicMock(
        return_value=httpx.Request("POST", BASE_URL + "search/ledgers")
    )
    client.call_with_retry = AsyncMock()
    client.upload = AsyncMock()
    return client


@pytest.fixture
def ledger_document():
    """Raw ledger document as returned in a search hit."""
    return {
        "ledger_id": "ldg_073f7ffe-9dfd-42ce-aa50-d1dca1788adc",
        "name": "World Ledger",
        "created_at": "2024-02-20T05:28:03Z",
        "meta_data": {"type": "main"},
    }
