"""Async Python client for the Blnk ledger service.

This package provides typed access to ledgers, balances, transactions,
balance monitors, identities, search and reconciliation uploads, over a
shared request pipeline with retry on transient failures.

:var __version__: Current package version
:type __version__: str
"""

from .client import BlnkClient
from .config.settings import ClientConfig, default_config, load_config
from .exceptions import (
    APIError,
    BlnkError,
    ConfigurationError,
    DecodeError,
    EncodingError,
    MaxRetriesExceededError,
    RequestBuildError,
    ServerError,
    TransportError,
    UnsupportedResourceError,
    UploadError,
    UploadIOError,
    URLError,
    ValidationError,
)
from .models import Document, ResourceType, SearchParams, SearchResponse

__version__ = "0.1.0"

__all__ = [
    "BlnkClient",
    "ClientConfig",
    "default_config",
    "load_config",
    "Document",
    "ResourceType",
    "SearchParams",
    "SearchResponse",
    "BlnkError",
    "ConfigurationError",
    "ValidationError",
    "RequestBuildError",
    "URLError",
    "EncodingError",
    "TransportError",
    "APIError",
    "ServerError",
    "DecodeError",
    "MaxRetriesExceededError",
    "UnsupportedResourceError",
    "UploadError",
    "UploadIOError",
]
