"""Blnk client models package.

This package contains all Pydantic models used by the client, organized by
resource.
"""

from .base_models import BlnkModel, BlnkRequest, DocumentModel, ListParams
from .identity import Identity, IdentityRequest, IdentityType, ReconciliationUpload
from .ledger import (
    CreateLedgerBalanceRequest,
    CreateLedgerRequest,
    CreateTransactionRequest,
    Distribution,
    InflightStatus,
    Ledger,
    LedgerBalance,
    Transaction,
    UpdateInflightRequest,
    UpdateLedgerRequest,
)
from .monitor import (
    BalanceMonitor,
    CreateBalanceMonitorRequest,
    MonitorCondition,
    MonitorField,
    MonitorOperator,
)
from .search import (
    DOCUMENT_TYPES,
    Document,
    ResourceType,
    SearchHit,
    SearchParams,
    SearchResponse,
    resolve_document,
)

__all__ = [
    # Base models
    "BlnkModel",
    "BlnkRequest",
    "DocumentModel",
    "ListParams",
    # Ledger models
    "Ledger",
    "LedgerBalance",
    "Transaction",
    "Distribution",
    "CreateLedgerRequest",
    "UpdateLedgerRequest",
    "CreateLedgerBalanceRequest",
    "CreateTransactionRequest",
    "InflightStatus",
    "UpdateInflightRequest",
    # Monitor models
    "BalanceMonitor",
    "CreateBalanceMonitorRequest",
    "MonitorCondition",
    "MonitorField",
    "MonitorOperator",
    # Identity models
    "Identity",
    "IdentityRequest",
    "IdentityType",
    "ReconciliationUpload",
    # Search models
    "Document",
    "DOCUMENT_TYPES",
    "ResourceType",
    "SearchHit",
    "SearchParams",
    "SearchResponse",
    "resolve_document",
]
