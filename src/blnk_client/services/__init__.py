"""Resource services for the Blnk API.

Each service wraps the shared request pipeline with typed methods for one
group of endpoints.
"""

from .accounts import BalanceMonitorService, IdentityService, ReconciliationService
from .base import BaseService, ClientInterface
from .ledger import LedgerBalanceService, LedgerService, TransactionService
from .search import SearchService

__all__ = [
    "BaseService",
    "ClientInterface",
    "LedgerService",
    "LedgerBalanceService",
    "TransactionService",
    "BalanceMonitorService",
    "IdentityService",
    "ReconciliationService",
    "SearchService",
]
