"""Pydantic models for ledgers, balances, and transactions.

These are the three resources the search endpoint can return. Each one
carries its resource fields plus ``created_at`` and ``meta_data`` from
:class:`~.base_models.DocumentModel`.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base_models import BlnkModel, BlnkRequest, DocumentModel


class Ledger(DocumentModel):
    """A ledger groups balances.

    :param ledger_id: Unique ledger identifier
    :type ledger_id: str
    :param name: Ledger name
    :type name: str
    """

    ledger_id: str
    name: str = ""


class LedgerBalance(DocumentModel):
    """A balance held in a ledger.

    Amounts are integers in the smallest currency unit; ``currency_multiplier``
    converts them back to display units.
    """

    balance_id: str
    ledger_id: Optional[str] = None
    identity_id: Optional[str] = None
    indicator: Optional[str] = None
    currency: str = ""
    currency_multiplier: Optional[float] = None
    balance: int = 0
    credit_balance: int = 0
    debit_balance: int = 0
    inflight_balance: int = 0
    inflight_credit_balance: int = 0
    inflight_debit_balance: int = 0
    version: Optional[int] = None

    @property
    def display_balance(self) -> float:
        multiplier = self.currency_multiplier or 1
        return self.balance / multiplier


class Distribution(BlnkModel):
    """Share of a transaction sent to or taken from one balance.

    ``distribution`` is either a percentage (``"20%"``), a fixed amount
    (``"100"``) or ``"left"`` for the remainder.
    """

    identifier: str
    distribution: str


class Transaction(DocumentModel):
    """A movement of funds between balances."""

    transaction_id: str
    parent_transaction: Optional[str] = None
    reference: Optional[str] = None
    currency: str = ""
    amount: float = 0
    precise_amount: Optional[int] = None
    precision: Optional[float] = None
    rate: Optional[float] = None
    source: Optional[str] = None
    destination: Optional[str] = None
    sources: Optional[List[Distribution]] = None
    destinations: Optional[List[Distribution]] = None
    description: Optional[str] = None
    status: Optional[str] = None
    hash: Optional[str] = None
    allow_overdraft: Optional[bool] = None
    inflight: Optional[bool] = None
    scheduled_for: Optional[datetime] = None
    inflight_expiry_date: Optional[datetime] = None


# Request models
class CreateLedgerRequest(BlnkRequest):
    name: str = Field(..., min_length=1)
    meta_data: Optional[Dict[str, Any]] = None


class UpdateLedgerRequest(BlnkRequest):
    name: str = Field(..., min_length=1)


class CreateLedgerBalanceRequest(BlnkRequest):
    """Request body for creating a balance.

    :param ledger_id: Ledger the balance belongs to
    :type ledger_id: str
    :param currency: Currency code, e.g. ``USD``
    :type currency: str
    :param identity_id: Optional owner identity
    :type identity_id: Optional[str]
    """

    ledger_id: str = Field(..., min_length=1)
    currency: str = Field(..., min_length=1)
    identity_id: Optional[str] = None
    meta_data: Optional[Dict[str, Any]] = None


class CreateTransactionRequest(BlnkRequest):
    """Request body for recording a transaction.

    Either ``source``/``destination`` or ``sources``/``destinations`` is
    used; the split forms distribute the amount across several balances.
    """

    amount: float
    reference: str = Field(..., min_length=1)
    currency: str = Field(..., min_length=1)
    precision: Optional[float] = None
    source: Optional[str] = None
    destination: Optional[str] = None
    sources: Optional[List[Distribution]] = None
    destinations: Optional[List[Distribution]] = None
    description: Optional[str] = None
    allow_overdraft: Optional[bool] = None
    inflight: Optional[bool] = None
    rate: Optional[float] = None
    scheduled_for: Optional[datetime] = None
    inflight_expiry_date: Optional[datetime] = None
    meta_data: Optional[Dict[str, Any]] = None


class InflightStatus(str, Enum):
    """Terminal actions for an inflight transaction."""

    COMMIT = "commit"
    VOID = "void"


class UpdateInflightRequest(BlnkRequest):
    """Commit or void an inflight transaction.

    ``amount`` commits only part of the inflight amount.
    """

    status: InflightStatus
    amount: Optional[float] = None
