"""Ledger, balance, and transaction services."""

from typing import List, Optional, Tuple

import httpx

from ..models import (
    CreateLedgerBalanceRequest,
    CreateLedgerRequest,
    CreateTransactionRequest,
    Ledger,
    LedgerBalance,
    ListParams,
    Transaction,
    UpdateInflightRequest,
    UpdateLedgerRequest,
)
from .base import BaseService, path_id


class LedgerService(BaseService):
    """Create, fetch, list and rename ledgers."""

    async def create(self, body: CreateLedgerRequest) -> Tuple[Ledger, httpx.Response]:
        return await self._call("POST", "ledgers", body, Ledger)

    async def get(self, ledger_id: str) -> Tuple[Ledger, httpx.Response]:
        return await self._call("GET", f"ledgers/{path_id('ledger_id', ledger_id)}", None, Ledger)

    async def list(
        self, params: Optional[ListParams] = None
    ) -> Tuple[List[Ledger], httpx.Response]:
        return await self._call("GET", "ledgers", params, List[Ledger])

    async def update(
        self, ledger_id: str, body: UpdateLedgerRequest
    ) -> Tuple[Ledger, httpx.Response]:
        return await self._call("PUT", f"ledgers/{path_id('ledger_id', ledger_id)}", body, Ledger)


class LedgerBalanceService(BaseService):
    """Create and fetch balances."""

    async def create(
        self, body: CreateLedgerBalanceRequest
    ) -> Tuple[LedgerBalance, httpx.Response]:
        return await self._call("POST", "balances", body, LedgerBalance)

    async def get(self, balance_id: str) -> Tuple[LedgerBalance, httpx.Response]:
        return await self._call(
            "GET", f"balances/{path_id('balance_id', balance_id)}", None, LedgerBalance
        )


class TransactionService(BaseService):
    """Record, fetch, settle and refund transactions."""

    async def create(
        self, body: CreateTransactionRequest
    ) -> Tuple[Transaction, httpx.Response]:
        """Record a transaction.

        With ``inflight=True`` the funds are held until
        :meth:`update_inflight` commits or voids them.
        """
        return await self._call("POST", "transactions", body, Transaction)

    async def get(self, transaction_id: str) -> Tuple[Transaction, httpx.Response]:
        return await self._call(
            "GET",
            f"transactions/{path_id('transaction_id', transaction_id)}",
            None,
            Transaction,
        )

    async def update_inflight(
        self, transaction_id: str, body: UpdateInflightRequest
    ) -> Tuple[Transaction, httpx.Response]:
        return await self._call(
            "PUT",
            f"transactions/inflight/{path_id('transaction_id', transaction_id)}",
            body,
            Transaction,
        )

    async def refund(self, transaction_id: str) -> Tuple[Transaction, httpx.Response]:
        return await self._call(
            "POST",
            f"refund-transaction/{path_id('transaction_id', transaction_id)}",
            None,
            Transaction,
        )
