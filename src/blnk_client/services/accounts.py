"""Balance monitor, identity, and reconciliation services."""

from typing import List, Optional, Tuple

import httpx
import pydantic

from ..exceptions import DecodeError, ValidationError
from ..models import (
    BalanceMonitor,
    CreateBalanceMonitorRequest,
    Identity,
    IdentityRequest,
    ListParams,
    ReconciliationUpload,
)
from ..utils.http.upload import FileSource
from .base import BaseService, path_id

RECONCILIATION_UPLOAD_ENDPOINT = "reconciliation/upload"


class BalanceMonitorService(BaseService):
    """Manage monitors that call back when a balance crosses a threshold."""

    async def create(
        self, body: CreateBalanceMonitorRequest
    ) -> Tuple[BalanceMonitor, httpx.Response]:
        return await self._call("POST", "balance-monitors", body, BalanceMonitor)

    async def get(self, monitor_id: str) -> Tuple[BalanceMonitor, httpx.Response]:
        return await self._call(
            "GET",
            f"balance-monitors/{path_id('monitor_id', monitor_id)}",
            None,
            BalanceMonitor,
        )

    async def list(
        self, params: Optional[ListParams] = None
    ) -> Tuple[List[BalanceMonitor], httpx.Response]:
        return await self._call("GET", "balance-monitors", params, List[BalanceMonitor])

    async def update(
        self, monitor_id: str, body: CreateBalanceMonitorRequest
    ) -> Tuple[BalanceMonitor, httpx.Response]:
        return await self._call(
            "PUT",
            f"balance-monitors/{path_id('monitor_id', monitor_id)}",
            body,
            BalanceMonitor,
        )


class IdentityService(BaseService):
    """Manage identities that own balances."""

    async def create(self, body: IdentityRequest) -> Tuple[Identity, httpx.Response]:
        return await self._call("POST", "identities", body, Identity)

    async def get(self, identity_id: str) -> Tuple[Identity, httpx.Response]:
        return await self._call(
            "GET", f"identities/{path_id('identity_id', identity_id)}", None, Identity
        )

    async def list(
        self, params: Optional[ListParams] = None
    ) -> Tuple[List[Identity], httpx.Response]:
        return await self._call("GET", "identities", params, List[Identity])

    async def update(
        self, identity_id: str, body: IdentityRequest
    ) -> Tuple[Identity, httpx.Response]:
        return await self._call(
            "PUT", f"identities/{path_id('identity_id', identity_id)}", body, Identity
        )


class ReconciliationService(BaseService):
    """Upload external statements for reconciliation."""

    async def upload(self, file_source: FileSource, source: str) -> ReconciliationUpload:
        """Upload a statement file.

        :param file_source: Filesystem path or readable binary stream
        :param source: Name of the external source, e.g. ``stripe``
        :return: Upload id and parsed record count
        :raises ValidationError: If ``source`` is empty
        :raises UploadError: For non-2xx responses
        :raises DecodeError: If the response body is not an upload result
        """
        if not source or not source.strip():
            raise ValidationError("source is required", field="source")
        body = await self.client.upload(
            RECONCILIATION_UPLOAD_ENDPOINT, "file", file_source, {"source": source}
        )
        try:
            return ReconciliationUpload.model_validate_json(body)
        except pydantic.ValidationError as e:
            raise DecodeError(f"failed to decode upload response: {e}") from e
