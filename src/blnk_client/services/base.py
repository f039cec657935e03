"""Base class and client contract for resource services.

Services only depend on :class:`ClientInterface`, so tests can hand them
a mock instead of a real :class:`~blnk_client.client.BlnkClient`.
"""

from typing import Any, Mapping, Optional, Protocol, Tuple
from urllib.parse import quote

import httpx

from ..exceptions import ValidationError


class ClientInterface(Protocol):
    """Pipeline operations a service needs from the client."""

    def new_request(self, endpoint: str, method: str, payload: Any = None) -> httpx.Request: ...

    async def call_with_retry(
        self, request: httpx.Request, result_type: Optional[Any] = None
    ) -> Tuple[Any, httpx.Response]: ...

    async def upload(
        self,
        endpoint: str,
        file_field: str,
        file_source: Any,
        fields: Optional[Mapping[str, str]] = None,
    ) -> bytes: ...


def path_id(name: str, value: Optional[str]) -> str:
    """Validate and URL-quote an identifier used as a path segment.

    :raises ValidationError: If the identifier is empty
    """
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} is required", field=name)
    return quote(str(value), safe="")


class BaseService:
    """Common plumbing for resource services.

    :param client: Client providing the request pipeline
    :type client: ClientInterface
    """

    def __init__(self, client: ClientInterface):
        self.client = client

    async def _call(
        self,
        method: str,
        endpoint: str,
        payload: Any = None,
        result_type: Optional[Any] = None,
    ) -> Tuple[Any, httpx.Response]:
        request = self.client.new_request(endpoint, method, payload)
        return await self.client.call_with_retry(request, result_type)
