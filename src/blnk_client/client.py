"""Blnk API client.

The client owns the configuration, the transport and the logger, and wires
them into the request pipeline shared by every resource service:

1. :meth:`BlnkClient.new_request` builds the outbound request
2. :meth:`BlnkClient.call_with_retry` sends it with retry on transient
   failures and decodes the response
3. :meth:`BlnkClient.upload` sends multipart uploads without retry

Examples:
    >>> async with BlnkClient(base_url="http://localhost:5001") as client:
    ...     ledger, _ = await client.ledger.create(CreateLedgerRequest(name="Main"))
"""

import logging
from typing import Any, Mapping, Optional, Tuple

import httpx

from .config.settings import ClientConfig, load_config, normalize_base_url
from .exceptions import ConfigurationError
from .services import (
    BalanceMonitorService,
    IdentityService,
    LedgerBalanceService,
    LedgerService,
    ReconciliationService,
    SearchService,
    TransactionService,
)
from .utils.http import (
    API_KEY_HEADER,
    RetryExecutor,
    RetryPolicy,
    build_request,
    resolve_url,
    upload_file,
)
from .utils.http.upload import FileSource
from .utils.logging import Logger, default_logger

logger = logging.getLogger(__name__)


class BlnkClient:
    """Async client for the Blnk ledger service.

    :param config: Client configuration; built from ``base_url``,
        ``api_key`` and the ``BLNK_*`` environment when omitted
    :type config: Optional[ClientConfig]
    :param base_url: Service base URL, used when ``config`` is omitted
    :type base_url: Optional[str]
    :param api_key: API key, used when ``config`` is omitted
    :type api_key: Optional[str]
    :param transport: HTTP client to send requests with; one is created
        (and closed by :meth:`aclose`) when omitted
    :type transport: Optional[httpx.AsyncClient]
    :param logger: Logger for retry and upload events
    :type logger: Optional[Logger]
    :param backoff: Delay multiplier between attempts, 1.0 keeps it fixed
    :type backoff: float
    :raises ConfigurationError: If the configuration is invalid
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncClient] = None,
        logger: Optional[Logger] = None,
        backoff: float = 1.0,
    ):
        if config is None:
            overrides = {}
            if base_url is not None:
                overrides["base_url"] = base_url
            if api_key is not None:
                overrides["api_key"] = api_key
            config = load_config(**overrides)

        self.config = config
        self._base_url = config.base_url
        self.logger: Logger = logger or default_logger()

        self._owns_transport = transport is None
        self.transport = transport or httpx.AsyncClient(timeout=config.timeout)

        self.retry_policy = RetryPolicy(
            retry_count=config.retry_count,
            delay=config.retry_delay,
            backoff=backoff,
        )
        self.executor = RetryExecutor(self.transport, self.retry_policy, self.logger)

        self.ledger = LedgerService(self)
        self.ledger_balance = LedgerBalanceService(self)
        self.transaction = TransactionService(self)
        self.balance_monitor = BalanceMonitorService(self)
        self.identity = IdentityService(self)
        self.search = SearchService(self)
        self.reconciliation = ReconciliationService(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> Optional[str]:
        return self.config.api_key

    def set_base_url(self, base_url: str) -> None:
        """Point the client at a different service URL.

        Not synchronized with in-flight calls.

        :raises ConfigurationError: If ``base_url`` is empty
        """
        try:
            self._base_url = normalize_base_url(base_url)
        except ValueError as e:
            raise ConfigurationError(str(e), setting="base_url") from e
        logger.debug("Base URL set to %s", self._base_url)

    def _auth_headers(self) -> dict:
        if self.api_key:
            return {API_KEY_HEADER: self.api_key}
        return {}

    def new_request(self, endpoint: str, method: str, payload: Any = None) -> httpx.Request:
        """Build a request for ``endpoint`` relative to the base URL.

        :param endpoint: Endpoint path, e.g. ``ledgers``
        :param method: HTTP method
        :param payload: Query parameters for GET, JSON body otherwise
        :return: Request ready for :meth:`call_with_retry`
        :raises URLError: If the endpoint cannot be resolved
        :raises EncodingError: If the payload cannot be serialized
        """
        return build_request(
            self._base_url,
            endpoint,
            method,
            payload,
            api_key=self.api_key,
            timeout=self.config.timeout,
        )

    async def call_with_retry(
        self, request: httpx.Request, result_type: Optional[Any] = None
    ) -> Tuple[Any, httpx.Response]:
        """Send ``request`` with retry and decode the body into ``result_type``."""
        return await self.executor.execute(request, result_type)

    async def upload(
        self,
        endpoint: str,
        file_field: str,
        file_source: FileSource,
        fields: Optional[Mapping[str, str]] = None,
    ) -> bytes:
        """Upload a file as multipart form data. Not retried.

        :param endpoint: Endpoint path relative to the base URL
        :param file_field: Form field name of the file part
        :param file_source: Filesystem path or readable binary stream
        :param fields: Extra string form fields
        :return: Raw response body
        """
        return await upload_file(
            self.transport,
            resolve_url(self._base_url, endpoint),
            file_field,
            file_source,
            fields=fields,
            headers=self._auth_headers(),
            timeout=self.config.timeout,
            logger=self.logger,
        )

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and not self.transport.is_closed:
            await self.transport.aclose()

    async def __aenter__(self) -> "BlnkClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
