"""Retry executor for outbound requests.

Only transient failures are retried: connection-level transport errors and
5xx responses. Any other response is decoded once and either returned or
raised, since a 4xx or malformed body will not change on a second attempt.

The delay between attempts is fixed by default. ``backoff`` multiplies the
delay after each attempt when exponential growth is wanted.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import httpx

from ...config.settings import DEFAULT_RETRY_COUNT, DEFAULT_RETRY_DELAY
from ...exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    MaxRetriesExceededError,
    ServerError,
    TransportError,
)
from ..logging import Logger, default_logger
from .response import decode_response, is_server_error


@dataclass(frozen=True)
class RetryPolicy:
    """How many times and how long to wait between attempts.

    :param retry_count: Attempts per request, including the first one
    :param delay: Seconds to wait after a failed attempt
    :param backoff: Multiplier applied to the delay after each attempt
    """

    retry_count: int = DEFAULT_RETRY_COUNT
    delay: float = DEFAULT_RETRY_DELAY
    backoff: float = 1.0

    def __post_init__(self):
        if self.retry_count < 1:
            raise ConfigurationError("retry count must be at least 1", setting="retry_count")
        if self.delay < 0 or self.backoff < 1:
            raise ConfigurationError("retry delay must be >= 0 and backoff >= 1")

    def delay_for(self, attempt: int) -> float:
        """Return the delay after the zero-based ``attempt``."""
        return self.delay * (self.backoff**attempt)


class RetryExecutor:
    """Send requests through a transport with retry on transient failures.

    :param transport: HTTP client used to send requests
    :type transport: httpx.AsyncClient
    :param policy: Retry policy
    :type policy: RetryPolicy
    :param logger: Logger receiving one entry per failed attempt
    :type logger: Optional[Logger]
    """

    def __init__(
        self,
        transport: httpx.AsyncClient,
        policy: Optional[RetryPolicy] = None,
        logger: Optional[Logger] = None,
    ):
        self.transport = transport
        self.policy = policy or RetryPolicy()
        self.logger = logger or default_logger()

    async def execute(
        self, request: httpx.Request, result_type: Optional[Any] = None
    ) -> Tuple[Any, httpx.Response]:
        """Send ``request`` and decode the response into ``result_type``.

        :param request: Request built by the request builder
        :param result_type: Type the JSON body is decoded into, or None
        :return: Tuple of decoded result and the raw response
        :raises APIError: For non-2xx, non-5xx responses (not retried)
        :raises DecodeError: For malformed bodies (not retried)
        :raises TransportError: For non-retryable request errors
        :raises MaxRetriesExceededError: When every attempt failed transiently
        """
        last_status: Optional[int] = None
        last_error: Optional[Exception] = None

        for attempt in range(self.policy.retry_count):
            try:
                response = await self.transport.send(request)
            except httpx.TransportError as e:
                last_error = e
                self.logger.info(
                    f"Attempt {attempt + 1}/{self.policy.retry_count} "
                    f"{request.method} {request.url} failed: {e!r}"
                )
                await self._wait(attempt)
                continue
            except httpx.RequestError as e:
                self.logger.error(f"{request.method} {request.url} failed: {e!r}")
                raise TransportError(str(e), url=str(request.url)) from e

            if is_server_error(response.status_code):
                last_status = response.status_code
                last_error = ServerError(
                    f"Request failed with status code {response.status_code} "
                    f"and Status {response.reason_phrase}",
                    status_code=response.status_code,
                    response_body=response.text,
                )
                self.logger.error(last_error.message)
                await self._wait(attempt)
                continue

            try:
                result = decode_response(response, result_type)
            except (APIError, DecodeError) as e:
                self.logger.error(e.message)
                raise
            return result, response

        raise MaxRetriesExceededError(
            self.policy.retry_count, last_status=last_status
        ) from last_error

    async def _wait(self, attempt: int) -> None:
        # No sleep after the final attempt
        if attempt < self.policy.retry_count - 1:
            await asyncio.sleep(self.policy.delay_for(attempt))
