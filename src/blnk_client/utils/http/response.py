"""Response status translation and JSON decoding."""

from functools import lru_cache
from typing import Any, Optional

import httpx
import pydantic
from pydantic import TypeAdapter

from ...exceptions import APIError, DecodeError


def is_success(status_code: int) -> bool:
    """Check if the status code is in the 200-299 range."""
    return 200 <= status_code < 300


def is_client_error(status_code: int) -> bool:
    return 400 <= status_code < 500


def is_server_error(status_code: int) -> bool:
    """Check if the status code should be treated as a transient server error."""
    return status_code >= 500


@lru_cache(maxsize=128)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def check_response(response: httpx.Response) -> None:
    """Raise APIError unless the response has a 2xx status.

    :param response: Response to inspect
    :type response: httpx.Response
    :raises APIError: With the status code and raw body
    """
    if is_success(response.status_code):
        return
    raise APIError(
        f"request failed with status {response.status_code}"
        f" ({response.reason_phrase or 'unknown'})",
        status_code=response.status_code,
        response_body=response.text,
    )


def decode_response(response: httpx.Response, result_type: Optional[Any] = None) -> Any:
    """Check the status and decode the JSON body into ``result_type``.

    ``result_type`` may be any type pydantic can validate, e.g. a model
    class or ``List[Ledger]``. With ``None`` the body is not decoded.

    :param response: Response to decode
    :type response: httpx.Response
    :param result_type: Target type
    :return: Decoded value, or None
    :raises APIError: For non-2xx statuses
    :raises DecodeError: If the body is not valid JSON for ``result_type``
    """
    check_response(response)
    if result_type is None:
        return None
    try:
        return _adapter(result_type).validate_json(response.content)
    except pydantic.ValidationError as e:
        name = getattr(result_type, "__name__", str(result_type))
        raise DecodeError(f"failed to decode response as {name}: {e}") from e
