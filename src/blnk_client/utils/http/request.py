"""Outbound request construction.

This module turns an endpoint, an HTTP method and an optional payload into
an ``httpx.Request`` ready to be sent by the retry executor:

- GET payloads are encoded as query parameters
- Other payloads are encoded as a JSON body
- The API key header and JSON content type are attached
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

import httpx
import pydantic_core
from pydantic import BaseModel

from ...exceptions import EncodingError, URLError
from ..logging import sanitize_headers

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Blnk-Key"
JSON_CONTENT_TYPE = "application/json"

QueryValue = Union[str, List[str]]


def resolve_url(base_url: str, endpoint: str) -> httpx.URL:
    """Resolve ``endpoint`` against ``base_url``.

    The base URL always ends with ``/``, so the endpoint is appended as a
    relative path.

    :param base_url: Normalized base URL
    :type base_url: str
    :param endpoint: Endpoint path, e.g. ``ledgers/ldg_1``
    :type endpoint: str
    :return: Absolute URL
    :rtype: httpx.URL
    :raises URLError: If the result is not an absolute http(s) URL
    """
    try:
        url = httpx.URL(base_url + endpoint.lstrip("/"))
    except (httpx.InvalidURL, TypeError, AttributeError) as e:
        raise URLError(f"invalid endpoint {endpoint!r}: {e}", endpoint=endpoint) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise URLError(
            f"cannot resolve {endpoint!r} against base url {base_url!r}",
            endpoint=endpoint,
        )
    return url


def _stringify(key: str, value: Any) -> QueryValue:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [str(_stringify(key, v)) for v in value if v is not None]
    if isinstance(value, dict):
        raise EncodingError(
            f"query parameter {key!r} cannot be a nested object",
            payload_type=type(value).__name__,
        )
    return str(value)


def encode_query_params(payload: Any) -> Dict[str, QueryValue]:
    """Encode a payload as URL query parameters.

    Model fields are named by their declared wire name (alias). Fields that
    are unset or ``None`` are omitted.

    :param payload: Pydantic model or mapping
    :return: Mapping of parameter name to string value(s)
    :raises EncodingError: If the payload cannot be flattened
    """
    if isinstance(payload, BaseModel):
        try:
            data = payload.model_dump(by_alias=True, exclude_none=True, mode="json")
        except pydantic_core.PydanticSerializationError as e:
            raise EncodingError(
                f"failed to encode query parameters: {e}",
                payload_type=type(payload).__name__,
            ) from e
    elif isinstance(payload, Mapping):
        data = dict(payload)
    else:
        raise EncodingError(
            "query payload must be a model or a mapping",
            payload_type=type(payload).__name__,
        )

    return {
        str(key): _stringify(str(key), value)
        for key, value in data.items()
        if value is not None
    }


def encode_json_body(payload: Any) -> bytes:
    """Serialize a payload as a JSON request body.

    :param payload: Pydantic model, mapping, list or scalar
    :return: UTF-8 encoded JSON
    :rtype: bytes
    :raises EncodingError: If the payload is not JSON serializable
    """
    try:
        if isinstance(payload, BaseModel):
            return payload.model_dump_json(by_alias=True, exclude_none=True).encode(
                "utf-8"
            )
        return pydantic_core.to_json(payload)
    except (pydantic_core.PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(
            f"failed to encode request body: {e}",
            payload_type=type(payload).__name__,
        ) from e


def build_request(
    base_url: str,
    endpoint: str,
    method: str,
    payload: Any = None,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
) -> httpx.Request:
    """Build an outbound request.

    :param base_url: Normalized base URL
    :param endpoint: Endpoint relative to the base URL
    :param method: HTTP method
    :param payload: Optional request payload
    :param api_key: Optional API key for the ``X-Blnk-Key`` header
    :param timeout: Optional timeout in seconds applied to this request
    :return: Request ready to send
    :rtype: httpx.Request
    :raises URLError: If the endpoint cannot be resolved
    :raises EncodingError: If the payload cannot be serialized
    """
    method = method.upper()
    url = resolve_url(base_url, endpoint)

    params = None
    content = None
    if payload is not None:
        if method == "GET":
            params = encode_query_params(payload)
        else:
            content = encode_json_body(payload)

    headers = {"Accept": JSON_CONTENT_TYPE}
    if api_key:
        headers[API_KEY_HEADER] = api_key
    if method != "GET":
        headers["Content-Type"] = JSON_CONTENT_TYPE

    extensions = {}
    if timeout is not None:
        extensions["timeout"] = httpx.Timeout(timeout).as_dict()

    request = httpx.Request(
        method,
        url,
        params=params,
        content=content,
        headers=headers,
        extensions=extensions,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built %s %s headers=%s",
            request.method,
            request.url,
            sanitize_headers(dict(request.headers)),
        )
    return request
