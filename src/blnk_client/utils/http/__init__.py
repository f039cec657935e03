"""HTTP pipeline public API (barrel module).

This package provides:
- Request construction with query/body encoding and auth headers
- Response status translation and JSON decoding
- A retry executor for transient failures
- Multipart file upload

Recommended import pattern for consumers:
    from blnk_client.utils.http import build_request, RetryExecutor, upload_file
"""

from .request import (
    API_KEY_HEADER,
    build_request,
    encode_json_body,
    encode_query_params,
    resolve_url,
)
from .response import (
    check_response,
    decode_response,
    is_client_error,
    is_server_error,
    is_success,
)
from .retry import RetryExecutor, RetryPolicy
from .upload import DEFAULT_UPLOAD_NAME, FileSource, open_file_source, upload_file

__all__ = [
    "API_KEY_HEADER",
    "build_request",
    "encode_json_body",
    "encode_query_params",
    "resolve_url",
    "check_response",
    "decode_response",
    "is_client_error",
    "is_server_error",
    "is_success",
    "RetryExecutor",
    "RetryPolicy",
    "DEFAULT_UPLOAD_NAME",
    "FileSource",
    "open_file_source",
    "upload_file",
]
