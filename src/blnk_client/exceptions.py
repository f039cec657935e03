"""Structured exception classes for the Blnk client."""

import json
from typing import Any, Dict, Optional


class BlnkError(Exception):
    """Base exception for all Blnk client errors.

    This exception serves as the parent class for all client specific
    exceptions, providing a consistent interface for error handling
    across the request pipeline.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class ConfigurationError(BlnkError):
    """Raised for configuration-related errors.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)


class ValidationError(BlnkError):
    """Raised when caller input is rejected before any network I/O.

    :param message: Description of the validation error
    :param field: Optional name of the field that failed validation
    :param value: Optional value that caused the validation failure
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        """Initialize validation error with message and optional field/value."""
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message=message, code="VALIDATION_ERROR", details=details)
        self.field = field


class RequestBuildError(BlnkError):
    """Raised when an outbound request cannot be constructed."""

    def __init__(self, message: str, code: str = "REQUEST_BUILD_ERROR", **details):
        super().__init__(message=message, code=code, details=details)


class URLError(RequestBuildError):
    """Raised when an endpoint cannot be resolved against the base URL."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(message, code="URL_ERROR", endpoint=endpoint)
        self.endpoint = endpoint


class EncodingError(RequestBuildError):
    """Raised when a request payload cannot be serialized."""

    def __init__(self, message: str, payload_type: Optional[str] = None):
        super().__init__(message, code="ENCODING_ERROR", payload_type=payload_type)


class TransportError(BlnkError):
    """Raised for connection-level failures.

    Inside the retry executor these are retried; they only surface to
    callers from paths without retry, such as file uploads.

    :param message: Description of the transport failure
    :param url: Optional URL of the failed request
    """

    def __init__(self, message: str, url: Optional[str] = None):
        """Initialize transport error with message and optional URL."""
        details = {}
        if url:
            details["url"] = url
        super().__init__(message=message, code="TRANSPORT_ERROR", details=details)


class APIError(BlnkError):
    """Raised when the service answers with a non-success status.

    :param message: Description of the API error
    :param status_code: HTTP status code from the API response
    :param response_body: Raw response body from the failed request
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        """Initialize API error with message and optional response details."""
        details: Dict[str, Any] = {}
        if status_code:
            details["status_code"] = status_code
        if response_body:
            details["response_body"] = response_body
        super().__init__(message=message, code="API_ERROR", details=details)
        self.status_code = status_code
        self.response_body = response_body


class ServerError(APIError):
    """Raised for 5xx responses. Retried by the executor."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        super().__init__(
            message=message, status_code=status_code, response_body=response_body
        )
        self.code = "SERVER_ERROR"


class DecodeError(BlnkError):
    """Raised when a response body is not valid JSON for the target type.

    :param message: Description of the decoding failure
    :param hit_index: Index of the failing search hit, if any
    """

    def __init__(self, message: str, hit_index: Optional[int] = None):
        """Initialize decode error with message and optional hit index."""
        details = {}
        if hit_index is not None:
            details["hit_index"] = hit_index
        super().__init__(message=message, code="DECODE_ERROR", details=details)
        self.hit_index = hit_index


class MaxRetriesExceededError(BlnkError):
    """Raised when every retry attempt failed with a transient error.

    :param attempts: Number of attempts made
    :param last_status: Status code of the last response, if one was received
    """

    def __init__(self, attempts: int, last_status: Optional[int] = None):
        """Initialize with the attempt count and last observed status."""
        details: Dict[str, Any] = {"attempts": attempts}
        if last_status is not None:
            details["last_status"] = last_status
        super().__init__(
            message=f"max retry count exceeded after {attempts} attempt(s)",
            code="MAX_RETRIES_EXCEEDED",
            details=details,
        )
        self.attempts = attempts
        self.last_status = last_status


class UnsupportedResourceError(BlnkError):
    """Raised for a search resource tag with no known document type."""

    def __init__(self, resource: Any):
        super().__init__(
            message=f"unsupported search resource: {resource!r}",
            code="UNSUPPORTED_RESOURCE",
            details={"resource": str(resource)},
        )
        self.resource = resource


class UploadError(APIError):
    """Raised when a multipart upload is answered with a non-2xx status."""

    def __init__(self, status_code: int, response_body: str):
        super().__init__(
            message=f"upload failed with status {status_code}: {response_body}",
            status_code=status_code,
            response_body=response_body,
        )
        self.code = "UPLOAD_ERROR"


class UploadIOError(BlnkError):
    """Raised when the upload source cannot be opened or read.

    :param message: Description of the I/O failure
    :param source: Optional description of the file source
    """

    def __init__(self, message: str, source: Optional[str] = None):
        details = {}
        if source:
            details["source"] = source
        super().__init__(message=message, code="UPLOAD_IO_ERROR", details=details)
