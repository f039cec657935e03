"""Multipart file upload.

Uploads are sent once, straight through the transport. They are not
retried: a partially consumed stream cannot be replayed.
"""

import io
import os
from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO, Dict, Mapping, Optional, Tuple, Union

import httpx

from ...exceptions import TransportError, UploadError, UploadIOError
from ..logging import Logger, default_logger
from .response import is_success

DEFAULT_UPLOAD_NAME = "upload"

FileSource = Union[str, os.PathLike, BinaryIO]


def open_file_source(source: FileSource, stack: ExitStack) -> Tuple[str, BinaryIO]:
    """Return the remote file name and a binary stream for ``source``.

    Paths are opened (and closed by ``stack``) and keep their base name.
    Streams are used as-is under :data:`DEFAULT_UPLOAD_NAME`.

    :raises UploadIOError: If the path cannot be opened or the stream is
        not a readable binary stream
    """
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        try:
            stream = stack.enter_context(path.open("rb"))
        except OSError as e:
            raise UploadIOError(f"cannot open {path}: {e}", source=str(path)) from e
        return path.name, stream

    if isinstance(source, io.TextIOBase):
        raise UploadIOError("upload streams must be opened in binary mode")
    if not callable(getattr(source, "read", None)):
        raise UploadIOError(
            f"unsupported file input type: {type(source).__name__}",
            source=type(source).__name__,
        )
    return DEFAULT_UPLOAD_NAME, source


async def upload_file(
    transport: httpx.AsyncClient,
    url: Union[str, httpx.URL],
    file_field: str,
    file_source: FileSource,
    fields: Optional[Mapping[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
    logger: Optional[Logger] = None,
) -> bytes:
    """POST a file and extra form fields as ``multipart/form-data``.

    :param transport: HTTP client used to send the request
    :param url: Absolute upload URL
    :param file_field: Form field name of the file part
    :param file_source: Filesystem path or readable binary stream
    :param fields: Extra string form fields
    :param headers: Extra request headers, e.g. the API key
    :param timeout: Optional request timeout in seconds
    :param logger: Logger for the upload outcome
    :return: Raw response body
    :rtype: bytes
    :raises UploadIOError: If the file cannot be opened or read
    :raises TransportError: If the request could not be sent
    :raises UploadError: For non-2xx responses
    """
    logger = logger or default_logger()
    data = {str(k): str(v) for k, v in (fields or {}).items()}

    with ExitStack() as stack:
        file_name, stream = open_file_source(file_source, stack)
        request_kwargs = {
            "files": {file_field: (file_name, stream)},
            "data": data,
            "headers": headers,
        }
        if timeout is not None:
            request_kwargs["timeout"] = timeout
        try:
            response = await transport.post(url, **request_kwargs)
        except httpx.RequestError as e:
            logger.error(f"Upload failed: {e!r}")
            raise TransportError(str(e), url=str(url)) from e
        except OSError as e:
            logger.error(f"Upload failed reading {file_name}: {e}")
            raise UploadIOError(f"failed to read {file_name}: {e}", source=file_name) from e

    body = response.content
    if is_success(response.status_code):
        logger.info("Upload successful")
        return body

    raise UploadError(response.status_code, response.text)
