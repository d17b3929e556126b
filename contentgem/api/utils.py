"""
API utilities module.

This module provides helper functions shared by the resource operations:
query-string construction, upload payload normalization and error
message extraction.
"""

import json
import os
from typing import Any, BinaryIO, Dict, Mapping, Optional, Tuple, Union

import httpx

UploadSource = Union[bytes, bytearray, str, "os.PathLike[str]", BinaryIO]


def compact_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Drop absent values from a query mapping, preserving key order.

    Absent filters are omitted entirely rather than sent as empty values.
    """
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


def build_list_params(page: int, limit: int, **filters: Any) -> Dict[str, Any]:
    """
    Build query parameters for a listable resource.

    ``page`` and ``limit`` always come first, followed by any filters that
    were supplied.

    Args:
        page: 1-based page number
        limit: Page size
        **filters: Optional filters keyed by their wire name

    Returns:
        Ordered mapping suitable for ``httpx`` ``params``
    """
    params: Dict[str, Any] = {"page": page, "limit": limit}
    params.update(compact_params(filters))
    return params


def describe_error(exc: BaseException) -> str:
    """Return the underlying message of ``exc``, or its type when it has none."""
    message = str(exc).strip()
    return message or type(exc).__name__


def extract_error_message(response: httpx.Response, payload: Any) -> str:
    """Best-effort human-readable message for a non-2xx response."""
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
    return f"HTTP {response.status_code}: {response.reason_phrase}"


def decode_json(content: bytes) -> Any:
    """Decode a JSON body, returning None when it is not valid JSON."""
    try:
        return json.loads(content)
    except ValueError:
        return None


def prepare_upload(source: UploadSource, filename: str) -> Tuple[str, bytes]:
    """
    Normalize an upload source into a ``(filename, content)`` pair.

    Accepts raw bytes, a filesystem path, or a binary file object. Paths
    and named file objects keep their own basename.
    """
    if isinstance(source, (bytes, bytearray)):
        return filename, bytes(source)
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as handle:
            return os.path.basename(os.fspath(source)), handle.read()
    name = getattr(source, "name", None)
    if isinstance(name, str) and name:
        filename = os.path.basename(name)
    return filename, source.read()
