"""
HTTP transport module.

This module issues single requests against the ContentGem REST API. It
attaches the credential and JSON content-type headers, applies the
configured timeout, and funnels every failure into ``TransportError``.
The transport never retries.
"""

import json
import logging
import time
from typing import Any, Dict, Mapping, Optional

import httpx

from ..constants import API_KEY_HEADER, JSON_CONTENT_TYPE
from ..models import ClientConfig
from .errors import TransportError
from .utils import compact_params, decode_json, describe_error, extract_error_message

logger = logging.getLogger(__name__)


class Transport:
    """
    Thin request layer around a single ``httpx.Client``.

    The client holds no mutable state besides its connection pool, so one
    instance can be shared by concurrent callers.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the transport.

        Args:
            config: Immutable client configuration
            transport: Optional httpx transport (used by tests to mock the network)
        """
        self.config = config
        self._client = httpx.Client(timeout=config.timeout, transport=transport)

    def default_headers(self, json_body: bool = True) -> Dict[str, str]:
        """Headers sent with every request; multipart requests omit Content-Type."""
        headers = {API_KEY_HEADER: self.config.api_key}
        if json_body:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        files: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Issue one request and return the decoded JSON body.

        The whole call, from connecting to reading the last byte, is bounded
        by the configured timeout.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: Path appended to the configured base URL
            params: Query parameters; ``None`` values are dropped
            json_body: JSON-serializable request body
            headers: Header overrides; caller values win over defaults
            files: Multipart file fields (switches off the JSON content type)
            data: Multipart text fields sent alongside ``files``

        Returns:
            The decoded response body, unvalidated. A non-2xx response whose
            body is a ``success: false`` envelope is returned as well.

        Raises:
            TransportError: On non-2xx status without an envelope, network
                failure, timeout, or an undecodable body
        """
        url = f"{self.config.base_url}{endpoint}"
        merged_headers = self.default_headers(json_body=files is None)
        if headers:
            merged_headers.update(headers)

        start_time = time.monotonic()
        deadline = start_time + self.config.timeout
        try:
            with self._client.stream(
                method,
                url,
                params=compact_params(params) or None,
                json=json_body,
                files=files,
                data=data,
                headers=merged_headers,
                timeout=self._remaining(deadline),
            ) as response:
                content = self._read_body(response, deadline)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {endpoint} failed: {type(e).__name__}: {describe_error(e)}")
            raise TransportError(f"Request failed: {describe_error(e)}") from e

        elapsed_ms = (time.monotonic() - start_time) * 1000
        logger.debug(f"{method} {endpoint} -> {response.status_code} ({elapsed_ms:.0f}ms)")

        if not response.is_success:
            payload = decode_json(content)
            if isinstance(payload, dict) and payload.get("success") is False:
                # Domain failures travel in-band as a normal result
                logger.debug(f"{method} {endpoint} returned error envelope: {payload.get('error')}")
                return payload
            message = extract_error_message(response, payload)
            logger.warning(f"{method} {endpoint} failed: {message}")
            raise TransportError(f"Request failed: {message}")

        try:
            return json.loads(content)
        except ValueError as e:
            raise TransportError(f"Request failed: {describe_error(e)}") from e

    def _remaining(self, deadline: float) -> float:
        """Seconds left before ``deadline``, floored at one millisecond."""
        return max(deadline - time.monotonic(), 0.001)

    def _read_body(self, response: httpx.Response, deadline: float) -> bytes:
        """
        Read the response body in chunks, enforcing the overall deadline.

        httpx timeouts apply to each network operation, not to the whole call.

        Raises:
            httpx.ReadTimeout: If the deadline passes before the body is complete
        """
        chunks = []
        self._check_deadline(response, deadline)
        for chunk in response.iter_bytes():
            chunks.append(chunk)
            self._check_deadline(response, deadline)
        return b"".join(chunks)

    def _check_deadline(self, response: httpx.Response, deadline: float) -> None:
        if time.monotonic() > deadline:
            raise httpx.ReadTimeout(
                f"No complete response within {self.config.timeout:g}s",
                request=response.request,
            )

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()
