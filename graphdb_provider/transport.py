"""
HTTP Transport for the GraphDB provider.

Handles HTTP communication with the administrative REST API: basic
authentication, status checking and JSON decoding. Requests are issued once;
nothing is retried.
"""

import time
from typing import Any

import httpx

from graphdb_provider.config import ConnectionConfig
from graphdb_provider.exceptions import DecodeError, TransportError, UnexpectedStatusError
from graphdb_provider.logging import log_http_request, log_http_response


class HTTPTransport:
    """
    HTTP transport layer bound to one GraphDB server.

    Handles:
    - HTTP Basic credentials on every request (empty values are still sent)
    - JSON and multipart request bodies
    - Wrapping network failures into TransportError
    - Status checking and JSON decoding into typed exceptions
    """

    def __init__(
        self,
        config: ConnectionConfig,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            config: Connection configuration (host, port, credentials)
            http_transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.config = config
        self.base_url = config.base_url

        self._client = httpx.Client(
            base_url=self.base_url,
            auth=httpx.BasicAuth(config.username, config.password),
            transport=http_transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        files: dict[str, Any] | None = None,
        operation: str | None = None,
    ) -> httpx.Response:
        """
        Issue a single request against the REST API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Resource path relative to /rest/ (e.g., "repositories")
            json: JSON body. Every request except multipart ones carries
                Content-Type: application/json
            files: Multipart form parts, sent as multipart/form-data
            operation: Human readable operation name for error messages

        Returns:
            The fully read httpx.Response

        Raises:
            TransportError: If the server cannot be reached
        """
        url = f"{self.base_url}{path}"
        # httpx supplies the multipart boundary itself
        headers = {"Content-Type": "application/json"} if files is None else {}
        log_http_request(
            method, url, headers=headers, body=json if isinstance(json, dict) else None
        )

        started = time.monotonic()
        try:
            response = self._client.request(
                method, path, json=json, files=files, headers=headers
            )
        except httpx.RequestError as e:
            raise TransportError(
                f"Failed to {operation or method + ' ' + path}: {e}", operation
            ) from e

        log_http_response(
            response.status_code, url, elapsed_ms=(time.monotonic() - started) * 1000
        )
        return response

    def expect_status(
        self,
        response: httpx.Response,
        expected: int,
        operation: str,
        identifier: str | None = None,
    ) -> None:
        """
        Check a response status.

        Raises:
            UnexpectedStatusError: With the response body verbatim when the status differs
        """
        if response.status_code != expected:
            raise UnexpectedStatusError(
                response.status_code, response.text, operation, identifier
            )

    def decode(
        self,
        response: httpx.Response,
        operation: str,
        identifier: str | None = None,
    ) -> Any:
        """
        Parse a JSON response body.

        Raises:
            DecodeError: If the body is not valid JSON or not valid text
        """
        try:
            return response.json()
        except ValueError as e:  # JSONDecodeError and UnicodeDecodeError
            target = f" {identifier}" if identifier else ""
            raise DecodeError(
                f"Failed to {operation}{target}. Malformed response: {e}",
                operation,
                identifier,
            ) from e
