"""
HTTP transport for the accounts API.

This module provides a small synchronous HTTP client built on httpx that:
- Resolves the base URL once at construction
- Sends JSON:API vendor content-type headers
- Returns raw response bytes for 2xx responses
- Converts non-2xx responses and network failures into client exceptions

It deliberately does not retry, cache or manage credentials.
"""

from typing import Dict, Optional, Union
import logging

import httpx

from accounts_client.config import AccountsClientSettings, get_settings
from accounts_client.exceptions import (
    TransportError,
    ConnectionError as ClientConnectionError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)

logger = logging.getLogger(__name__)

JSON_API_MEDIA_TYPE = "application/vnd.api+json"

Body = Union[bytes, str]


class HTTPClient:
    """
    Synchronous HTTP client for accounts API requests.

    This client handles:
    - Base URL management
    - Request header construction
    - Status code classification and error conversion
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.Client] = None,
        settings: Optional[AccountsClientSettings] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: Base URL for the API. Falls back to settings when omitted.
            timeout: Request timeout in seconds. Falls back to settings when omitted.
            headers: Additional headers to include in all requests
            client: Pre-configured httpx.Client to send requests with.
                It is owned by the caller and never closed here.
            settings: Settings to resolve defaults from (default: get_settings())
        """
        settings = settings or get_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self._default_headers = headers or {}
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if not self._owns_client:
            # Never swap out a caller-supplied client
            if self._client.is_closed:
                raise TransportError("Injected HTTP client is closed")
            return self._client
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=httpx.Timeout(self.timeout))
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client if it was created here."""
        if self._owns_client and self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HTTPClient":
        self._get_client()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _build_headers(self) -> Dict[str, str]:
        """Build request headers."""
        return {
            "Content-Type": JSON_API_MEDIA_TYPE,
            "Accept": JSON_API_MEDIA_TYPE,
            **self._default_headers,
        }

    def _build_url(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert a non-2xx response to the appropriate exception."""
        status_code = response.status_code
        body = response.text

        # The body is diagnostic only and may not be JSON at all
        try:
            error_data = response.json()
            detail = (
                error_data.get("error_message")
                or error_data.get("detail")
                or error_data.get("message")
                or str(error_data)
            )
            error_code = error_data.get("error_code")
            if error_code is not None:
                error_code = str(error_code)
        except Exception:
            detail = body or f"HTTP {status_code}"
            error_code = None

        logger.warning(
            "%s %s failed with HTTP %s",
            response.request.method,
            response.request.url,
            status_code,
        )
        raise exception_from_response(
            status_code,
            detail,
            error_code=error_code,
            body=body,
        )

    def perform(
        self,
        method: str,
        path: str,
        body: Optional[Body] = None,
    ) -> bytes:
        """
        Make one HTTP request and return the raw response body.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: Request path, including any query string
            body: Serialized request body

        Returns:
            Response body bytes for a 2xx status. May be empty.

        Raises:
            RemoteError: On a non-2xx status
            TimeoutError: On request timeout
            ConnectionError: On connection failures
            TransportError: On any other failure to send or receive
        """
        client = self._get_client()
        url = self._build_url(path)

        logger.debug("%s %s", method, url)
        try:
            response = client.request(
                method=method,
                url=url,
                content=body,
                headers=self._build_headers(),
                follow_redirects=True,
            )
        except httpx.TimeoutException as e:
            logger.warning("%s %s timed out: %s", method, url, e)
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            logger.warning("%s %s connection failed: %s", method, url, e)
            raise ClientConnectionError(f"Connection failed: {e}") from e
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"Request failed: {e}") from e

        logger.debug("%s %s -> HTTP %s", method, url, response.status_code)

        if not response.is_success:
            self._handle_error_response(response)

        return response.content

    def get(self, path: str) -> bytes:
        """Make a GET request."""
        return self.perform("GET", path)

    def post(self, path: str, body: Optional[Body] = None) -> bytes:
        """Make a POST request."""
        return self.perform("POST", path, body)

    def delete(self, path: str) -> bytes:
        """Make a DELETE request."""
        return self.perform("DELETE", path)
