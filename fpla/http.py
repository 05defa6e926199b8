"""
HTTP client for the Fantasy Premier League API.

Every request is a single GET: there is no retry policy, so one failed
attempt is reported as one failure.
"""

import logging
from functools import lru_cache
from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import Settings
from .errors import DecodeError, StatusError, TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    """Build (once per shape) the validator that decodes a body into shape."""
    return TypeAdapter(shape)


class FplHTTP:
    """HTTP client for the Fantasy Premier League API."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings

        # One pooled client for the lifetime of the API wrapper
        self.client = httpx.Client(
            timeout=httpx.Timeout(settings.timeout),
            limits=httpx.Limits(
                max_connections=settings.max_connections,
                max_keepalive_connections=max(1, settings.max_connections // 2),
            ),
            headers=self._get_headers(),
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers for API requests."""
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }

    def url_for(self, path: str) -> str:
        """Absolute URL for an endpoint path."""
        return self.settings.url_for(path)

    def endpoint(self, path: str, params: Optional[dict[str, Any]] = None) -> str:
        """Absolute URL, query string included, that labels a request."""
        url = self.url_for(path)
        return str(httpx.URL(url, params=params)) if params else url

    def get(
        self, path: str, params: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        """
        Issue one GET request and return the 200 response.

        Args:
            path: API endpoint path (without base URL)
            params: Query parameters

        Returns:
            The raw response

        Raises:
            TransportError: no response was received
            StatusError: the status code was not 200
        """
        url = self.url_for(path)
        endpoint = self.endpoint(path, params)

        logger.debug("GET %s", endpoint)
        try:
            response = self.client.get(url, params=params)
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", endpoint, e)
            raise TransportError(endpoint, str(e)) from e

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Request to %s returned status %s", endpoint, response.status_code
            )
            raise StatusError(endpoint, response.status_code)

        return response

    def fetch(
        self,
        path: str,
        shape: type[T],
        params: Optional[dict[str, Any]] = None,
    ) -> T:
        """
        GET an endpoint and decode its JSON body into shape.

        Args:
            path: API endpoint path (without base URL)
            shape: Model class or generic alias (e.g. list[Fixture]) to decode into
            params: Query parameters

        Returns:
            The decoded value, without further validation

        Raises:
            TransportError, StatusError, DecodeError
        """
        response = self.get(path, params)

        try:
            return _adapter(shape).validate_json(response.content)
        except ValidationError as e:
            endpoint = self.endpoint(path, params)
            logger.warning("Could not decode response from %s: %s", endpoint, e)
            raise DecodeError(endpoint, str(e)) from e
