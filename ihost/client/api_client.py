"""
HTTP client for the iHost API
"""
import logging
from typing import Any, Callable, Optional

import httpx

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


class ApiError(Exception):
    """Non-2xx response from the API, carrying its {error, message} body."""

    def __init__(self, status_code: int, error: str, message: str):
        super().__init__(f"{status_code} {error}: {message}")
        self.status_code = status_code
        self.error = error
        self.message = message


class ApiClient:
    """
    Synchronous API client.

    `token_provider` returns the current Firebase ID token (or None) and is
    called for every request, so refreshed tokens are picked up.
    """

    def __init__(
        self,
        base_url: str,
        token_provider: Optional[TokenProvider] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.token_provider = token_provider
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def _headers(self):
        token = self.token_provider() if self.token_provider else None
        return {"Authorization": f"Bearer {token}"} if token else {}

    def request(self, method: str, path: str, **kwargs) -> Any:
        """Send a request and return the decoded JSON body, raising ApiError on failure."""
        response = self._client.request(method, path, headers=self._headers(), **kwargs)
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            raise ApiError(
                response.status_code,
                body.get("error", "HTTP_ERROR"),
                body.get("message", response.text),
            )
        if not response.content:
            return None
        return response.json()

    def get(self, path: str, **kwargs) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> Any:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> Any:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request("DELETE", path, **kwargs)

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
