# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3
"""
Cupom Verde HTTP Client

Thin wrapper over a requests.Session bound to one base URL:
- Fixed headers (API key) on every request
- Request timeout handling
- Request/response debug logging

Requests are never retried; the session keeps requests' default adapter.
"""

from __future__ import annotations

from typing import Any

import requests

from cupomverde.utils.config import ClientConfig
from cupomverde.utils.logging import get_logger

logger = get_logger("http")


class HTTPClient:
    """
    HTTP client for one Cupom Verde configuration.

    Example:
        client = HTTPClient(ClientConfig(api_key, "https://api.cupomverde.com.br/api/v2"))
        response = client.post("/integracao/upload", json=data)
    """

    def __init__(self, config: ClientConfig, session: requests.Session | None = None):
        """
        Initialize HTTP client.

        Args:
            config: Base URL, API key header and timeout
            session: Session to use instead of a new one
        """
        self.base_url = config.base_url
        self.timeout = config.timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(config.headers)

    def request(self, method: str, path: str, **kwargs) -> requests.Response:
        """
        Make a request and return the response, whatever its status.

        Args:
            method: HTTP method
            path: URL path (appended to base_url)
            **kwargs: Additional requests parameters

        Returns:
            requests.Response

        Raises:
            requests.RequestException: On network failure or timeout
        """
        url = f"{self.base_url}{path}"

        kwargs.setdefault("timeout", self.timeout)
        kwargs.setdefault("verify", True)

        response = self._session.request(method, url, **kwargs)
        self._log_request(method, url, response.status_code)
        return response

    def post(self, path: str, **kwargs) -> requests.Response:
        """POST request."""
        return self.request("POST", path, **kwargs)

    def close(self):
        """Close the underlying session."""
        self._session.close()

    def _log_request(self, method: str, url: str, status: Any):
        logger.debug("%s %s -> %s", method, url, status)
