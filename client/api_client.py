"""Thin async HTTP client for the LifeSync API."""

from typing import Any, Optional

import httpx

from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API, carrying the server's error envelope."""

    def __init__(self, status_code: int, error: str, details: Any = None):
        super().__init__(f"{status_code}: {error}")
        self.status_code = status_code
        self.error = error
        self.details = details


class ApiClient:
    """Attaches the bearer token and unwraps JSON responses."""

    def __init__(
        self,
        token: Optional[str] = None,
        http: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
    ):
        self.token = token
        self.http = http or httpx.AsyncClient(base_url=base_url or settings.api_base_url, timeout=10.0)

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def request(self, method: str, path: str, **kwargs) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            ApiError: the server answered with a non-2xx status
            httpx.HTTPError: the request never got a response
        """
        response = await self.http.request(method, path, headers=self._headers(), **kwargs)
        if response.is_success:
            return response.json() if response.content else None

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        error = body.get("error") or response.reason_phrase or "Request failed"
        logger.warning(f"{method} {path} failed with {response.status_code}: {error}")
        raise ApiError(response.status_code, error, body.get("details"))

    async def aclose(self) -> None:
        await self.http.aclose()
