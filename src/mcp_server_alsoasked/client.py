"""HTTP client for the AlsoAsked REST API."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .config import APP_VERSION, ApiSettings
from .exceptions import AlsoAskedError, APIConnectionError, APIHTTPError, APIResponseError
from .models import Account, SearchRequest, SearchResponse
from .utils import mask_api_key

logger = logging.getLogger(__name__)

USER_AGENT = f"mcp-server-alsoasked/{APP_VERSION}"


class AlsoAskedClient:
    """Issues exactly one HTTP request per operation; no retries, no caching.

    Args:
        settings: Immutable API settings holding the key, base URL and timeout.
        transport: Optional httpx transport, used by tests to mock the API.
    """

    def __init__(self, settings: ApiSettings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        api_key = settings.get_api_key()
        if not api_key:
            raise AlsoAskedError("ALSOASKED_API_KEY environment variable is required")
        self._settings = settings
        self._api_key = api_key
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.base_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "X-Api-Key": self._api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def _request(self, method: str, endpoint: str, payload: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        logger.info(f"Making API request to: {method} {url}")
        logger.debug(f"X-Api-Key header: {mask_api_key(self._api_key)}")

        try:
            async with httpx.AsyncClient(timeout=self._settings.timeout, transport=self._transport) as client:
                response = await client.request(method, url, headers=self._headers(), json=payload)
        except httpx.TimeoutException as e:
            logger.error(f"API request timed out: {url}")
            raise APIConnectionError(f"AlsoAsked API request timed out after {self._settings.timeout}s: {url}") from e
        except httpx.HTTPError as e:
            logger.error(f"API request failed: {e}")
            raise APIConnectionError(f"AlsoAsked API request failed: {e}") from e

        if not response.is_success:
            logger.error(f"API request failed: {response.status_code} {response.reason_phrase}")
            raise APIHTTPError(response.status_code, response.reason_phrase, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise APIResponseError(f"AlsoAsked API returned a non-JSON response from {endpoint}") from e

    async def search(self, request: SearchRequest) -> SearchResponse:
        """Run ``POST /search`` and return the parsed response.

        Raises:
            APIHTTPError: non-2xx status.
            APIResponseError: ``status`` other than ``"success"`` or an unexpected body.
            APIConnectionError: network failure or timeout.
        """
        data = await self._request("POST", "/search", payload=request.to_payload())

        if not isinstance(data, dict) or data.get("status") != "success":
            message = data.get("message") if isinstance(data, dict) else None
            raise APIResponseError(f"Search failed: {message or 'Unknown error'}")

        try:
            return SearchResponse.model_validate(data)
        except ValidationError as e:
            raise APIResponseError(f"Unexpected search response from AlsoAsked API: {e}") from e

    async def get_account(self) -> Account:
        """Run ``GET /account`` and return the account metadata."""
        data = await self._request("GET", "/account")

        try:
            return Account.model_validate(data)
        except ValidationError as e:
            raise APIResponseError(f"Unexpected account response from AlsoAsked API: {e}") from e
