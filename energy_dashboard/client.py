"""Rate limited Home Assistant REST client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from .const import API_PATH, API_TIMEOUT, DEFAULT_ORIGIN, MIN_API_INTERVAL
from .exceptions import (
    DashboardAuthenticationError,
    DashboardConnectionError,
    DashboardDataError,
    DashboardError,
    DashboardHttpStatusError,
    DashboardTimeoutError,
    DashboardValidationError,
)
from .models import Configuration
from .validators import is_secure_url

_LOGGER = logging.getLogger(__name__)


class HomeAssistantClient:
    """Client for the Home Assistant REST API."""

    def __init__(
        self,
        config: Configuration,
        websession: aiohttp.ClientSession | None = None,
        *,
        origin: str = DEFAULT_ORIGIN,
        request_timeout: float = API_TIMEOUT,
        min_request_interval: float = MIN_API_INTERVAL,
    ) -> None:
        """Initialize the client.

        Args:
            config: Live configuration, read on every request so changes apply immediately.
            websession: Optional aiohttp ClientSession. If not provided, one will be created.
            origin: Base URL used when the configuration has no server URL.
            request_timeout: Seconds before a request is aborted.
            min_request_interval: Minimum seconds between two dispatched requests.
        """
        if not origin.startswith("http"):
            origin = f"http://{origin}"
        self.config = config
        self._origin = origin
        self._websession = websession
        self._own_session = websession is None
        self._request_timeout = request_timeout
        self._min_request_interval = min_request_interval
        self._last_request: float | None = None
        self._warned_url: str | None = None

    @property
    def base_url(self) -> str:
        """Base URL requests are sent to."""
        return (self.config.server_url or self._origin).rstrip("/")

    async def close_connection(self) -> None:
        """Close the connection and clean up resources."""
        if self._own_session and self._websession:
            await self._websession.close()
            self._websession = None

    async def _ensure_session(self) -> None:
        """Ensure a websession exists."""
        if self._websession is None:
            self._websession = aiohttp.ClientSession()
            self._own_session = True

    async def __aenter__(self) -> HomeAssistantClient:
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close_connection()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.access_token}",
            "Content-Type": "application/json",
        }

    def _check_secure(self) -> None:
        server_url = self.config.server_url
        if server_url != self._warned_url and not is_secure_url(server_url):
            _LOGGER.warning(
                "Server URL %s is not HTTPS, the access token is sent unencrypted", server_url
            )
        self._warned_url = server_url

    async def _wait_for_slot(self) -> None:
        """Wait until this request may be dispatched.

        The slot is reserved before sleeping, so concurrent callers line up
        at least ``min_request_interval`` apart without blocking each other.
        """
        loop = asyncio.get_running_loop()
        now = loop.time()
        slot = now
        if self._last_request is not None:
            slot = max(now, self._last_request + self._min_request_interval)
        self._last_request = slot
        if (delay := slot - now) > 0:
            _LOGGER.debug("Rate limited, waiting %.3f s", delay)
            await asyncio.sleep(delay)

    async def request(self, endpoint: str) -> Any:
        """GET an endpoint below /api/ and return the decoded JSON body.

        Args:
            endpoint: Path relative to /api/, may carry a query string.

        Raises:
            DashboardValidationError: The endpoint is empty, not a string or contains "..".
            DashboardHttpStatusError: Home Assistant answered with a non-success status.
            DashboardTimeoutError: No answer within the request timeout.
            DashboardConnectionError: The server could not be reached.
            DashboardDataError: The body is not valid JSON.
        """
        if not endpoint or not isinstance(endpoint, str) or ".." in endpoint:
            raise DashboardValidationError("Invalid endpoint")

        await self._ensure_session()
        assert self._websession is not None
        self._check_secure()
        await self._wait_for_slot()

        url = f"{self.base_url}{API_PATH}{endpoint}"
        _LOGGER.debug("GET %s", url)
        try:
            async with asyncio.timeout(self._request_timeout):
                async with self._websession.get(url, headers=self._headers()) as response:
                    if response.status in (401, 403):
                        raise DashboardAuthenticationError(response.status, response.reason)
                    if not 200 <= response.status < 300:
                        raise DashboardHttpStatusError(response.status, response.reason)
                    data = await response.json(content_type=None)
        except DashboardError:
            raise
        except TimeoutError as err:
            raise DashboardTimeoutError(
                "Request timeout - Home Assistant is not responding"
            ) from err
        except aiohttp.ClientError as err:
            raise DashboardConnectionError(f"Failed to connect to Home Assistant: {err}") from err
        except ValueError as err:
            raise DashboardDataError(f"Failed to parse response from {endpoint}: {err}") from err
        _LOGGER.debug("Response from %s: %s", endpoint, data)
        return data
