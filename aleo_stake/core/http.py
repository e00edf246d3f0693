"""
Explorer HTTP client

Thin JSON GET wrapper around httpx. Network errors and non-2xx statuses
raise httpx.HTTPError; a body that is not JSON raises ValueError.
Timeouts are owned here, callers do not retry.
"""

from typing import Any, Optional
import httpx

from aleo_stake.core.config import get_config
from aleo_stake.utils.logger import get_logger

logger = get_logger(__name__)


class ExplorerHTTP:
    """
    Async JSON client for the block explorer.

    Usage:
        async with ExplorerHTTP() as http:
            data = await http.get(url)
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            timeout: Request timeout in seconds (default from config)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        if timeout is None:
            timeout = get_config().http_timeout
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "ExplorerHTTP":
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            headers={"Accept": "application/json"}
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, url: str) -> Any:
        """
        GET a URL and return the decoded JSON body.

        Raises:
            httpx.HTTPError: on transport failure or non-success status
            ValueError: when the body is not valid JSON
        """
        if self._client is None:
            raise RuntimeError("ExplorerHTTP must be used as an async context manager")

        logger.debug(f"GET {url}")
        response = await self._client.get(url)
        response.raise_for_status()
        return response.json()

