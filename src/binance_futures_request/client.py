"""Shared async HTTP transport."""

import logging
from types import TracebackType
from typing import Any

import httpx

from binance_futures_request.config import DEFAULT_TIMEOUT
from binance_futures_request.request import PreparedRequest

logger = logging.getLogger(__name__)


class FuturesHttpClient:
    """Async HTTP client for the futures REST API.

    Wraps one pooled ``httpx.AsyncClient``. Construct it once at the process
    entry point and pass it to every :class:`FuturesRequest` that needs it.
    Failures are not retried: transport errors and non-2xx statuses reach the
    caller as ``httpx`` exceptions.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP client.

        Args:
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self._timeout = timeout
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def send(self, request: PreparedRequest) -> Any:
        """Send a prepared request and decode its JSON body.

        Args:
            request: Request produced by RequestBuilder

        Returns:
            Decoded JSON (dict or list)

        Raises:
            httpx.HTTPStatusError: On non-2xx responses
            httpx.HTTPError: On transport failures and timeouts
        """
        response = await self._client.request(
            request.method,
            request.url,
            headers=request.headers,
        )
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError:
            logger.warning(
                f"{request.method} {response.url.path} failed "
                f"with {response.status_code}: {_error_detail(response)}"
            )
            raise
        return response.json()

    async def aclose(self) -> None:
        """Close pooled connections."""
        if not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "FuturesHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def _error_detail(response: httpx.Response) -> str:
    # Exchange errors look like {"code": -2019, "msg": "Margin is insufficient."}
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "code" in body:
        return f"code={body.get('code')} msg={body.get('msg', '')}"
    return response.text
