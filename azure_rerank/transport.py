"""Default HTTP transport for the rerank call."""

from typing import Any

import httpx

from azure_rerank.exceptions import ErrorCode, TransportError
from azure_rerank.logging_config import get_logger
from azure_rerank.rerank.models import TransportRequest

logger = get_logger(__name__)


class HTTPXTransport:
    """Issues rerank requests with an ``httpx.AsyncClient``.

    Returns the parsed JSON body. Every failure, including a non-2xx
    status or a body that is not JSON, is raised as TransportError with
    the status code when one was received.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 60.0,
    ) -> None:
        """Initialize the transport.

        Args:
            client: HTTP client. Creates new one if not provided.
            timeout: Timeout for the client this transport creates.
        """
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __call__(self, request: TransportRequest) -> Any:
        client = await self._get_client()

        try:
            response = await client.request(
                request.method,
                request.url,
                json=request.body,
                headers=request.headers,
            )
            response.raise_for_status()

        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request timed out: {e}",
                code=ErrorCode.TRANSPORT_TIMEOUT,
                details={"url": request.url},
            ) from e

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise TransportError(
                _status_message(e.response),
                status_code=status,
                details={"url": request.url},
            ) from e

        except httpx.RequestError as e:
            raise TransportError(
                f"Failed to connect to rerank service: {e}",
                details={"url": request.url},
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                "Rerank service returned a non-JSON body",
                status_code=response.status_code,
                details={"url": request.url},
            ) from e


def _status_message(response: httpx.Response) -> str:
    """Prefer the service's own error message over the bare reason phrase."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        for key in ("message", "detail", "error"):
            value = data.get(key)
            if isinstance(value, dict):
                value = value.get("message")
            if isinstance(value, str) and value:
                return value

    return response.reason_phrase or f"HTTP {response.status_code}"
