"""Reranker interface and the Azure Cohere implementation."""

import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from azure_rerank.exceptions import RerankAdapterError, UpstreamRequestFailed
from azure_rerank.logging_config import get_logger
from azure_rerank.observability.metrics import track_rerank_request
from azure_rerank.rerank.mapper import map_results
from azure_rerank.rerank.models import (
    DocumentInput,
    RerankedDocument,
    RerankOptions,
    TransportRequest,
)
from azure_rerank.rerank.normalizer import build_request

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _error_status(error: BaseException) -> int | None:
    """Read the upstream HTTP status off a transport error, if it has one."""
    for attr in ("status_code", "status"):
        status = getattr(error, attr, None)
        if isinstance(status, int) and not isinstance(status, bool):
            return status

    response = getattr(error, "response", None)
    status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else None


def _error_message(error: BaseException) -> str:
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error) or "Unknown error"


async def rerank(
    documents: Sequence[DocumentInput],
    query: str,
    options: RerankOptions,
) -> list[RerankedDocument]:
    """Rerank documents against a query with one call to the rerank service.

    An empty document list returns immediately without calling the
    transport.

    Args:
        documents: Plain strings or structured documents.
        query: Query text.
        options: Endpoint, headers, model, top_n and transport.

    Returns:
        Up to ``top_n`` documents in service order, each carrying
        ``metadata.relevance_score``.

    Raises:
        UpstreamRequestFailed: If the transport raises.
        MalformedResponse: If the reply has no usable results list.
        IndexOutOfRange: If a result points past the input documents.
    """
    if not documents:
        return []

    request = build_request(
        query=query,
        documents=documents,
        top_n=options.top_n,
        model=options.model,
    )

    logger.debug(
        "Sending rerank request",
        extra={"document_count": len(documents), "top_n": options.top_n},
    )

    start = time.perf_counter()
    try:
        response: Any = await options.transport(
            TransportRequest(
                method="POST",
                url=options.endpoint_url,
                headers={**JSON_HEADERS, **options.headers},
                body=request.model_dump(),
            )
        )
    except Exception as e:
        status = _error_status(e)
        message = _error_message(e)
        logger.error(
            "Rerank request failed: %s",
            message,
            extra={"status": status, "url": options.endpoint_url},
        )
        track_rerank_request(
            model=options.model,
            duration=time.perf_counter() - start,
            documents_submitted=len(documents),
            success=False,
        )
        raise UpstreamRequestFailed(message, status_code=status) from e

    duration = time.perf_counter() - start
    try:
        reranked = map_results(response, documents, options.top_n)
    except RerankAdapterError:
        track_rerank_request(
            model=options.model,
            duration=duration,
            documents_submitted=len(documents),
            success=False,
        )
        raise

    track_rerank_request(
        model=options.model,
        duration=duration,
        documents_submitted=len(documents),
        results_returned=len(reranked),
    )
    return reranked


class Reranker(ABC):
    """Abstract base class for rerankers.

    Defines the single operation hosts call to reorder documents.
    """

    @abstractmethod
    async def compress_documents(
        self,
        documents: Sequence[DocumentInput],
        query: str,
    ) -> list[RerankedDocument]:
        """Reorder and truncate documents by relevance to a query.

        Args:
            documents: Plain strings or structured documents.
            query: Query text.

        Returns:
            Reranked documents with ``metadata.relevance_score`` set.
        """
        ...

    async def close(self) -> None:
        """Release resources held by the reranker."""

    async def __aenter__(self) -> "Reranker":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


class AzureCohereReranker(Reranker):
    """Reranker backed by Cohere Rerank hosted on Azure AI Foundry."""

    def __init__(
        self,
        options: RerankOptions,
        owns_transport: bool = False,
    ) -> None:
        """Initialize the reranker.

        Args:
            options: Endpoint, headers, model, top_n and transport.
            owns_transport: Close the transport when the reranker is closed.
        """
        self._options = options
        self._owns_transport = owns_transport

    @property
    def model_name(self) -> str:
        """Get the model name."""
        return self._options.model

    @property
    def top_n(self) -> int:
        return self._options.top_n

    async def compress_documents(
        self,
        documents: Sequence[DocumentInput],
        query: str,
    ) -> list[RerankedDocument]:
        return await rerank(documents, query, self._options)

    async def close(self) -> None:
        """Close the transport if we own it."""
        if not self._owns_transport:
            return
        close = getattr(self._options.transport, "close", None)
        if close is not None:
            await close()
        self._owns_transport = False


class LoggingReranker(Reranker):
    """Logs each call at debug level before delegating to another reranker."""

    def __init__(self, inner: Reranker) -> None:
        self._inner = inner

    @property
    def inner(self) -> Reranker:
        return self._inner

    async def compress_documents(
        self,
        documents: Sequence[DocumentInput],
        query: str,
    ) -> list[RerankedDocument]:
        logger.debug("%s.compress_documents", type(self._inner).__name__)
        return await self._inner.compress_documents(documents, query)

    async def close(self) -> None:
        await self._inner.close()
