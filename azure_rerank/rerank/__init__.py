"""Rerank request building, response mapping and orchestration."""

from azure_rerank.rerank.mapper import map_results
from azure_rerank.rerank.models import (
    DocumentInput,
    RerankedDocument,
    RerankOptions,
    RerankRequest,
    RerankResponse,
    RerankResult,
    Transport,
    TransportRequest,
)
from azure_rerank.rerank.normalizer import build_request, normalize_documents
from azure_rerank.rerank.service import (
    AzureCohereReranker,
    LoggingReranker,
    Reranker,
    rerank,
)

__all__ = [
    "AzureCohereReranker",
    "DocumentInput",
    "LoggingReranker",
    "RerankOptions",
    "RerankRequest",
    "RerankResponse",
    "RerankResult",
    "RerankedDocument",
    "Reranker",
    "Transport",
    "TransportRequest",
    "build_request",
    "map_results",
    "normalize_documents",
    "rerank",
]
