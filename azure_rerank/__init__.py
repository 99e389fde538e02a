"""Azure Cohere rerank adapter.

Hosts build a reranker with ``create_reranker`` and call
``compress_documents`` on it. Credentials stored as raw mappings go
through ``parse_auth`` first::

    reranker = create_reranker(auth=parse_auth(stored_credentials))

``get_metrics`` and ``get_metrics_content_type`` give the body and
content type for the host's Prometheus scrape endpoint.
"""

__version__ = "0.1.0"

from azure_rerank.auth import AuthStrategy, parse_auth, resolve_connection
from azure_rerank.exceptions import (
    ConfigurationError,
    ErrorCode,
    IndexOutOfRange,
    MalformedResponse,
    RerankAdapterError,
    TransportError,
    UpstreamRequestFailed,
)
from azure_rerank.factory import create_reranker
from azure_rerank.observability.metrics import get_metrics, get_metrics_content_type
from azure_rerank.rerank.service import Reranker, rerank

__all__ = [
    "AuthStrategy",
    "ConfigurationError",
    "ErrorCode",
    "IndexOutOfRange",
    "MalformedResponse",
    "RerankAdapterError",
    "Reranker",
    "TransportError",
    "UpstreamRequestFailed",
    "create_reranker",
    "get_metrics",
    "get_metrics_content_type",
    "parse_auth",
    "rerank",
    "resolve_connection",
]
