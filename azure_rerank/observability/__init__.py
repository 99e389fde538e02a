"""Observability module for metrics."""

from azure_rerank.observability.metrics import (
    get_metrics,
    get_metrics_content_type,
    track_rerank_request,
)

__all__ = [
    "get_metrics",
    "get_metrics_content_type",
    "track_rerank_request",
]
