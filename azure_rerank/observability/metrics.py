"""Prometheus metrics for rerank calls.

One observation per outbound call: latency, outcome, and how many
documents went out and came back.
"""

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

RERANK_REQUEST_DURATION = Histogram(
    "rerank_request_duration_seconds",
    "Rerank request duration in seconds",
    ["model", "status"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)

RERANK_REQUEST_TOTAL = Counter(
    "rerank_requests_total",
    "Total rerank requests",
    ["model", "status"],
)

RERANK_DOCUMENTS_SUBMITTED = Histogram(
    "rerank_documents_submitted",
    "Number of documents sent per rerank request",
    ["model"],
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000],
)

RERANK_RESULTS_RETURNED = Histogram(
    "rerank_results_returned",
    "Number of reranked documents returned to the caller",
    ["model"],
    buckets=[0, 1, 2, 3, 5, 10, 20, 50, 100],
)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST


def track_rerank_request(
    model: str,
    duration: float,
    documents_submitted: int,
    results_returned: int = 0,
    success: bool = True,
) -> None:
    """Track rerank request metrics.

    Args:
        model: Rerank model name.
        duration: Request duration in seconds.
        documents_submitted: Number of documents in the request.
        results_returned: Number of documents handed back to the caller.
        success: Whether the call produced results.
    """
    status = "success" if success else "error"

    RERANK_REQUEST_DURATION.labels(model=model, status=status).observe(duration)
    RERANK_REQUEST_TOTAL.labels(model=model, status=status).inc()
    RERANK_DOCUMENTS_SUBMITTED.labels(model=model).observe(documents_submitted)

    if success:
        RERANK_RESULTS_RETURNED.labels(model=model).observe(results_returned)
