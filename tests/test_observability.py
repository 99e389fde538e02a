"""Tests for observability module."""

from prometheus_client import REGISTRY

from azure_rerank.observability.metrics import (
    get_metrics,
    get_metrics_content_type,
    track_rerank_request,
)


class TestMetricsFunctions:
    """Tests for metrics tracking functions."""

    def test_get_metrics_returns_bytes(self) -> None:
        """get_metrics returns bytes."""
        assert isinstance(get_metrics(), bytes)

    def test_content_type(self) -> None:
        """Content type is the Prometheus text format."""
        assert "text/plain" in get_metrics_content_type()

    def test_track_success(self) -> None:
        """Successful requests record duration, counts and results."""
        labels = {"model": "obs-success", "status": "success"}
        before = REGISTRY.get_sample_value("rerank_requests_total", labels) or 0.0

        track_rerank_request(
            model="obs-success",
            duration=0.4,
            documents_submitted=10,
            results_returned=3,
        )

        assert REGISTRY.get_sample_value("rerank_requests_total", labels) == before + 1
        assert (
            REGISTRY.get_sample_value(
                "rerank_results_returned_sum", {"model": "obs-success"}
            )
            == 3.0
        )
        metrics = get_metrics().decode()
        assert "rerank_request_duration_seconds" in metrics
        assert "rerank_documents_submitted" in metrics

    def test_track_failure(self) -> None:
        """Failed requests do not record returned results."""
        track_rerank_request(
            model="obs-failure",
            duration=0.1,
            documents_submitted=2,
            success=False,
        )

        assert (
            REGISTRY.get_sample_value(
                "rerank_requests_total", {"model": "obs-failure", "status": "error"}
            )
            == 1.0
        )
        assert (
            REGISTRY.get_sample_value(
                "rerank_results_returned_count", {"model": "obs-failure"}
            )
            is None
        )
