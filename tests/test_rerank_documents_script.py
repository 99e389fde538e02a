"""Tests for the rerank_documents helper script."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from scripts.rerank_documents import run_rerank


class TestRunRerank:
    """Tests for run_rerank."""

    @pytest.mark.asyncio
    async def test_reranks_file(self, tmp_path: Path) -> None:
        """Documents are read from the file and handed to the reranker."""
        documents_path = tmp_path / "docs.json"
        documents_path.write_text(json.dumps(["a", {"pageContent": "b"}]))

        reranker = MagicMock()
        reranker.compress_documents = AsyncMock(
            return_value=[{"pageContent": "b", "metadata": {"relevance_score": 0.9}}]
        )
        reranker.__aenter__ = AsyncMock(return_value=reranker)
        reranker.__aexit__ = AsyncMock(return_value=None)

        with patch(
            "scripts.rerank_documents.create_reranker", return_value=reranker
        ) as create:
            result = await run_rerank(documents_path, "query", top_n=1)

        assert result == [{"pageContent": "b", "metadata": {"relevance_score": 0.9}}]
        reranker.compress_documents.assert_awaited_once_with(
            ["a", {"pageContent": "b"}], "query"
        )
        assert create.call_args.kwargs["settings"].rerank.top_n == 1
        reranker.__aexit__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rejects_non_list(self, tmp_path: Path) -> None:
        """The documents file must hold a list."""
        documents_path = tmp_path / "docs.json"
        documents_path.write_text(json.dumps({"pageContent": "a"}))

        with pytest.raises(ValueError, match="JSON list"):
            await run_rerank(documents_path, "query")
