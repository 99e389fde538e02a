#!/usr/bin/env python
"""Rerank a JSON file of documents against a query.

Usage:
    python -m scripts.rerank_documents --documents docs.json --query "what is x" --top-n 5

The documents file holds a JSON list of strings or objects with a
``pageContent`` field. Endpoint and credentials come from the RERANK_*
environment variables.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from azure_rerank.config import get_settings
from azure_rerank.exceptions import RerankAdapterError
from azure_rerank.factory import create_reranker
from azure_rerank.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


async def run_rerank(
    documents_path: Path,
    query: str,
    top_n: int | None = None,
) -> list[dict]:
    """Rerank the documents in a file.

    Args:
        documents_path: Path to a JSON list of documents.
        query: Query text.
        top_n: Optional override of RERANK_TOP_N.

    Returns:
        Reranked documents.
    """
    documents = json.loads(documents_path.read_text(encoding="utf-8"))
    if not isinstance(documents, list):
        raise ValueError(f"{documents_path} must contain a JSON list")

    settings = get_settings()
    if top_n is not None:
        settings = settings.model_copy(
            update={"rerank": settings.rerank.model_copy(update={"top_n": top_n})}
        )

    async with create_reranker(settings=settings) as reranker:
        logger.info("Reranking documents", extra={"document_count": len(documents)})
        return await reranker.compress_documents(documents, query)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Rerank documents with Cohere Rerank on Azure"
    )
    parser.add_argument(
        "--documents",
        type=Path,
        required=True,
        help="Path to a JSON list of documents",
    )
    parser.add_argument(
        "--query",
        required=True,
        help="Query to rank the documents against",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Maximum number of documents to return (default: RERANK_TOP_N)",
    )

    args = parser.parse_args()
    setup_logging()

    if not args.documents.exists():
        logger.error("Documents file not found", extra={"path": str(args.documents)})
        return 2

    try:
        reranked = asyncio.run(run_rerank(args.documents, args.query, args.top_n))
    except RerankAdapterError as e:
        logger.error(e.message, extra={"code": e.code.value})
        return 1

    print(json.dumps(reranked, indent=2, ensure_ascii=False, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
