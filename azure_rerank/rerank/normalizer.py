"""Turns caller documents into the rerank request body."""

import json
from collections.abc import Mapping, Sequence

from azure_rerank.rerank.models import CONTENT_KEY, DocumentInput, RerankRequest


def document_text(document: DocumentInput) -> str:
    """Get the text sent to the service for one document.

    Plain strings pass through. Structured documents use their
    ``pageContent`` when it is a non-empty string, otherwise the whole
    mapping is serialized as canonical JSON.
    """
    if isinstance(document, str):
        return document

    content = document.get(CONTENT_KEY)
    if isinstance(content, str) and content:
        return content

    return json.dumps(_canonical(document), sort_keys=True, ensure_ascii=False)


def _canonical_key(key: object) -> str:
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    return str(key)


def _canonical(value: object) -> object:
    """Rewrite a value into plain JSON types with string keys only."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Mapping):
        return {_canonical_key(key): _canonical(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted((_canonical(item) for item in value), key=repr)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return [_canonical(item) for item in value]
    return str(value)


def normalize_documents(documents: Sequence[DocumentInput]) -> list[str]:
    """Flatten documents into the text list sent to the service.

    Args:
        documents: Plain strings or structured documents.

    Returns:
        One text per document, in input order.
    """
    return [document_text(document) for document in documents]


def build_request(
    query: str,
    documents: Sequence[DocumentInput],
    top_n: int,
    model: str,
) -> RerankRequest:
    """Assemble the rerank request body.

    Args:
        query: Query text.
        documents: Documents to rank.
        top_n: Maximum number of results to ask for.
        model: Rerank model identifier.

    Returns:
        RerankRequest ready to serialize.
    """
    return RerankRequest(
        query=query,
        documents=normalize_documents(documents),
        top_n=top_n,
        model=model,
    )
