"""Maps a rerank service reply back onto the caller's documents."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from azure_rerank.exceptions import IndexOutOfRange, MalformedResponse
from azure_rerank.rerank.models import (
    CONTENT_KEY,
    METADATA_KEY,
    SCORE_KEY,
    DocumentInput,
    RerankedDocument,
    RerankResponse,
    RerankResult,
)


def _parse_response(response: Any) -> RerankResponse:
    try:
        return RerankResponse.model_validate(response)
    except ValidationError as e:
        fields = {error["loc"][0] if error["loc"] else "results" for error in e.errors()}
        reason = "missing results" if "results" in fields else "invalid id"
        raise MalformedResponse(
            f"Unexpected response shape from rerank service ({reason})",
            details={"response_type": type(response).__name__},
        ) from e


def _parse_result(entry: Any) -> RerankResult:
    try:
        return RerankResult.model_validate(entry)
    except ValidationError as e:
        raise MalformedResponse(
            "Unexpected response shape from rerank service (missing index)",
            details={"result": repr(entry)[:200]},
        ) from e


def _base_document(original: DocumentInput) -> RerankedDocument:
    if isinstance(original, str):
        return {CONTENT_KEY: original, METADATA_KEY: {}}

    document = dict(original)
    metadata = original.get(METADATA_KEY)
    document[METADATA_KEY] = dict(metadata) if isinstance(metadata, Mapping) else {}
    return document


def map_results(
    response: Any,
    documents: Sequence[DocumentInput],
    top_n: int,
) -> list[RerankedDocument]:
    """Build the reranked documents from a service reply.

    Results are kept in service order and truncated to ``top_n``. Each
    output is a shallow copy of the original document with
    ``relevance_score`` merged into a copied ``metadata`` mapping.
    Repeated indices produce repeated outputs.

    Args:
        response: Parsed JSON body returned by the transport.
        documents: The documents the request was built from.
        top_n: Maximum number of outputs.

    Returns:
        Reranked documents, most relevant first.

    Raises:
        MalformedResponse: If the reply is not a RerankResponse, or an
            entry lacks an integer index.
        IndexOutOfRange: If an index does not reference an input document.
    """
    results = _parse_response(response).results

    reranked: list[RerankedDocument] = []
    for entry in results[: max(top_n, 0)]:
        result = _parse_result(entry)

        if not 0 <= result.index < len(documents):
            raise IndexOutOfRange(result.index, len(documents))

        document = _base_document(documents[result.index])
        document[METADATA_KEY][SCORE_KEY] = result.relevance_score
        reranked.append(document)

    return reranked
