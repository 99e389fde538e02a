"""Rerank data models.

Documents stay plain mappings so caller-defined fields survive the round
trip untouched; only the wire payloads are modelled.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt

# Keys of a structured document.
CONTENT_KEY = "pageContent"
METADATA_KEY = "metadata"
SCORE_KEY = "relevance_score"

DocumentInput = str | Mapping[str, Any]
RerankedDocument = dict[str, Any]


class RerankRequest(BaseModel):
    """Body sent to the rerank endpoint.

    Attributes:
        query: Query the documents are ranked against.
        documents: Document texts, in input order.
        top_n: Maximum number of results to return.
        model: Rerank model identifier.
    """

    query: str = Field(description="Query text")
    documents: list[str] = Field(description="Document texts in input order")
    top_n: int = Field(ge=0, description="Maximum number of results")
    model: str = Field(description="Rerank model identifier")


class RerankResult(BaseModel):
    """A single entry of the service's ``results`` list.

    The score is passed through without validation. Any echoed
    ``document`` is kept on the model but never merged into the output.
    """

    index: StrictInt = Field(description="Position in RerankRequest.documents")
    relevance_score: Any = Field(default=None, description="Score from the service")
    document: Any = Field(default=None, description="Echoed input, ignored")


class RerankResponse(BaseModel):
    """Reply body from the rerank endpoint.

    Entries are validated one by one after truncation, so a bad entry
    past ``top_n`` never fails the call.
    """

    id: str | None = Field(default=None, description="Request id assigned by the service")
    results: list[Any] = Field(strict=True, description="Ranked results, most relevant first")


class TransportRequest(BaseModel):
    """What a transport needs to issue the HTTP call."""

    method: str = Field(default="POST", description="HTTP method")
    url: str = Field(description="Complete endpoint URL")
    headers: dict[str, str] = Field(default_factory=dict, description="Request headers")
    body: dict[str, Any] = Field(description="JSON body")


Transport = Callable[[TransportRequest], Awaitable[Any]]


class RerankOptions(BaseModel):
    """Per-reranker call configuration.

    Attributes:
        endpoint_url: Complete rerank URL.
        headers: Extra headers, usually the resolved auth header.
        model: Rerank model identifier.
        top_n: Maximum number of documents returned.
        transport: Async callable that performs the HTTP call and returns
            the parsed JSON body, or raises.
    """

    model_config = ConfigDict(frozen=True)

    endpoint_url: str = Field(description="Complete rerank URL")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra headers")
    model: str = Field(default="rerank-v3.5", description="Rerank model identifier")
    top_n: int = Field(default=3, ge=0, description="Maximum documents returned")
    transport: Transport = Field(description="Performs the HTTP call")
