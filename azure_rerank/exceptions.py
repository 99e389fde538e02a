"""Adapter exception hierarchy.

All custom exceptions inherit from RerankAdapterError.
Each exception has an error code for structured error handling.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # General errors (1xxx)
    INTERNAL_ERROR = "RRK-1000"
    CONFIGURATION_ERROR = "RRK-1001"

    # Rerank service errors (2xxx)
    UPSTREAM_REQUEST_FAILED = "RRK-2000"
    MALFORMED_RESPONSE = "RRK-2001"
    INDEX_OUT_OF_RANGE = "RRK-2002"

    # Transport errors (3xxx)
    TRANSPORT_ERROR = "RRK-3000"
    TRANSPORT_TIMEOUT = "RRK-3001"


class RerankAdapterError(Exception):
    """Base exception for all adapter errors.

    Attributes:
        message: Human-readable error message.
        code: Structured error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for host error reporting."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details,
            }
        }


class ConfigurationError(RerankAdapterError):
    """Missing endpoint, missing secret or unsupported auth mode."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class UpstreamRequestFailed(RerankAdapterError):
    """The rerank call failed at the transport level.

    Attributes:
        status_code: Upstream HTTP status, if one was received.
        upstream_message: Message reported by the transport.
    """

    def __init__(
        self,
        upstream_message: str,
        status_code: int | None = None,
    ) -> None:
        self.status_code = status_code
        self.upstream_message = upstream_message
        status = f" ({status_code})" if status_code is not None else ""
        super().__init__(
            f"Rerank request failed{status}: {upstream_message}",
            ErrorCode.UPSTREAM_REQUEST_FAILED,
            {"status_code": status_code, "upstream_message": upstream_message},
        )


class MalformedResponse(RerankAdapterError):
    """The rerank service reply does not have the expected shape."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.MALFORMED_RESPONSE, details)


class IndexOutOfRange(RerankAdapterError):
    """A result references a document position absent from the input."""

    def __init__(self, index: int, document_count: int) -> None:
        self.index = index
        self.document_count = document_count
        super().__init__(
            f"Received index {index} not present in provided documents",
            ErrorCode.INDEX_OUT_OF_RANGE,
            {"index": index, "document_count": document_count},
        )


class TransportError(RerankAdapterError):
    """HTTP transport error.

    Attributes:
        status_code: HTTP status of the failed response, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: ErrorCode = ErrorCode.TRANSPORT_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, code, details)
