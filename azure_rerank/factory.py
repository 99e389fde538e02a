"""Builds a ready-to-use reranker from settings."""

from azure_rerank.auth import AuthStrategy, auth_from_settings, resolve_connection
from azure_rerank.config import Settings, get_settings
from azure_rerank.logging_config import get_logger
from azure_rerank.rerank.models import RerankOptions, Transport
from azure_rerank.rerank.service import AzureCohereReranker, LoggingReranker, Reranker
from azure_rerank.transport import HTTPXTransport

logger = get_logger(__name__)


def create_reranker(
    settings: Settings | None = None,
    transport: Transport | None = None,
    auth: AuthStrategy | None = None,
) -> Reranker:
    """Create a logging-wrapped Azure Cohere reranker.

    Args:
        settings: Application settings. Loaded from the environment if not provided.
        transport: Transport to issue the call with. Defaults to HTTPXTransport.
        auth: Auth strategy overriding the one in settings, e.g. from
            ``parse_auth`` on stored credentials.

    Returns:
        Reranker ready for ``compress_documents``. Close it, or use it as an
        async context manager, to release a transport created here.

    Raises:
        ConfigurationError: If the endpoint or the selected mode's secret is missing.
    """
    settings = settings or get_settings()
    auth = auth or auth_from_settings(settings.auth)

    logger.debug("Creating Azure Cohere reranker", extra={"auth_mode": auth.mode})

    connection = resolve_connection(auth, settings.rerank.endpoint_url)

    options = RerankOptions(
        endpoint_url=connection.endpoint_url,
        headers=connection.headers,
        model=settings.rerank.model,
        top_n=settings.rerank.top_n,
        transport=transport or HTTPXTransport(timeout=settings.rerank.timeout),
    )
    return LoggingReranker(AzureCohereReranker(options, owns_transport=transport is None))
