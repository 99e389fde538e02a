"""Authentication strategies for the rerank endpoint.

Each strategy is one case of a tagged union carrying only the fields its
mode needs. ``resolve_connection`` turns a strategy into the endpoint and
headers the reranker is built with.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, TypeAdapter, ValidationError

from azure_rerank.config import AuthMode, AuthSettings, AzureAuthType
from azure_rerank.exceptions import ConfigurationError


class AzureCredentialAuth(BaseModel):
    """Dedicated Azure Cohere rerank credential.

    Stores its own endpoint and either an ``api-key`` secret or a bearer
    token, selected by ``auth_type``.
    """

    model_config = ConfigDict(frozen=True)

    mode: Literal["azure_credential"] = "azure_credential"
    endpoint_url: str = ""
    auth_type: AzureAuthType = AzureAuthType.API_KEY
    api_key: SecretStr | None = None
    bearer_token: SecretStr | None = None


class HTTPBearerAuth(BaseModel):
    """Stored bearer token sent as ``Authorization: Bearer <token>``."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["http_bearer"] = "http_bearer"
    token: SecretStr | None = None


class HTTPHeaderAuth(BaseModel):
    """Stored header credential, ``api-key`` unless named otherwise."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["http_header"] = "http_header"
    name: str = "api-key"
    value: SecretStr | None = None


AuthStrategy = Annotated[
    AzureCredentialAuth | HTTPBearerAuth | HTTPHeaderAuth,
    Field(discriminator="mode"),
]

_auth_adapter: TypeAdapter[AuthStrategy] = TypeAdapter(AuthStrategy)


class ResolvedConnection(BaseModel):
    """Endpoint and auth headers ready for the transport."""

    model_config = ConfigDict(frozen=True)

    endpoint_url: str
    headers: dict[str, str] = Field(default_factory=dict)


def parse_auth(data: dict[str, Any]) -> AuthStrategy:
    """Build an auth strategy from raw credential data.

    Raises:
        ConfigurationError: If the mode is unknown or the fields are invalid.
    """
    try:
        return _auth_adapter.validate_python(data)
    except ValidationError as e:
        raise ConfigurationError(
            "Unsupported authentication mode",
            details={"mode": str(data.get("mode")), "errors": e.error_count()},
        ) from e


def auth_from_settings(settings: AuthSettings) -> AuthStrategy:
    """Pick the strategy for the configured mode."""
    if settings.mode == AuthMode.AZURE_CREDENTIAL:
        return AzureCredentialAuth(
            endpoint_url=settings.azure_endpoint_url,
            auth_type=settings.azure_auth_type,
            api_key=settings.api_key,
            bearer_token=settings.bearer_token,
        )
    if settings.mode == AuthMode.HTTP_BEARER:
        return HTTPBearerAuth(token=settings.bearer_token)
    if settings.mode == AuthMode.HTTP_HEADER:
        return HTTPHeaderAuth(name=settings.header_name, value=settings.header_value)
    raise ConfigurationError(
        "Unsupported authentication mode",
        details={"mode": str(settings.mode)},
    )


def _secret(value: SecretStr | None) -> str:
    return value.get_secret_value() if value is not None else ""


def resolve_connection(
    auth: AuthStrategy,
    endpoint_url: str = "",
) -> ResolvedConnection:
    """Resolve the endpoint and auth headers for a strategy.

    Args:
        auth: Authentication strategy.
        endpoint_url: Explicit endpoint. The Azure credential falls back
            to its stored endpoint when this is empty.

    Returns:
        ResolvedConnection with the endpoint and auth header.

    Raises:
        ConfigurationError: If the endpoint or the mode's secret is missing.
    """
    match auth:
        case AzureCredentialAuth():
            endpoint = endpoint_url or auth.endpoint_url
            _require_endpoint(endpoint)
            if auth.auth_type == AzureAuthType.API_KEY:
                api_key = _secret(auth.api_key)
                if not api_key:
                    raise ConfigurationError(
                        "API key is required for Azure Cohere Rerank authentication"
                    )
                headers = {"api-key": api_key}
            else:
                token = _secret(auth.bearer_token)
                if not token:
                    raise ConfigurationError(
                        "Bearer token is required for Azure Cohere Rerank authentication"
                    )
                headers = {"Authorization": f"Bearer {token}"}

        case HTTPBearerAuth():
            endpoint = endpoint_url
            _require_endpoint(endpoint)
            token = _secret(auth.token)
            if not token:
                raise ConfigurationError(
                    "Bearer token is required in bearer credentials"
                )
            headers = {"Authorization": f"Bearer {token}"}

        case HTTPHeaderAuth():
            endpoint = endpoint_url
            _require_endpoint(endpoint)
            value = _secret(auth.value)
            if not value:
                raise ConfigurationError(
                    "Header value is required in header credentials"
                )
            headers = {auth.name or "api-key": value}

        case _:
            raise ConfigurationError(
                "Unsupported authentication mode",
                details={"mode": type(auth).__name__},
            )

    return ResolvedConnection(endpoint_url=endpoint, headers=headers)


def _require_endpoint(endpoint_url: str) -> None:
    if not endpoint_url:
        raise ConfigurationError("Endpoint URL is required")
