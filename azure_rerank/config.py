"""Application configuration using Pydantic Settings.

All configuration is loaded from environment variables.
No secrets are hardcoded.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class AuthMode(str, Enum):
    """How the rerank endpoint is authenticated."""

    AZURE_CREDENTIAL = "azure_credential"
    HTTP_BEARER = "http_bearer"
    HTTP_HEADER = "http_header"


class AzureAuthType(str, Enum):
    """Secret kind stored in an Azure Cohere rerank credential."""

    API_KEY = "api_key"
    BEARER = "bearer"


class RerankSettings(BaseSettings):
    """Rerank endpoint configuration."""

    model_config = SettingsConfigDict(env_prefix="RERANK_")

    endpoint_url: str = Field(
        default="",
        description="Full endpoint URL including /v1/rerank",
    )
    model: str = Field(
        default="rerank-v3.5",
        description="Rerank model identifier",
    )
    top_n: int = Field(
        default=3,
        ge=0,
        description="Maximum number of documents to return after reranking",
    )
    timeout: float = Field(
        default=60.0,
        description="Request timeout in seconds for the default HTTP transport",
    )


class AuthSettings(BaseSettings):
    """Authentication configuration for the rerank endpoint.

    Only the fields relevant to the selected mode are read.
    """

    model_config = SettingsConfigDict(env_prefix="RERANK_AUTH_")

    mode: AuthMode = Field(
        default=AuthMode.HTTP_BEARER,
        description="Authentication mode",
    )
    azure_auth_type: AzureAuthType = Field(
        default=AzureAuthType.API_KEY,
        description="Secret kind for the azure_credential mode",
    )
    azure_endpoint_url: str = Field(
        default="",
        description="Endpoint stored with the azure_credential mode",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="API key for the azure_credential mode",
    )
    bearer_token: SecretStr | None = Field(
        default=None,
        description="Bearer token for the http_bearer and azure_credential modes",
    )
    header_name: str = Field(
        default="api-key",
        description="Header name for the http_header mode",
    )
    header_value: SecretStr | None = Field(
        default=None,
        description="Header value for the http_header mode",
    )


class Settings(BaseSettings):
    """Main application settings.

    Aggregates all configuration sections.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    # Nested settings
    rerank: RerankSettings = Field(default_factory=RerankSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()
