"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KubegetSettings(BaseSettings):
    """Client configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="KUBEGET_",
    )

    # Cluster access
    kubeconfig: str | None = Field(
        default=None,
        description="Path to kubeconfig (defaults to $KUBECONFIG, then ~/.kube/config)",
    )
    context: str | None = Field(
        default=None,
        description="Kubeconfig context name (defaults to the current context)",
    )
    in_cluster: bool = Field(
        default=False,
        description="Use the pod service account instead of a kubeconfig",
    )

    # Discovery
    discovery_cache_ttl: float = Field(
        default=600.0,
        ge=0.0,
        description="Seconds to cache the discovery snapshot (0 disables caching)",
    )

    # Listing
    request_timeout: float | None = Field(
        default=None,
        gt=0.0,
        description="Default timeout in seconds for list requests",
    )
    default_namespace: str = Field(
        default="default",
        description="Namespace used when the kubeconfig context sets none",
    )

    # App settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> KubegetSettings:
    """Get cached settings instance."""
    return KubegetSettings()
