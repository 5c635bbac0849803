"""Kubeget - resolve kubectl-style resource names and list their items."""

from kubeget.client import GetResult, KubeGet, get
from kubeget.config import KubegetSettings
from kubeget.core.exceptions import (
    ConfigurationError,
    GroupDiscoveryError,
    InvalidInputError,
    KubegetError,
    ListError,
    NotFoundError,
    ProviderError,
    ResolutionError,
)
from kubeget.core.models import ListOptions, ResourceDescriptor, ResourceItem, ResourceList
from kubeget.core.types import ResolutionStrategy

__version__ = "0.1.0"
__all__ = [
    # Client
    "GetResult",
    "KubeGet",
    "KubegetSettings",
    "get",
    # Models
    "ListOptions",
    "ResourceDescriptor",
    "ResourceItem",
    "ResourceList",
    "ResolutionStrategy",
    # Errors
    "ConfigurationError",
    "GroupDiscoveryError",
    "InvalidInputError",
    "KubegetError",
    "ListError",
    "NotFoundError",
    "ProviderError",
    "ResolutionError",
    # Version
    "__version__",
]
