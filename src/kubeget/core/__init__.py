"""Core types, models, and utilities."""

from .exceptions import (
    ConfigurationError,
    GroupDiscoveryError,
    InvalidInputError,
    KubegetError,
    ListError,
    NotFoundError,
    ProviderError,
    ResolutionError,
)
from .identifiers import kind_variations, parse_fully_qualified
from .models import (
    APIResourceList,
    DiscoveryEntry,
    ListOptions,
    ResourceDescriptor,
    ResourceItem,
    ResourceList,
    parse_group_version,
)
from .types import ProviderSource, ResolutionStrategy

__all__ = [
    # Types
    "ProviderSource",
    "ResolutionStrategy",
    # Identifiers
    "kind_variations",
    "parse_fully_qualified",
    # Models
    "APIResourceList",
    "DiscoveryEntry",
    "ListOptions",
    "ResourceDescriptor",
    "ResourceItem",
    "ResourceList",
    "parse_group_version",
    # Exceptions
    "ConfigurationError",
    "GroupDiscoveryError",
    "InvalidInputError",
    "KubegetError",
    "ListError",
    "NotFoundError",
    "ProviderError",
    "ResolutionError",
]
