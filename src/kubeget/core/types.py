"""Core enums and type definitions."""

from enum import StrEnum


class ResolutionStrategy(StrEnum):
    """Strategies the resolver tries, in order."""

    FULLY_QUALIFIED = "fully_qualified"  # resource.version.group
    RESOURCE_NAME = "resource_name"  # plural or singular name via the mapper
    KIND = "kind"  # exact Kind via the mapper
    KIND_VARIATION = "kind_variation"  # Kind with case variations
    ALIAS_SCAN = "alias_scan"  # full discovery scan incl. shortnames


class ProviderSource(StrEnum):
    """Collaborators that can fail during a get."""

    MAPPING = "mapping"
    DISCOVERY = "discovery"
    LISTING = "listing"
