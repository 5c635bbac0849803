"""Providers: the mapping, discovery and listing collaborators."""

from kubeget.providers.base import (
    DiscoverySnapshotProvider,
    ListingProvider,
    MappingProvider,
    translate_api_errors,
)
from kubeget.providers.discovery import KubernetesDiscoveryClient
from kubeget.providers.listing import KubernetesListingClient
from kubeget.providers.mapper import DiscoveryRESTMapper, iter_discovery_entries

__all__ = [
    # Contracts
    "DiscoverySnapshotProvider",
    "ListingProvider",
    "MappingProvider",
    "translate_api_errors",
    # Kubernetes adapters
    "DiscoveryRESTMapper",
    "KubernetesDiscoveryClient",
    "KubernetesListingClient",
    "iter_discovery_entries",
]
