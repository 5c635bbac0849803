"""Main library client: resolve an identifier, then list its items."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from kubernetes import client, config

from kubeget.cache.discovery import CachedDiscoveryClient
from kubeget.config import KubegetSettings, get_settings
from kubeget.core.exceptions import ConfigurationError, ListError, ProviderError
from kubeget.core.models import ListOptions, ResourceDescriptor, ResourceList
from kubeget.core.types import ResolutionStrategy
from kubeget.providers.base import (
    DiscoverySnapshotProvider,
    ListingProvider,
    MappingProvider,
)
from kubeget.providers.discovery import KubernetesDiscoveryClient
from kubeget.providers.listing import KubernetesListingClient
from kubeget.providers.mapper import DiscoveryRESTMapper
from kubeget.resolution.chain import ChainResolver
from kubeget.services.listing import ResourceLister

logger = logging.getLogger(__name__)

SERVICE_ACCOUNT_NAMESPACE_FILE = Path("/var/run/secrets/kubernetes.io/serviceaccount/namespace")


@dataclass(frozen=True)
class GetResult:
    """Outcome of a successful get."""

    descriptor: ResourceDescriptor
    items: ResourceList
    strategy: ResolutionStrategy


class KubeGet:
    """
    kubectl-get style access to any resource type.

    Usage:
        with KubeGet.from_settings() as kubeget:
            # Plural, singular, Kind, shortname or resource.version.group
            result = kubeget.get("deploy", "default")
            print(result.descriptor, result.items.names)

    The providers are injected so tests can substitute fakes; use
    `from_settings` or `from_api_client` to talk to a real cluster.
    """

    def __init__(
        self,
        mapper: MappingProvider,
        discovery: DiscoverySnapshotProvider,
        listing: ListingProvider,
        *,
        default_namespace: str = "default",
    ) -> None:
        """
        Initialize the client.

        Args:
            mapper: Resolves resource names and Kinds
            discovery: Supplies the snapshot used by the alias scan
            listing: Lists collections
            default_namespace: Namespace from the kubeconfig context, for display
        """
        self._discovery = discovery
        self._resolver = ChainResolver.from_providers(mapper, discovery)
        self._lister = ResourceLister(listing)
        self._api_client: client.ApiClient | None = None
        self.default_namespace = default_namespace

    @classmethod
    def from_api_client(
        cls,
        api_client: client.ApiClient | None,
        *,
        settings: KubegetSettings | None = None,
        default_namespace: str | None = None,
    ) -> KubeGet:
        """
        Wire the kubernetes-backed providers around an existing API client.

        The discovery snapshot is cached for `settings.discovery_cache_ttl`
        seconds and shared by the REST mapper and the alias scan.

        Raises:
            ConfigurationError: If api_client is None
        """
        if api_client is None:
            raise ConfigurationError("api client cannot be None")

        settings = settings or get_settings()

        raw_discovery = KubernetesDiscoveryClient(api_client)
        discovery = CachedDiscoveryClient(
            raw_discovery,
            ttl=settings.discovery_cache_ttl,
            host=raw_discovery.host,
        )
        listing = KubernetesListingClient(api_client, default_timeout=settings.request_timeout)

        kubeget = cls(
            DiscoveryRESTMapper(discovery),
            discovery,
            listing,
            default_namespace=default_namespace or settings.default_namespace,
        )
        kubeget._api_client = api_client
        return kubeget

    @classmethod
    def from_settings(cls, settings: KubegetSettings | None = None) -> KubeGet:
        """
        Load cluster credentials from kubeconfig (or in-cluster) and build a client.

        Raises:
            ConfigurationError: If the configuration could not be loaded
        """
        settings = settings or get_settings()

        try:
            if settings.in_cluster:
                configuration = client.Configuration()
                config.load_incluster_config(client_configuration=configuration)
                api_client = client.ApiClient(configuration)
                namespace = _service_account_namespace()
            else:
                api_client = config.new_client_from_config(
                    config_file=settings.kubeconfig,
                    context=settings.context,
                )
                namespace = _context_namespace(settings)
        except (config.ConfigException, OSError) as e:
            raise ConfigurationError(f"failed to load kubernetes configuration: {e}") from e

        logger.info(f"Connected to {api_client.configuration.host}")
        return cls.from_api_client(
            api_client,
            settings=settings,
            default_namespace=namespace,
        )

    def __enter__(self) -> KubeGet:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying API client, if this instance owns one."""
        if self._api_client is not None:
            self._api_client.close()
            self._api_client = None

    def refresh(self) -> None:
        """Drop cached discovery data so new resource types are picked up."""
        if isinstance(self._discovery, CachedDiscoveryClient):
            self._discovery.invalidate()

    def resolve(self, identifier: str) -> ResourceDescriptor:
        """
        Resolve an identifier without listing anything.

        Raises:
            InvalidInputError, NotFoundError, ProviderError
        """
        return self._resolver.resolve(identifier)

    def get(
        self,
        identifier: str,
        namespace: str = "",
        options: ListOptions | None = None,
    ) -> GetResult:
        """
        Resolve an identifier and list the matching items.

        Resolution errors are raised as the resolver produced them, without
        further wrapping; their messages already start with
        "failed to find resource '<identifier>'".

        Args:
            identifier: Plural, singular, Kind, shortname or resource.version.group
            namespace: Namespace to list in; empty for all namespaces
            options: Selectors and request timeout for the list call

        Returns:
            The resolved descriptor together with the items

        Raises:
            InvalidInputError: If the identifier is empty
            NotFoundError: If the identifier matched nothing
            ProviderError: If discovery failed during resolution
            ListError: If listing failed; carries the resolved descriptor
        """
        resolution = self._resolver.find(identifier)
        descriptor = resolution.descriptor

        try:
            items = self._lister.list(descriptor, namespace, options)
        except ProviderError as e:
            raise ListError(
                f"failed to list resources for {identifier!r} ({descriptor}): {e.message}",
                identifier=identifier,
                descriptor=descriptor,
                details={"source": e.source, "status_code": e.status_code},
            ) from e

        return GetResult(descriptor=descriptor, items=items, strategy=resolution.strategy)


def _context_namespace(settings: KubegetSettings) -> str | None:
    """Namespace configured on the selected kubeconfig context, if any."""
    contexts, active_context = config.list_kube_config_contexts(config_file=settings.kubeconfig)
    selected = active_context
    if settings.context:
        selected = next((c for c in contexts if c.get("name") == settings.context), None)
    if not selected:
        return None
    return (selected.get("context") or {}).get("namespace") or None


def _service_account_namespace() -> str | None:
    """Namespace of the pod's service account when running in-cluster."""
    if not SERVICE_ACCOUNT_NAMESPACE_FILE.exists():
        return None
    return SERVICE_ACCOUNT_NAMESPACE_FILE.read_text().strip() or None


# Convenience function for one-off gets
def get(
    identifier: str,
    namespace: str = "",
    *,
    options: ListOptions | None = None,
    settings: KubegetSettings | None = None,
) -> GetResult:
    """
    Resolve and list in one call (convenience function).

    For repeated gets, use KubeGet so discovery data stays cached.
    """
    with KubeGet.from_settings(settings) as kubeget:
        return kubeget.get(identifier, namespace, options)
