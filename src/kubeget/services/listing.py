"""Listing service: fetch the items of a resolved resource collection."""

from __future__ import annotations

import logging

from kubeget.core.models import ListOptions, ResourceDescriptor, ResourceList
from kubeget.providers.base import ListingProvider

logger = logging.getLogger(__name__)


class ResourceLister:
    """
    Lists one collection through a listing provider.

    An empty namespace lists across all namespaces (or the cluster for
    cluster-scoped resources). A non-empty namespace is always passed on;
    whether the resource is actually namespaced is left to the server.
    """

    def __init__(self, provider: ListingProvider) -> None:
        self._provider = provider

    def list(
        self,
        descriptor: ResourceDescriptor,
        namespace: str = "",
        options: ListOptions | None = None,
    ) -> ResourceList:
        """
        List every item of a collection in a single call.

        Args:
            descriptor: Resolved group/version/resource
            namespace: Namespace to restrict to; empty for no restriction
            options: Selectors and request timeout

        Returns:
            The full item collection returned by the provider

        Raises:
            ProviderError: If the provider call failed
        """
        scope = namespace or "<all>"
        logger.debug(f"Listing {descriptor.qualified_name} in namespace {scope}")

        items = self._provider.list(descriptor, namespace, options)

        logger.debug(f"Listed {len(items.items)} item(s) of {descriptor.qualified_name}")
        return items
