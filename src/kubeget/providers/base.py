"""Abstract provider contracts consumed by the resolver and lister."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from kubeget.core.exceptions import ProviderError
from kubeget.core.models import (
    APIResourceList,
    ListOptions,
    ResourceDescriptor,
    ResourceList,
)
from kubeget.core.types import ProviderSource


@contextmanager
def translate_api_errors(source: ProviderSource, action: str) -> Iterator[None]:
    """Re-raise kubernetes client and transport errors as ProviderError."""
    try:
        yield
    except ApiException as e:
        raise ProviderError(
            message=f"failed to {action}: {e.status} {e.reason}",
            source=source.value,
            status_code=e.status,
            details={"body": e.body},
        ) from e
    except HTTPError as e:
        raise ProviderError(
            message=f"failed to {action}: {e}",
            source=source.value,
        ) from e


class MappingProvider(ABC):
    """Maps partial resource names and Kinds to descriptors."""

    @abstractmethod
    def resource_for(self, partial: ResourceDescriptor) -> ResourceDescriptor:
        """
        Complete a partial descriptor whose resource is a plural or singular name.

        Empty group/version fields on the partial match any group/version.

        Raises:
            ProviderError: If nothing matches or the lookup itself failed
        """
        ...

    @abstractmethod
    def mappings_for(self, kind: str) -> list[ResourceDescriptor]:
        """
        All descriptors whose Kind is exactly `kind`.

        The order is provider-defined. When a Kind is served by several
        groups, callers taking the first entry get an unspecified one.
        """
        ...


class DiscoverySnapshotProvider(ABC):
    """Supplies the server's preferred resources, grouped by group-version."""

    @abstractmethod
    def preferred_resources(self) -> list[APIResourceList]:
        """
        Preferred-version resources for every group the server serves.

        Raises:
            GroupDiscoveryError: If some groups failed; the rest is attached
            ProviderError: If the snapshot could not be obtained at all
        """
        ...


class ListingProvider(ABC):
    """Lists the objects of one resource collection."""

    @abstractmethod
    def list(
        self,
        descriptor: ResourceDescriptor,
        namespace: str = "",
        options: ListOptions | None = None,
    ) -> ResourceList:
        """
        List a collection, restricted to `namespace` when it is non-empty.

        Raises:
            ProviderError: If the list call failed
        """
        ...
