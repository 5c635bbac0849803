"""REST mapping computed from a discovery snapshot."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from kubeget.core.exceptions import GroupDiscoveryError, ProviderError
from kubeget.core.models import (
    APIResourceList,
    DiscoveryEntry,
    ResourceDescriptor,
    parse_group_version,
)
from kubeget.core.types import ProviderSource
from kubeget.providers.base import DiscoverySnapshotProvider, MappingProvider

logger = logging.getLogger(__name__)


def iter_discovery_entries(
    snapshot: list[APIResourceList],
) -> Iterator[tuple[str, str, DiscoveryEntry]]:
    """
    Yield (group, version, entry) for every entry, in snapshot order.

    Blocks whose group-version cannot be parsed are skipped.
    """
    for resource_list in snapshot:
        try:
            group, version = parse_group_version(resource_list.group_version)
        except ValueError:
            logger.warning(f"Skipping unparseable group version {resource_list.group_version!r}")
            continue

        for entry in resource_list.resources:
            yield group, version, entry


class DiscoveryRESTMapper(MappingProvider):
    """
    Mapping provider over a discovery snapshot.

    Each lookup reads the snapshot from the discovery provider, so wrap that
    provider in a CachedDiscoveryClient to avoid a round-trip per lookup.
    Where several groups match, the first one in snapshot order wins, which
    puts the core group ahead of named groups. Groups that failed discovery
    are left out; everything that did respond can still be mapped.
    """

    def __init__(self, discovery: DiscoverySnapshotProvider) -> None:
        self._discovery = discovery

    def _snapshot(self) -> list[APIResourceList]:
        try:
            return self._discovery.preferred_resources()
        except GroupDiscoveryError as e:
            logger.debug(f"Mapping without failed groups: {', '.join(e.failed_groups)}")
            return e.snapshot

    def resource_for(self, partial: ResourceDescriptor) -> ResourceDescriptor:
        resource = partial.resource.lower()
        snapshot = self._snapshot()

        for group, version, entry in iter_discovery_entries(snapshot):
            if partial.group and partial.group != group:
                continue
            if partial.version and partial.version != version:
                continue
            if resource in (entry.name, entry.singular):
                return ResourceDescriptor(group=group, version=version, resource=entry.name)

        raise ProviderError(
            message=f"no matches for resource {partial.resource!r}",
            source=ProviderSource.MAPPING.value,
        )

    def mappings_for(self, kind: str) -> list[ResourceDescriptor]:
        snapshot = self._snapshot()
        return [
            ResourceDescriptor(group=group, version=version, resource=entry.name)
            for group, version, entry in iter_discovery_entries(snapshot)
            if entry.kind == kind
        ]
