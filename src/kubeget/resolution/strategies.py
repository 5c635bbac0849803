"""The five resolution strategies, from cheapest to most exhaustive."""

from __future__ import annotations

import logging
from typing import ClassVar

from kubeget.core.exceptions import ProviderError
from kubeget.core.identifiers import kind_variations, parse_fully_qualified
from kubeget.core.models import ResourceDescriptor
from kubeget.core.types import ResolutionStrategy
from kubeget.providers.base import DiscoverySnapshotProvider, MappingProvider
from kubeget.providers.mapper import iter_discovery_entries
from kubeget.resolution.base import AbstractStrategy

logger = logging.getLogger(__name__)


class FullyQualifiedStrategy(AbstractStrategy):
    """Parse 'resource.version.group' without asking the cluster."""

    STRATEGY: ClassVar[ResolutionStrategy] = ResolutionStrategy.FULLY_QUALIFIED
    PRIORITY: ClassVar[int] = 10

    def resolve(self, identifier: str) -> ResourceDescriptor | None:
        return parse_fully_qualified(identifier)


class ResourceNameStrategy(AbstractStrategy):
    """Treat the identifier as a resource name ('pods', 'pod')."""

    STRATEGY: ClassVar[ResolutionStrategy] = ResolutionStrategy.RESOURCE_NAME
    PRIORITY: ClassVar[int] = 20

    def __init__(self, mapper: MappingProvider) -> None:
        self._mapper = mapper

    def resolve(self, identifier: str) -> ResourceDescriptor | None:
        return self._mapper.resource_for(ResourceDescriptor(version="", resource=identifier))


class KindStrategy(AbstractStrategy):
    """
    Treat the identifier as an exact Kind ('Deployment').

    When several groups serve the Kind, the first mapping the provider
    returns wins; that order is provider-defined and may change between
    calls or cluster versions.
    """

    STRATEGY: ClassVar[ResolutionStrategy] = ResolutionStrategy.KIND
    PRIORITY: ClassVar[int] = 30

    def __init__(self, mapper: MappingProvider) -> None:
        self._mapper = mapper

    def resolve(self, identifier: str) -> ResourceDescriptor | None:
        mappings = self._mapper.mappings_for(identifier)
        return mappings[0] if mappings else None


class KindVariationStrategy(AbstractStrategy):
    """Retry the Kind lookup with case variations ('dspa' -> 'DSPA')."""

    STRATEGY: ClassVar[ResolutionStrategy] = ResolutionStrategy.KIND_VARIATION
    PRIORITY: ClassVar[int] = 40

    def __init__(self, mapper: MappingProvider) -> None:
        self._mapper = mapper

    def resolve(self, identifier: str) -> ResourceDescriptor | None:
        # Repeated spellings are only looked up once
        for kind in dict.fromkeys(kind_variations(identifier)):
            try:
                mappings = self._mapper.mappings_for(kind)
            except ProviderError as e:
                logger.debug(f"Kind lookup for {kind!r} failed: {e}")
                continue
            if mappings:
                return mappings[0]
        return None


class AliasScanStrategy(AbstractStrategy):
    """
    Scan every preferred resource for a name, Kind or shortname match.

    Plural names match case-sensitively, Kinds case-insensitively and
    shortnames exactly. The first hit in snapshot order wins. Failing to
    fetch the snapshot aborts resolution, including a partial snapshot
    where only some groups failed.
    """

    STRATEGY: ClassVar[ResolutionStrategy] = ResolutionStrategy.ALIAS_SCAN
    PRIORITY: ClassVar[int] = 50
    FATAL_ERRORS: ClassVar[bool] = True

    def __init__(self, discovery: DiscoverySnapshotProvider) -> None:
        self._discovery = discovery

    def resolve(self, identifier: str) -> ResourceDescriptor | None:
        snapshot = self._discovery.preferred_resources()
        folded = identifier.casefold()

        for group, version, entry in iter_discovery_entries(snapshot):
            if (
                entry.name == identifier
                or entry.kind.casefold() == folded
                or identifier in entry.short_names
            ):
                return ResourceDescriptor(group=group, version=version, resource=entry.name)

        return None


def default_strategies(
    mapper: MappingProvider,
    discovery: DiscoverySnapshotProvider,
) -> list[AbstractStrategy]:
    """The standard five-step strategy chain."""
    return [
        FullyQualifiedStrategy(),
        ResourceNameStrategy(mapper),
        KindStrategy(mapper),
        KindVariationStrategy(mapper),
        AliasScanStrategy(discovery),
    ]
