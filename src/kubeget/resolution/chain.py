"""Chain resolver: ordered fallback across resolution strategies."""

from __future__ import annotations

import logging

from kubeget.core.exceptions import InvalidInputError, NotFoundError, ProviderError
from kubeget.core.models import ResourceDescriptor
from kubeget.providers.base import DiscoverySnapshotProvider, MappingProvider
from kubeget.resolution.base import AbstractStrategy, ResolutionResult
from kubeget.resolution.strategies import default_strategies

logger = logging.getLogger(__name__)


class ChainResolver:
    """
    Resolves raw identifiers by trying strategies in priority order.

    Features:
    - Stops at the first strategy that produces a descriptor
    - Provider failures in ordinary strategies count as a miss
    - Provider failures in fatal strategies abort with ProviderError
    - No retries; the chain holds no state besides its strategies
    """

    def __init__(self, strategies: list[AbstractStrategy]) -> None:
        # Sort by priority (lower = higher priority)
        self._strategies = sorted(strategies, key=lambda s: s.priority)

    @classmethod
    def from_providers(
        cls,
        mapper: MappingProvider,
        discovery: DiscoverySnapshotProvider,
    ) -> ChainResolver:
        """Build the standard chain over a mapper and a discovery provider."""
        return cls(default_strategies(mapper, discovery))

    @property
    def strategies(self) -> list[AbstractStrategy]:
        """Strategies in the order they are tried."""
        return list(self._strategies)

    def find(self, identifier: str) -> ResolutionResult:
        """
        Resolve an identifier and report which strategy matched.

        Raises:
            InvalidInputError: If the identifier is empty
            NotFoundError: If no strategy matched
            ProviderError: If a fatal strategy could not reach its provider
        """
        if not identifier:
            raise InvalidInputError("resource name cannot be empty", identifier=identifier)

        for strategy in self._strategies:
            descriptor = self._try_strategy(strategy, identifier)
            if descriptor is not None:
                logger.info(f"Resolved {identifier!r} to {descriptor} via {strategy.name}")
                return ResolutionResult(descriptor=descriptor, strategy=strategy.name)

        raise NotFoundError(
            f"failed to find resource {identifier!r}: resource not found in any API group",
            identifier=identifier,
        )

    def resolve(self, identifier: str) -> ResourceDescriptor:
        """Resolve an identifier to its descriptor."""
        return self.find(identifier).descriptor

    def _try_strategy(
        self,
        strategy: AbstractStrategy,
        identifier: str,
    ) -> ResourceDescriptor | None:
        """Try a single strategy with error handling."""
        try:
            return strategy.resolve(identifier)
        except ProviderError as e:
            if strategy.FATAL_ERRORS:
                raise ProviderError(
                    message=f"failed to find resource {identifier!r}: {e.message}",
                    source=e.source,
                    status_code=e.status_code,
                    details={**e.details, "identifier": identifier},
                ) from e
            logger.debug(f"Strategy {strategy.name} missed {identifier!r}: {e}")
            return None
        except Exception as e:
            if strategy.FATAL_ERRORS:
                raise
            logger.exception(f"Strategy {strategy.name} failed for {identifier!r}: {e}")
            return None
