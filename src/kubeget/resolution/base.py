"""Abstract resolution strategy and result types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from kubeget.core.models import ResourceDescriptor
from kubeget.core.types import ResolutionStrategy


class ResolutionResult(BaseModel):
    """A resolved descriptor and the strategy that produced it."""

    model_config = ConfigDict(frozen=True)

    descriptor: ResourceDescriptor
    strategy: ResolutionStrategy


class AbstractStrategy(ABC):
    """
    Base class for one way of turning an identifier into a descriptor.

    Subclasses return None for "no match". Provider errors raised from
    `resolve` count as a miss unless FATAL_ERRORS is set, in which case the
    chain aborts with them.
    """

    # Class-level configuration (to be overridden by subclasses)
    STRATEGY: ClassVar[ResolutionStrategy]
    PRIORITY: ClassVar[int]
    FATAL_ERRORS: ClassVar[bool] = False

    @property
    def name(self) -> ResolutionStrategy:
        """The strategy type."""
        return self.STRATEGY

    @property
    def priority(self) -> int:
        """Order within the chain (lower = tried earlier)."""
        return self.PRIORITY

    @abstractmethod
    def resolve(self, identifier: str) -> ResourceDescriptor | None:
        """
        Try to resolve a non-empty identifier.

        Args:
            identifier: The raw identifier as typed by the user

        Returns:
            The descriptor if this strategy matched, None otherwise
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(priority={self.priority})"
