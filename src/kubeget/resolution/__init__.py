"""Resolution layer for turning raw identifiers into resource descriptors."""

from kubeget.resolution.base import AbstractStrategy, ResolutionResult
from kubeget.resolution.chain import ChainResolver
from kubeget.resolution.strategies import (
    AliasScanStrategy,
    FullyQualifiedStrategy,
    KindStrategy,
    KindVariationStrategy,
    ResourceNameStrategy,
    default_strategies,
)

__all__ = [
    # Base
    "AbstractStrategy",
    "ResolutionResult",
    # Chain
    "ChainResolver",
    # Strategies
    "AliasScanStrategy",
    "FullyQualifiedStrategy",
    "KindStrategy",
    "KindVariationStrategy",
    "ResourceNameStrategy",
    "default_strategies",
]
