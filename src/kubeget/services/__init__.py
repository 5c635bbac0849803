"""Service layer."""

from .listing import ResourceLister

__all__ = ["ResourceLister"]
