"""Custom exception hierarchy for kubeget."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kubeget.core.models import APIResourceList, ResourceDescriptor


class KubegetError(Exception):
    """Base exception for all kubeget errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(KubegetError):
    """Client could not be configured."""

    pass


class ResolutionError(KubegetError):
    """Failed to resolve a resource identifier."""

    def __init__(
        self,
        message: str,
        identifier: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.identifier = identifier


class InvalidInputError(ResolutionError):
    """Identifier failed validation before any lookup."""

    pass


class NotFoundError(ResolutionError):
    """No resolution strategy matched the identifier."""

    pass


class ProviderError(KubegetError):
    """A mapping, discovery or listing provider call failed."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class GroupDiscoveryError(ProviderError):
    """
    Some API groups could not be discovered.

    Carries the snapshot of every group that did respond, and the error
    message of each group-version that did not.
    """

    def __init__(
        self,
        snapshot: list[APIResourceList],
        failed_groups: dict[str, str],
    ) -> None:
        super().__init__(
            message=(
                "unable to retrieve the complete list of server APIs: "
                + "; ".join(failed_groups.values())
            ),
            source="discovery",
            details={"failed_groups": dict(failed_groups)},
        )
        self.snapshot = snapshot
        self.failed_groups = failed_groups


class ListError(KubegetError):
    """Listing failed after the identifier was resolved."""

    def __init__(
        self,
        message: str,
        identifier: str,
        descriptor: ResourceDescriptor,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.identifier = identifier
        self.descriptor = descriptor
