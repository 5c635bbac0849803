"""Domain models for resource descriptors, discovery data and listings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def parse_group_version(group_version: str) -> tuple[str, str]:
    """
    Split a discovery group-version string into (group, version).

    "v1" is the core group; "apps/v1" is group "apps", version "v1".

    Raises:
        ValueError: If the string is empty or has more than one "/"
    """
    if not group_version:
        raise ValueError("group version cannot be empty")
    if "/" not in group_version:
        return "", group_version
    group, _, version = group_version.partition("/")
    if "/" in version:
        raise ValueError(f"unexpected group version string: {group_version!r}")
    return group, version


class ResourceDescriptor(BaseModel):
    """Group, version and plural resource name of a collection endpoint."""

    model_config = ConfigDict(frozen=True)

    group: str = Field(default="", description="API group; empty for the core group")
    version: str = Field(..., description="API version, e.g. 'v1'")
    resource: str = Field(..., description="Plural resource name, e.g. 'pods'")

    @property
    def is_core(self) -> bool:
        """Whether this descriptor is in the unnamed core group."""
        return self.group == ""

    @property
    def group_version(self) -> str:
        """Group-version string as used in apiVersion fields."""
        if self.is_core:
            return self.version
        return f"{self.group}/{self.version}"

    @property
    def qualified_name(self) -> str:
        """Fully-qualified form, e.g. 'deployments.v1.apps' or 'pods.v1.'."""
        return f"{self.resource}.{self.version}.{self.group}"

    def api_path(self, namespace: str = "") -> str:
        """Collection path on the API server, scoped to a namespace if given."""
        prefix = f"/api/{self.version}" if self.is_core else f"/apis/{self.group}/{self.version}"
        if namespace:
            return f"{prefix}/namespaces/{namespace}/{self.resource}"
        return f"{prefix}/{self.resource}"

    def __str__(self) -> str:
        return f"{self.group_version}, Resource={self.resource}"


class DiscoveryEntry(BaseModel):
    """One resource advertised under a group-version."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Plural resource name")
    kind: str = Field(..., description="Kind, e.g. 'Pod'")
    short_names: tuple[str, ...] = Field(default=(), description="Shortname aliases")
    singular_name: str = Field(default="", description="Singular name, may be empty")
    namespaced: bool = Field(default=True, description="Whether the resource is namespaced")

    @property
    def singular(self) -> str:
        """Singular name, falling back to the lowercased Kind."""
        return self.singular_name or self.kind.lower()


class APIResourceList(BaseModel):
    """Resources advertised under one group-version of a discovery snapshot."""

    group_version: str = Field(..., description="e.g. 'v1' or 'apps/v1'")
    resources: list[DiscoveryEntry] = Field(default_factory=list)


class ResourceItem(BaseModel):
    """A listed object, reduced to its identity plus the raw payload."""

    name: str = Field(..., description="metadata.name")
    namespace: str = Field(default="", description="metadata.namespace; empty if cluster-scoped")
    raw: dict[str, Any] = Field(default_factory=dict, repr=False, description="Full object")

    @classmethod
    def from_object(cls, obj: dict[str, Any]) -> ResourceItem:
        """Build an item from an API object dict."""
        metadata = obj.get("metadata") or {}
        return cls(
            name=metadata.get("name") or "",
            namespace=metadata.get("namespace") or "",
            raw=obj,
        )


class ResourceList(BaseModel):
    """Item collection returned by a single list call."""

    api_version: str = Field(default="", description="apiVersion of the list")
    kind: str = Field(default="", description="Kind of the list, e.g. 'PodList'")
    resource_version: str = Field(default="", description="metadata.resourceVersion")
    items: list[ResourceItem] = Field(default_factory=list)

    @classmethod
    def from_object(cls, obj: dict[str, Any]) -> ResourceList:
        """Build a list from an API list response dict."""
        metadata = obj.get("metadata") or {}
        return cls(
            api_version=obj.get("apiVersion") or "",
            kind=obj.get("kind") or "",
            resource_version=metadata.get("resourceVersion") or "",
            items=[ResourceItem.from_object(item) for item in obj.get("items") or []],
        )

    @property
    def names(self) -> list[str]:
        """Names of all items, in list order."""
        return [item.name for item in self.items]


class ListOptions(BaseModel):
    """Options forwarded to the listing provider."""

    model_config = ConfigDict(frozen=True)

    label_selector: str | None = Field(default=None, description="e.g. 'app=web'")
    field_selector: str | None = Field(default=None, description="e.g. 'status.phase=Running'")
    timeout: float | None = Field(
        default=None, gt=0, description="Request timeout in seconds for the list call"
    )
