"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from kubeget.config import KubegetSettings
from kubeget.core.exceptions import ProviderError
from kubeget.core.models import (
    APIResourceList,
    DiscoveryEntry,
    ListOptions,
    ResourceDescriptor,
    ResourceItem,
    ResourceList,
)
from kubeget.providers.base import (
    DiscoverySnapshotProvider,
    ListingProvider,
    MappingProvider,
)

# ============================================================================
# Fake Providers
# ============================================================================


class FakeMappingProvider(MappingProvider):
    """Mapping provider backed by plain dicts; records every call."""

    def __init__(self) -> None:
        self.resources: dict[str, ResourceDescriptor] = {}
        self.kinds: dict[str, list[ResourceDescriptor]] = {}
        self.error: Exception | None = None
        self.calls: list[tuple[str, str]] = []

    def resource_for(self, partial: ResourceDescriptor) -> ResourceDescriptor:
        self.calls.append(("resource_for", partial.resource))
        if self.error is not None:
            raise self.error
        if partial.resource not in self.resources:
            raise ProviderError(f"no matches for {partial.resource!r}", source="mapping")
        return self.resources[partial.resource]

    def mappings_for(self, kind: str) -> list[ResourceDescriptor]:
        self.calls.append(("mappings_for", kind))
        if self.error is not None:
            raise self.error
        return list(self.kinds.get(kind, []))


class FakeDiscoveryProvider(DiscoverySnapshotProvider):
    """Discovery provider returning a fixed snapshot; counts calls."""

    def __init__(self, snapshot: list[APIResourceList] | None = None) -> None:
        self.snapshot = snapshot or []
        self.error: Exception | None = None
        self.calls = 0

    def preferred_resources(self) -> list[APIResourceList]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.snapshot


class FakeListingProvider(ListingProvider):
    """Listing provider returning a fixed list; records every call."""

    def __init__(self, items: ResourceList | None = None) -> None:
        self.items = items or ResourceList()
        self.error: Exception | None = None
        self.calls: list[tuple[ResourceDescriptor, str, ListOptions | None]] = []

    def list(
        self,
        descriptor: ResourceDescriptor,
        namespace: str = "",
        options: ListOptions | None = None,
    ) -> ResourceList:
        self.calls.append((descriptor, namespace, options))
        if self.error is not None:
            raise self.error
        return self.items


# ============================================================================
# Sample Data Fixtures
# ============================================================================


DSPA_GROUP = "datasciencepipelinesapplications.opendatahub.io"


@pytest.fixture
def pods_descriptor() -> ResourceDescriptor:
    """Core group pods."""
    return ResourceDescriptor(group="", version="v1", resource="pods")


@pytest.fixture
def deployments_descriptor() -> ResourceDescriptor:
    """apps/v1 deployments."""
    return ResourceDescriptor(group="apps", version="v1", resource="deployments")


@pytest.fixture
def dspa_descriptor() -> ResourceDescriptor:
    """A custom resource registered with a shortname only."""
    return ResourceDescriptor(
        group=DSPA_GROUP,
        version="v1",
        resource="datasciencepipelinesapplications",
    )


@pytest.fixture
def sample_snapshot() -> list[APIResourceList]:
    """A small preferred-resources snapshot: core, apps, events and one CRD."""
    return [
        APIResourceList(
            group_version="v1",
            resources=[
                DiscoveryEntry(name="pods", kind="Pod", short_names=("po",), singular_name="pod"),
                DiscoveryEntry(
                    name="services", kind="Service", short_names=("svc",), singular_name="service"
                ),
                DiscoveryEntry(
                    name="namespaces",
                    kind="Namespace",
                    short_names=("ns",),
                    singular_name="namespace",
                    namespaced=False,
                ),
                DiscoveryEntry(name="events", kind="Event", short_names=("ev",), singular_name="event"),
            ],
        ),
        APIResourceList(
            group_version="apps/v1",
            resources=[
                DiscoveryEntry(
                    name="deployments",
                    kind="Deployment",
                    short_names=("deploy",),
                    singular_name="deployment",
                ),
                DiscoveryEntry(
                    name="replicasets", kind="ReplicaSet", short_names=("rs",), singular_name="replicaset"
                ),
            ],
        ),
        APIResourceList(
            group_version="events.k8s.io/v1",
            resources=[
                DiscoveryEntry(name="events", kind="Event", short_names=("ev",), singular_name="event"),
            ],
        ),
        APIResourceList(
            group_version=f"{DSPA_GROUP}/v1",
            resources=[
                DiscoveryEntry(
                    name="datasciencepipelinesapplications",
                    kind="DataSciencePipelinesApplication",
                    short_names=("dspa",),
                    singular_name="",
                ),
            ],
        ),
    ]


@pytest.fixture
def sample_pod_list() -> ResourceList:
    """Two pods in the default namespace."""
    return ResourceList(
        api_version="v1",
        kind="PodList",
        resource_version="1001",
        items=[
            ResourceItem(name="web-1", namespace="default"),
            ResourceItem(name="web-2", namespace="default"),
        ],
    )


# ============================================================================
# Provider Fixtures
# ============================================================================


@pytest.fixture
def fake_mapper() -> FakeMappingProvider:
    """Empty mapping provider; tests fill in resources/kinds/error."""
    return FakeMappingProvider()


@pytest.fixture
def fake_discovery() -> FakeDiscoveryProvider:
    """Discovery provider with an empty snapshot."""
    return FakeDiscoveryProvider()


@pytest.fixture
def sample_discovery(sample_snapshot: list[APIResourceList]) -> FakeDiscoveryProvider:
    """Discovery provider serving the sample snapshot."""
    return FakeDiscoveryProvider(sample_snapshot)


@pytest.fixture
def fake_listing(sample_pod_list: ResourceList) -> FakeListingProvider:
    """Listing provider returning the sample pod list."""
    return FakeListingProvider(sample_pod_list)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def test_settings() -> KubegetSettings:
    """Settings that do not depend on the environment."""
    return KubegetSettings(
        _env_file=None,
        kubeconfig="/tmp/kubeget-test/config",
        context=None,
        discovery_cache_ttl=60.0,
        request_timeout=15.0,
        default_namespace="default",
    )
