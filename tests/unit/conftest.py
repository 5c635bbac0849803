"""Unit test fixtures with kubernetes API client mocking."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from kubernetes import client

# ============================================================================
# API Client Fixtures
# ============================================================================


@pytest.fixture
def api_client() -> MagicMock:
    """A mock kubernetes ApiClient pointed at a fake server.

    `call_api` returns None unless a test sets a return value or side effect.
    """
    mock = MagicMock(spec=client.ApiClient)
    mock.configuration = MagicMock()
    mock.configuration.host = "https://k8s.example.test:6443"
    mock.call_api.return_value = None
    return mock


# ============================================================================
# Discovery Response Fixtures
# ============================================================================


@pytest.fixture
def core_resource_list() -> client.V1APIResourceList:
    """Core v1 resources as served by /api/v1, including a subresource."""
    return client.V1APIResourceList(
        group_version="v1",
        resources=[
            client.V1APIResource(
                name="pods",
                kind="Pod",
                namespaced=True,
                singular_name="pod",
                short_names=["po"],
                verbs=["get", "list", "watch"],
            ),
            client.V1APIResource(
                name="pods/log",
                kind="Pod",
                namespaced=True,
                singular_name="",
                verbs=["get"],
            ),
            client.V1APIResource(
                name="namespaces",
                kind="Namespace",
                namespaced=False,
                singular_name="namespace",
                short_names=["ns"],
                verbs=["get", "list"],
            ),
        ],
    )


@pytest.fixture
def apps_resource_list() -> client.V1APIResourceList:
    """apps/v1 resources as served by /apis/apps/v1."""
    return client.V1APIResourceList(
        group_version="apps/v1",
        resources=[
            client.V1APIResource(
                name="deployments",
                kind="Deployment",
                namespaced=True,
                singular_name="deployment",
                short_names=["deploy"],
                verbs=["get", "list"],
            ),
            client.V1APIResource(
                name="deployments/scale",
                kind="Scale",
                namespaced=True,
                singular_name="",
                verbs=["get", "patch"],
            ),
        ],
    )


@pytest.fixture
def api_group_list() -> client.V1APIGroupList:
    """Groups served under /apis with their preferred versions."""
    apps_v1 = client.V1GroupVersionForDiscovery(group_version="apps/v1", version="v1")
    return client.V1APIGroupList(
        groups=[
            client.V1APIGroup(
                name="apps",
                versions=[apps_v1],
                preferred_version=apps_v1,
            ),
        ],
    )


@pytest.fixture
def pod_list_response() -> dict[str, Any]:
    """Raw JSON body of GET /api/v1/namespaces/default/pods."""
    return {
        "apiVersion": "v1",
        "kind": "PodList",
        "metadata": {"resourceVersion": "12345"},
        "items": [
            {"metadata": {"name": "web-1", "namespace": "default"}, "spec": {}},
            {"metadata": {"name": "web-2", "namespace": "default"}, "spec": {}},
        ],
    }
