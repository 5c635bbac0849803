"""Discovery snapshot provider backed by the kubernetes API client."""

from __future__ import annotations

import logging
from typing import Any

from kubernetes import client

from kubeget.core.exceptions import GroupDiscoveryError, ProviderError
from kubeget.core.models import APIResourceList, DiscoveryEntry
from kubeget.core.types import ProviderSource
from kubeget.providers.base import DiscoverySnapshotProvider, translate_api_errors

logger = logging.getLogger(__name__)


class KubernetesDiscoveryClient(DiscoverySnapshotProvider):
    """
    Reads preferred resources from the API server's discovery endpoints.

    The core group ('v1') comes first, followed by each group under /apis at
    its preferred version, in the order the server lists them. Subresources
    such as 'pods/log' are left out.
    """

    def __init__(self, api_client: client.ApiClient) -> None:
        self._api_client = api_client
        self._core = client.CoreV1Api(api_client)
        self._apis = client.ApisApi(api_client)

    @property
    def host(self) -> str:
        """API server the client talks to."""
        return self._api_client.configuration.host

    def preferred_resources(self) -> list[APIResourceList]:
        """
        Fetch the preferred-resources snapshot.

        Raises:
            ProviderError: If the core group or the group list is unavailable
            GroupDiscoveryError: If some groups failed; carries the rest
        """
        with translate_api_errors(ProviderSource.DISCOVERY, "fetch server preferred resources"):
            snapshot = [self._convert(self._core.get_api_resources())]
            group_list = self._apis.get_api_versions()

        failed_groups: dict[str, str] = {}
        for group in group_list.groups or []:
            preferred = group.preferred_version
            if preferred is None and group.versions:
                preferred = group.versions[0]
            if preferred is None:
                logger.warning(f"API group {group.name!r} advertises no versions, skipping")
                continue

            group_version = preferred.group_version
            try:
                with translate_api_errors(ProviderSource.DISCOVERY, f"fetch {group_version}"):
                    resource_list = self._get_group_version(group_version)
            except ProviderError as e:
                logger.warning(f"Discovery failed for {group_version}: {e.message}")
                failed_groups[group_version] = e.message
                continue
            snapshot.append(self._convert(resource_list))

        logger.debug(f"Discovered {len(snapshot)} group versions on {self.host}")
        if failed_groups:
            raise GroupDiscoveryError(snapshot, failed_groups)
        return snapshot

    def _get_group_version(self, group_version: str) -> Any:
        """Fetch the V1APIResourceList served at /apis/<group>/<version>."""
        return self._api_client.call_api(
            f"/apis/{group_version}/",
            "GET",
            header_params={"Accept": "application/json"},
            response_type="V1APIResourceList",
            auth_settings=["BearerToken"],
            _return_http_data_only=True,
        )

    @staticmethod
    def _convert(resource_list: Any) -> APIResourceList:
        """Convert a V1APIResourceList, dropping subresources."""
        return APIResourceList(
            group_version=resource_list.group_version,
            resources=[
                DiscoveryEntry(
                    name=resource.name,
                    kind=resource.kind,
                    short_names=tuple(resource.short_names or ()),
                    singular_name=resource.singular_name or "",
                    namespaced=bool(resource.namespaced),
                )
                for resource in resource_list.resources or []
                if "/" not in resource.name
            ],
        )
