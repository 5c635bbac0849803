"""Listing provider backed by the kubernetes API client."""

from __future__ import annotations

import logging

from kubernetes import client

from kubeget.core.models import ListOptions, ResourceDescriptor, ResourceList
from kubeget.core.types import ProviderSource
from kubeget.providers.base import ListingProvider, translate_api_errors

logger = logging.getLogger(__name__)


class KubernetesListingClient(ListingProvider):
    """Issues a single GET against a collection path and returns every item."""

    def __init__(
        self,
        api_client: client.ApiClient,
        default_timeout: float | None = None,
    ) -> None:
        self._api_client = api_client
        self._default_timeout = default_timeout

    def list(
        self,
        descriptor: ResourceDescriptor,
        namespace: str = "",
        options: ListOptions | None = None,
    ) -> ResourceList:
        options = options or ListOptions()

        query_params: list[tuple[str, str]] = []
        if options.label_selector:
            query_params.append(("labelSelector", options.label_selector))
        if options.field_selector:
            query_params.append(("fieldSelector", options.field_selector))

        path = descriptor.api_path(namespace)
        timeout = options.timeout or self._default_timeout
        logger.debug(f"Listing {path} (timeout={timeout})")

        with translate_api_errors(ProviderSource.LISTING, f"list {descriptor.qualified_name}"):
            data = self._api_client.call_api(
                path,
                "GET",
                query_params=query_params,
                header_params={"Accept": "application/json"},
                response_type="object",
                auth_settings=["BearerToken"],
                _return_http_data_only=True,
                _request_timeout=timeout,
            )

        return ResourceList.from_object(data or {})
