"""List resources the way `kubectl get` would.

Usage: python examples/simple_get.py <resource-name> [namespace]
Example: python examples/simple_get.py pods default
"""

from __future__ import annotations

import logging
import sys

from kubeget import KubeGet, KubegetError, KubegetSettings


def main(argv: list[str]) -> int:
    if len(argv) < 2:
        print(f"Usage: {argv[0]} <resource-name> [namespace]", file=sys.stderr)
        print(f"Example: {argv[0]} pods default", file=sys.stderr)
        return 1

    resource_name = argv[1]

    settings = KubegetSettings()
    logging.basicConfig(level=settings.log_level.upper())

    try:
        with KubeGet.from_settings(settings) as kubeget:
            # Like kubectl, fall back to the namespace of the current context
            namespace = argv[2] if len(argv) > 2 else kubeget.default_namespace
            result = kubeget.get(resource_name, namespace)
    except KubegetError as e:
        print(f"Failed to get resources: {e}", file=sys.stderr)
        return 1

    descriptor = result.descriptor
    print(
        f"Resource: {resource_name} (Group: {descriptor.group}, "
        f"Version: {descriptor.version}, Resource: {descriptor.resource})"
    )
    print(f"Namespace: {namespace}\n")

    if not result.items.items:
        print("No resources found.")
        return 0

    print(f"Found {len(result.items.items)} resource(s):")
    for i, item in enumerate(result.items.items, start=1):
        print(f"{i}. {item.name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
