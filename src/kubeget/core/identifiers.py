"""Purely syntactic helpers for raw resource identifiers."""

from __future__ import annotations

from kubeget.core.models import ResourceDescriptor


def parse_fully_qualified(identifier: str) -> ResourceDescriptor | None:
    """
    Parse 'resource.version.group' into a descriptor.

    The group may itself contain dots, and may be empty for core resources
    ('pods.v1.'). Nothing is checked against the cluster, so the result may
    name a resource that does not exist.

    Returns:
        The descriptor, or None when there are fewer than three segments
    """
    if "." not in identifier:
        return None

    parts = identifier.split(".")
    if len(parts) < 3:
        return None

    return ResourceDescriptor(
        group=".".join(parts[2:]),
        version=parts[1],
        resource=parts[0],
    )


def kind_variations(identifier: str) -> list[str]:
    """
    Candidate Kind spellings for an identifier, in lookup order.

    Order: unchanged, capitalized (rest unchanged), all upper, capitalized
    (rest lower). Candidates may repeat, e.g. 'pod' gives 'Pod' twice.
    """
    if not identifier:
        return [identifier]

    first, rest = identifier[0], identifier[1:]
    return [
        identifier,
        first.upper() + rest,
        identifier.upper(),
        first.upper() + rest.lower(),
    ]
