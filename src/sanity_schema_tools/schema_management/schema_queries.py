"""Name-based lookups over a schema snapshot."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .reference_resolver import resolve_references
from .schema_models import TypeDefinition


class TypeNotFoundError(Exception):
    """Raised when a requested type name is not part of the snapshot."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Type '{type_name}' not found in schema")
        self.type_name = type_name


def get_type(snapshot: Sequence[TypeDefinition], type_name: str) -> TypeDefinition:
    """Return the first type named `type_name`."""
    for definition in snapshot:
        if definition.name == type_name:
            return definition
    raise TypeNotFoundError(type_name)


def get_type_with_references(
    snapshot: Sequence[TypeDefinition],
    type_name: str,
    *,
    include_references: bool = True,
) -> dict[str, Any]:
    """Return the type as a JSON mapping, optionally with its referenced types.

    Without `include_references` the mapping has no `references` key.
    """
    definition = get_type(snapshot, type_name)
    payload = definition.to_dict()
    if include_references:
        payload["references"] = [
            referenced.to_dict() for referenced in resolve_references(definition, snapshot)
        ]
    return payload


def list_type_names(
    snapshot: Sequence[TypeDefinition], *, include_non_document_kinds: bool = False
) -> list[dict[str, Any]]:
    """List `{name, type}` pairs, restricted to document types unless asked otherwise."""
    return [
        {"name": definition.name, "type": definition.kind}
        for definition in snapshot
        if include_non_document_kinds or definition.is_document
    ]
