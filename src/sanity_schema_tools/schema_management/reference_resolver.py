"""Reference-graph resolution over a schema snapshot."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .schema_models import ARRAY_KIND, REFERENCE_KIND, FieldDefinition, TypeDefinition


def resolve_references(
    root: TypeDefinition, snapshot: Sequence[TypeDefinition]
) -> tuple[TypeDefinition, ...]:
    """Return every type reachable from `root`, in depth-first discovery order.

    Reference fields, arrays of references and embedded array member types
    are followed. Names missing from the snapshot are skipped. The root is
    never part of the result, and each type appears at most once even when
    the graph is cyclic.
    """
    by_name = _index_by_name(snapshot)
    visited: set[str] = {root.name}
    discovered: list[TypeDefinition] = []
    pending: list[Iterator[str]] = [_referenced_names(root)]

    while pending:
        name = next(pending[-1], None)
        if name is None:
            pending.pop()
            continue
        if name in visited:
            continue
        definition = by_name.get(name)
        if definition is None:
            continue
        visited.add(name)
        discovered.append(definition)
        pending.append(_referenced_names(definition))

    return tuple(discovered)


def _index_by_name(snapshot: Sequence[TypeDefinition]) -> dict[str, TypeDefinition]:
    index: dict[str, TypeDefinition] = {}
    for definition in snapshot:
        index.setdefault(definition.name, definition)
    return index


def _referenced_names(definition: TypeDefinition) -> Iterator[str]:
    for field in definition.fields:
        if field.type == REFERENCE_KIND:
            yield from _target_names(field)
        elif field.type == ARRAY_KIND:
            for member in field.of:
                if member.type == REFERENCE_KIND:
                    yield from _target_names(member)
                elif member.type:
                    yield member.type


def _target_names(field: FieldDefinition) -> Iterator[str]:
    for target in field.to:
        yield target.type
