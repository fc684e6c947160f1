"""Schema management entities."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

DOCUMENT_KIND = "document"
REFERENCE_KIND = "reference"
ARRAY_KIND = "array"


@dataclass(frozen=True)
class TargetRef:
    """Target of a reference field."""

    type: str

    @staticmethod
    def from_mapping(value: Any) -> TargetRef | None:
        if not isinstance(value, Mapping):
            return None
        target_type = value.get("type")
        if not isinstance(target_type, str) or not target_type:
            return None
        return TargetRef(type=target_type)


@dataclass(frozen=True)
class FieldDefinition:
    """One field of an object-like type, or one member of an array field.

    `to` and `of` are always tuples, whatever shape the upstream JSON used.
    """

    name: str | None
    type: str | None
    to: tuple[TargetRef, ...] = ()
    of: tuple[FieldDefinition, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @staticmethod
    def from_mapping(value: Any) -> FieldDefinition | None:
        if not isinstance(value, Mapping):
            return None
        refs = (TargetRef.from_mapping(item) for item in _as_sequence(value.get("to")))
        members = (FieldDefinition.from_mapping(item) for item in _as_sequence(value.get("of")))
        return FieldDefinition(
            name=_optional_str(value.get("name")),
            type=_optional_str(value.get("type")),
            to=tuple(ref for ref in refs if ref is not None),
            of=tuple(member for member in members if member is not None),
            extra={key: item for key, item in value.items() if key not in _FIELD_KEYS},
        )


@dataclass(frozen=True)
class TypeDefinition:
    """Named schema node from a schema snapshot."""

    name: str
    kind: str | None
    fields: tuple[FieldDefinition, ...]
    raw: Mapping[str, Any] = field(compare=False)

    @property
    def extra(self) -> Mapping[str, Any]:
        """Metadata the resolver does not interpret."""
        return {key: value for key, value in self.raw.items() if key not in _TYPE_KEYS}

    @property
    def is_document(self) -> bool:
        return self.kind == DOCUMENT_KIND

    @staticmethod
    def from_mapping(value: Mapping[str, Any]) -> TypeDefinition:
        raw_fields = value.get("fields")
        parsed = (
            FieldDefinition.from_mapping(item)
            for item in (raw_fields if _is_list_like(raw_fields) else ())
        )
        return TypeDefinition(
            name=str(value.get("name", "")),
            kind=_optional_str(value.get("type")),
            fields=tuple(item for item in parsed if item is not None),
            raw=value,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a detached copy of the upstream JSON shape of this type."""
        return copy.deepcopy(dict(self.raw))


def parse_snapshot(entries: Sequence[Any]) -> tuple[TypeDefinition, ...]:
    """Build a schema snapshot from decoded schema JSON, skipping unnamed entries."""
    return tuple(
        TypeDefinition.from_mapping(entry)
        for entry in entries
        if isinstance(entry, Mapping) and isinstance(entry.get("name"), str)
    )


_TYPE_KEYS = frozenset({"name", "type", "fields"})
_FIELD_KEYS = frozenset({"name", "type", "to", "of"})


def _as_sequence(value: Any) -> Sequence[Any]:
    if value is None:
        return ()
    if _is_list_like(value):
        return value
    return (value,)


def _is_list_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None
