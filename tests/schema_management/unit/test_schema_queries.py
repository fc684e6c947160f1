"""Schema query tests."""

from __future__ import annotations

import pytest
from sanity_schema_tools.schema_management.reference_resolver import resolve_references
from sanity_schema_tools.schema_management.schema_models import parse_snapshot
from sanity_schema_tools.schema_management.schema_queries import (
    TypeNotFoundError,
    get_type,
    get_type_with_references,
    list_type_names,
)

SNAPSHOT = parse_snapshot(
    [
        {
            "name": "Post",
            "type": "document",
            "title": "Post",
            "fields": [{"name": "blocks", "type": "array", "of": [{"type": "Block"}]}],
        },
        {
            "name": "Block",
            "type": "object",
            "fields": [{"name": "link", "type": "reference", "to": {"type": "Post"}}],
        },
    ]
)


def test_get_type_returns_shallow_definition() -> None:
    definition = get_type(SNAPSHOT, "Post")

    assert definition.name == "Post"
    assert definition.kind == "document"
    assert "references" not in definition.to_dict()


def test_get_type_raises_type_not_found_naming_the_type() -> None:
    with pytest.raises(TypeNotFoundError, match="Ghost") as exc_info:
        get_type(SNAPSHOT, "Ghost")

    assert exc_info.value.type_name == "Ghost"


def test_get_type_with_references_adds_resolved_types() -> None:
    payload = get_type_with_references(SNAPSHOT, "Post")

    expected = [item.to_dict() for item in resolve_references(SNAPSHOT[0], SNAPSHOT)]
    assert payload["references"] == expected
    assert [item["name"] for item in payload["references"]] == ["Block"]
    assert payload["title"] == "Post"


def test_get_type_with_references_can_skip_expansion() -> None:
    payload = get_type_with_references(SNAPSHOT, "Post", include_references=False)

    assert "references" not in payload
    assert payload == get_type(SNAPSHOT, "Post").to_dict()


def test_get_type_with_references_propagates_missing_type() -> None:
    with pytest.raises(TypeNotFoundError):
        get_type_with_references(SNAPSHOT, "Ghost")


def test_expanded_payload_does_not_leak_into_snapshot() -> None:
    get_type_with_references(SNAPSHOT, "Post")

    assert "references" not in SNAPSHOT[0].raw


def test_list_type_names_defaults_to_document_types() -> None:
    assert list_type_names(SNAPSHOT) == [{"name": "Post", "type": "document"}]


def test_list_type_names_can_include_every_kind() -> None:
    assert list_type_names(SNAPSHOT, include_non_document_kinds=True) == [
        {"name": "Post", "type": "document"},
        {"name": "Block", "type": "object"},
    ]
