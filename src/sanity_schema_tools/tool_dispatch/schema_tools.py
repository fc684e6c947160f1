"""Schema introspection tools."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sanity_schema_tools.schema_management import (
    TypeDefinition,
    get_type_with_references,
    list_type_names,
    load_snapshot,
)

from .tool_arguments import optional_bool, optional_string, require_string
from .tool_models import ToolContext, ToolDefinition

_PROJECT_PROPERTIES: dict[str, Any] = {
    "projectId": {"type": "string", "description": "Project ID for the Sanity project"},
    "dataset": {"type": "string", "description": "Dataset name within the project"},
}


def build_schema_tools(context: ToolContext) -> list[ToolDefinition]:
    """Return the schema tool definitions bound to `context`."""

    def _snapshot(arguments: Mapping[str, Any]) -> tuple[TypeDefinition, ...]:
        return load_snapshot(
            context.configuration.schema_store,
            require_string(arguments, "projectId"),
            optional_string(arguments, "dataset", context.default_dataset),
        )

    def get_schema(arguments: Mapping[str, Any]) -> list[dict[str, Any]]:
        return [definition.to_dict() for definition in _snapshot(arguments)]

    def list_schema_types(arguments: Mapping[str, Any]) -> list[dict[str, Any]]:
        return list_type_names(
            _snapshot(arguments),
            include_non_document_kinds=optional_bool(arguments, "allTypes"),
        )

    def get_type_schema(arguments: Mapping[str, Any]) -> dict[str, Any]:
        return get_type_with_references(
            _snapshot(arguments),
            require_string(arguments, "typeName"),
            include_references=optional_bool(arguments, "includeReferences"),
        )

    return [
        ToolDefinition(
            name="getSchema",
            description="Get the full schema for the project and dataset",
            input_schema=_object_schema(required=("projectId",)),
            handler=get_schema,
        ),
        ToolDefinition(
            name="listSchemaTypes",
            description="List available schema types, document types only unless allTypes is set",
            input_schema=_object_schema(
                required=("projectId",),
                allTypes={
                    "type": "boolean",
                    "description": "Include object, array and other non-document types",
                },
            ),
            handler=list_schema_types,
        ),
        ToolDefinition(
            name="getTypeSchema",
            description=(
                "Get the schema definition for a type, optionally with every type it "
                "references directly or indirectly"
            ),
            input_schema=_object_schema(
                required=("projectId", "typeName"),
                typeName={"type": "string", "description": "Name of the schema type"},
                includeReferences={
                    "type": "boolean",
                    "description": "Add the referenced types under a 'references' key",
                },
            ),
            handler=get_type_schema,
        ),
    ]


def _object_schema(*, required: tuple[str, ...], **properties: Any) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {**_PROJECT_PROPERTIES, **properties},
        "required": list(required),
    }
