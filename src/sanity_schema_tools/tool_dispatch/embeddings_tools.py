"""Embeddings and semantic search tools."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .tool_arguments import (
    optional_positive_int,
    optional_string,
    optional_string_list,
    require_string,
)
from .tool_models import ToolContext, ToolDefinition

DEFAULT_MAX_RESULTS = 10


def build_embeddings_tools(context: ToolContext) -> list[ToolDefinition]:
    """Return the embeddings tool definitions bound to `context`."""

    def list_embeddings_indices(arguments: Mapping[str, Any]) -> Any:
        project_id = require_string(arguments, "projectId")
        dataset = optional_string(arguments, "dataset", context.default_dataset)
        with context.api_client_factory() as client:
            return client.list_embeddings_indices(project_id, dataset)

    def semantic_search(arguments: Mapping[str, Any]) -> Any:
        query = require_string(arguments, "query")
        index_name = require_string(arguments, "indexName")
        project_id = require_string(arguments, "projectId")
        dataset = optional_string(arguments, "dataset", context.default_dataset)
        max_results = optional_positive_int(arguments, "maxResults", DEFAULT_MAX_RESULTS)
        types = optional_string_list(arguments, "types")
        with context.api_client_factory() as client:
            return client.semantic_search(
                query,
                project_id=project_id,
                dataset=dataset,
                index_name=index_name,
                max_results=max_results,
                types=types,
            )

    project_properties = {
        "projectId": {"type": "string", "description": "Project ID for the Sanity project"},
        "dataset": {"type": "string", "description": "Dataset name within the project"},
    }
    return [
        ToolDefinition(
            name="listEmbeddingsIndices",
            description="List all embeddings indices available for the project and dataset",
            input_schema={
                "type": "object",
                "properties": project_properties,
                "required": ["projectId"],
            },
            handler=list_embeddings_indices,
        ),
        ToolDefinition(
            name="semanticSearch",
            description="Perform semantic search on Sanity documents using embeddings",
            input_schema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "The search query to match documents against",
                    },
                    "indexName": {
                        "type": "string",
                        "description": "The name of the embeddings index to search",
                    },
                    **project_properties,
                    "maxResults": {
                        "type": "integer",
                        "default": DEFAULT_MAX_RESULTS,
                        "description": "Maximum number of results to return",
                    },
                    "types": {
                        "anyOf": [
                            {"type": "string"},
                            {"type": "array", "items": {"type": "string"}},
                        ],
                        "description": "Document type(s) to filter by",
                    },
                },
                "required": ["query", "indexName", "projectId"],
            },
            handler=semantic_search,
        ),
    ]
