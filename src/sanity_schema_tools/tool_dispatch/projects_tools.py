"""Organization and project listing tools."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sanity_schema_tools.platform_api.api_client import PlatformApiError

from .tool_arguments import require_string
from .tool_models import ToolContext, ToolDefinition

logger = logging.getLogger(__name__)


def build_projects_tools(context: ToolContext) -> list[ToolDefinition]:
    """Return the projects tool definitions bound to `context`.

    Platform failures are reported in the result rather than raised.
    """

    def list_organizations_and_projects(arguments: Mapping[str, Any]) -> Any:
        try:
            with context.api_client_factory() as client:
                return client.list_organizations_and_projects()
        except PlatformApiError as exc:
            return error_response("Error listing organizations and projects", exc)

    def list_studios(arguments: Mapping[str, Any]) -> Any:
        project_id = require_string(arguments, "projectId")
        try:
            with context.api_client_factory() as client:
                return client.list_studios(project_id)
        except PlatformApiError as exc:
            return error_response("Error listing studios", exc)

    return [
        ToolDefinition(
            name="listOrganizationsAndProjects",
            description="List all organizations and their projects that the user has access to",
            input_schema={"type": "object", "properties": {}},
            handler=list_organizations_and_projects,
        ),
        ToolDefinition(
            name="listStudios",
            description="List all studios for a specific project",
            input_schema={
                "type": "object",
                "properties": {
                    "projectId": {
                        "type": "string",
                        "description": "ID of the project to list studios for",
                    }
                },
                "required": ["projectId"],
            },
            handler=list_studios,
        ),
    ]


def error_response(message: str, error: Exception) -> dict[str, str]:
    logger.warning("%s: %s", message, error)
    return {"error": f"{message}: {error}"}
