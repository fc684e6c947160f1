"""Tool registration and dispatch service."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .embeddings_tools import build_embeddings_tools
from .projects_tools import build_projects_tools
from .schema_tools import build_schema_tools
from .tool_models import ToolContext, ToolDefinition

logger = logging.getLogger(__name__)


class ToolNotFoundError(Exception):
    """Raised when a call names a tool that is not registered."""


class ToolRegistry:
    """Ordered collection of tools addressable by name."""

    def __init__(self, tools: Iterable[ToolDefinition]) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self._tools[tool.name] = tool

    def definitions(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def get(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError as exc:
            raise ToolNotFoundError(f"Tool '{name}' not found") from exc

    def execute(self, name: str, arguments: Mapping[str, Any] | None) -> Any:
        """Run the named tool; errors from the handler propagate to the caller."""
        tool = self.get(name)
        logger.info("Executing tool %s", name)
        return tool.handler(arguments or {})


def build_default_registry(context: ToolContext) -> ToolRegistry:
    """Register the schema, embeddings and projects tools."""
    return ToolRegistry(
        [
            *build_schema_tools(context),
            *build_embeddings_tools(context),
            *build_projects_tools(context),
        ]
    )
