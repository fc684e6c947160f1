"""MCP stdio server exposing the tool registry."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from sanity_schema_tools.configuration import ConfigurationError
from sanity_schema_tools.platform_api import PlatformApiError
from sanity_schema_tools.schema_management import SchemaUnavailableError, TypeNotFoundError
from sanity_schema_tools.tool_dispatch import ToolArgumentError, ToolNotFoundError, ToolRegistry

SERVER_NAME = "Sanity MCP Server"

logger = logging.getLogger(__name__)

TOOL_ERRORS = (
    ConfigurationError,
    PlatformApiError,
    SchemaUnavailableError,
    TypeNotFoundError,
    ToolArgumentError,
    ToolNotFoundError,
)


def describe_tools(registry: ToolRegistry) -> list[types.Tool]:
    """Translate registry entries into MCP tool descriptors."""
    return [
        types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=dict(tool.input_schema),
        )
        for tool in registry.definitions()
    ]


def call_tool(
    registry: ToolRegistry, name: str, arguments: Mapping[str, Any] | None
) -> list[types.TextContent]:
    """Execute a tool and render its result, or its error, as JSON text."""
    try:
        result: Any = registry.execute(name, arguments)
    except TOOL_ERRORS as exc:
        logger.error("Error executing tool %s: %s", name, exc)
        result = {"error": str(exc)}
    return [types.TextContent(type="text", text=json.dumps(result, indent=2, default=str))]


def build_server(registry: ToolRegistry) -> Server:
    """Create an MCP server whose tools are served from `registry`."""
    server: Server = Server(SERVER_NAME)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return describe_tools(registry)

    @server.call_tool()
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        return call_tool(registry, name, arguments)

    return server


async def run_stdio_server(registry: ToolRegistry, *, version: str) -> None:
    """Serve the registry over stdin/stdout until the client disconnects."""
    server = build_server(registry)
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=version,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )
