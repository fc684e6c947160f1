"""Tool dispatch exports."""

from .tool_arguments import ToolArgumentError
from .tool_models import ToolContext, ToolDefinition
from .tool_registry import ToolNotFoundError, ToolRegistry, build_default_registry

__all__ = [
    "ToolArgumentError",
    "ToolContext",
    "ToolDefinition",
    "ToolNotFoundError",
    "ToolRegistry",
    "build_default_registry",
]
