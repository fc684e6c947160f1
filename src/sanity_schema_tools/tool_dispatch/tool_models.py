"""Tool dispatch entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from sanity_schema_tools.configuration.runtime_settings import Configuration
from sanity_schema_tools.platform_api.api_client import SanityApiClient

ToolHandler = Callable[[Mapping[str, Any]], Any]


@dataclass(frozen=True)
class ToolDefinition:
    """A callable tool with its JSON Schema input contract."""

    name: str
    description: str
    input_schema: Mapping[str, Any]
    handler: ToolHandler


@dataclass(frozen=True)
class ToolContext:
    """Collaborators shared by all tool handlers."""

    configuration: Configuration
    api_client_factory: Callable[[], SanityApiClient]

    @staticmethod
    def from_configuration(configuration: Configuration) -> ToolContext:
        return ToolContext(
            configuration=configuration,
            api_client_factory=lambda: SanityApiClient(configuration.api),
        )

    @property
    def default_dataset(self) -> str:
        return self.configuration.schema_store.default_dataset
