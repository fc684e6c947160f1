"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATASET = "production"
DEFAULT_FILE_PATTERN = "{project_id}-{dataset}.json"
DEFAULT_API_HOST = "api.sanity.io"
DEFAULT_API_VERSION = "v2024-10-01"
DEFAULT_TOKEN_ENV = "SANITY_API_TOKEN"


@dataclass(frozen=True)
class SchemaStoreSettings:
    """Location of extracted schema JSON files."""

    directory: Path
    file_pattern: str = DEFAULT_FILE_PATTERN
    default_dataset: str = DEFAULT_DATASET

    def schema_path(self, project_id: str, dataset: str) -> Path:
        """Return the schema file path for a project and dataset."""
        return self.directory / self.file_pattern.format(project_id=project_id, dataset=dataset)


@dataclass(frozen=True)
class ApiSettings:
    """Content platform HTTP API settings."""

    token: str | None
    api_host: str = DEFAULT_API_HOST
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: int = 30


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    schema_store: SchemaStoreSettings
    api: ApiSettings
