"""Configuration loader service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_API_HOST,
    DEFAULT_API_VERSION,
    DEFAULT_DATASET,
    DEFAULT_FILE_PATTERN,
    DEFAULT_TOKEN_ENV,
    ApiSettings,
    Configuration,
    SchemaStoreSettings,
)

DEFAULT_SCHEMA_DIRECTORY = "schemas"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(
    config_path: Path | str, *, environ: Mapping[str, str] | None = None
) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        schema_store=_parse_schema_store_section(parsed.get("schema_store"), path.parent),
        api=_parse_api_section(parsed.get("api"), environ if environ is not None else os.environ),
    )


def default_configuration(
    base_path: Path | None = None, *, environ: Mapping[str, str] | None = None
) -> Configuration:
    """Configuration used when no file is given: schemas under ./schemas, token from env."""
    base = base_path or Path.cwd()
    return Configuration(
        path=None,
        schema_store=_parse_schema_store_section({}, base),
        api=_parse_api_section({}, environ if environ is not None else os.environ),
    )


def _parse_schema_store_section(value: Any, base_path: Path) -> SchemaStoreSettings:
    section = _optional_mapping(value, "schema_store")
    directory = _require_non_empty_string(
        section.get("directory", DEFAULT_SCHEMA_DIRECTORY), "schema_store.directory"
    )
    file_pattern = _require_non_empty_string(
        section.get("file_pattern", DEFAULT_FILE_PATTERN), "schema_store.file_pattern"
    )
    for placeholder in ("{project_id}", "{dataset}"):
        if placeholder not in file_pattern:
            raise ConfigurationError(
                f"schema_store.file_pattern must contain the {placeholder} placeholder."
            )
    try:
        file_pattern.format(project_id="project", dataset="dataset")
    except (KeyError, IndexError, ValueError) as exc:
        raise ConfigurationError(
            "schema_store.file_pattern may only use the {project_id} and {dataset} "
            f"placeholders: {exc!r}"
        ) from exc
    default_dataset = _require_non_empty_string(
        section.get("default_dataset", DEFAULT_DATASET), "schema_store.default_dataset"
    )
    return SchemaStoreSettings(
        directory=_resolve_path(base_path, directory),
        file_pattern=file_pattern,
        default_dataset=default_dataset,
    )


def _parse_api_section(value: Any, environ: Mapping[str, str]) -> ApiSettings:
    section = _optional_mapping(value, "api")
    token = _optional_string(section.get("token"), "api.token")
    token_env = _require_non_empty_string(
        section.get("token_env", DEFAULT_TOKEN_ENV), "api.token_env"
    )
    if token is None:
        token = (environ.get(token_env) or "").strip() or None
    api_host = _require_non_empty_string(section.get("api_host", DEFAULT_API_HOST), "api.api_host")
    api_version = _require_non_empty_string(
        section.get("api_version", DEFAULT_API_VERSION), "api.api_version"
    )
    if not api_version.startswith("v"):
        raise ConfigurationError("api.api_version must start with 'v' (for example v2024-10-01).")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "api.timeout_seconds"
    )
    return ApiSettings(
        token=token,
        api_host=api_host,
        api_version=api_version,
        timeout_seconds=timeout_seconds,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path).expanduser()
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
