"""Schema snapshot loading from extracted schema JSON files."""

from __future__ import annotations

import json
import logging

from sanity_schema_tools.configuration.runtime_settings import SchemaStoreSettings

from .schema_models import TypeDefinition, parse_snapshot

logger = logging.getLogger(__name__)


class SchemaUnavailableError(Exception):
    """Raised when no usable schema snapshot exists for a project and dataset."""


def load_snapshot(
    settings: SchemaStoreSettings, project_id: str, dataset: str | None = None
) -> tuple[TypeDefinition, ...]:
    """Load the schema snapshot for `project_id`/`dataset`.

    Falls back to the configured default dataset when `dataset` is empty.
    """
    resolved_dataset = dataset or settings.default_dataset
    schema_path = settings.schema_path(project_id, resolved_dataset)
    logger.debug("Loading schema for %s/%s from %s", project_id, resolved_dataset, schema_path)
    try:
        text = schema_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SchemaUnavailableError(
            f"Schema file not found for project {project_id} and dataset {resolved_dataset}. "
            "Please run 'npx sanity@latest schema extract' in your Sanity studio and "
            f"save the output to {schema_path}"
        ) from exc
    except OSError as exc:
        raise SchemaUnavailableError(f"Failed to read schema file {schema_path}: {exc}") from exc

    try:
        entries = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaUnavailableError(f"Invalid schema JSON in {schema_path}: {exc}") from exc
    if not isinstance(entries, list):
        raise SchemaUnavailableError(f"Schema file {schema_path} must contain a JSON array.")
    return parse_snapshot(entries)
