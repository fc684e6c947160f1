"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "sanity-tools.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for sanity-schema-tools.
# Every setting is optional; remove a line to fall back to its default.

schema_store:
  # Directory holding schema files produced by `npx sanity@latest schema extract`.
  # Relative paths resolve against this file.
  directory: "schemas"
  # File name inside the directory; must contain {project_id} and {dataset}.
  file_pattern: "{project_id}-{dataset}.json"
  # Dataset used when a tool call does not name one.
  default_dataset: "production"

api:
  # Prefer token_env over an inline token so secrets stay out of this file.
  # token: "<OPTIONAL>"
  token_env: "SANITY_API_TOKEN"
  api_host: "api.sanity.io"
  api_version: "v2024-10-01"
  timeout_seconds: 30
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
