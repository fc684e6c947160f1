"""Schema management exports."""

from .reference_resolver import resolve_references
from .schema_models import FieldDefinition, TargetRef, TypeDefinition, parse_snapshot
from .schema_queries import (
    TypeNotFoundError,
    get_type,
    get_type_with_references,
    list_type_names,
)
from .schema_store import SchemaUnavailableError, load_snapshot

__all__ = [
    "FieldDefinition",
    "TargetRef",
    "TypeDefinition",
    "TypeNotFoundError",
    "SchemaUnavailableError",
    "get_type",
    "get_type_with_references",
    "list_type_names",
    "load_snapshot",
    "parse_snapshot",
    "resolve_references",
]
