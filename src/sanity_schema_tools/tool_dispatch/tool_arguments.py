"""Validation helpers for tool call arguments."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


class ToolArgumentError(Exception):
    """Raised when a tool is called with missing or mistyped arguments."""


def require_string(arguments: Mapping[str, Any], key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str):
        raise ToolArgumentError(f"Argument '{key}' is required and must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ToolArgumentError(f"Argument '{key}' must not be empty.")
    return stripped


def optional_string(arguments: Mapping[str, Any], key: str, default: str) -> str:
    if arguments.get(key) is None:
        return default
    return require_string(arguments, key)


def optional_bool(arguments: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = arguments.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ToolArgumentError(f"Argument '{key}' must be a boolean.")
    return value


def optional_positive_int(arguments: Mapping[str, Any], key: str, default: int) -> int:
    value = arguments.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ToolArgumentError(f"Argument '{key}' must be an integer.")
    if value <= 0:
        raise ToolArgumentError(f"Argument '{key}' must be greater than zero.")
    return value


def optional_string_list(arguments: Mapping[str, Any], key: str) -> list[str] | None:
    """Accept a single string or a list of strings."""
    value = arguments.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ToolArgumentError(f"Argument '{key}' must be a string or a list of strings.")
