"""Exceptions raised while loading tracked YAML property sources.

Malformed YAML is not wrapped: ``ruamel.yaml`` errors reach the caller as-is.
"""

from __future__ import annotations

from typing import Any


class TrackedYamlError(Exception):
    """Base class for all tracked-yaml errors."""


class YAMLCapabilityMissingError(TrackedYamlError):
    """Raised when the YAML parsing library is not importable."""

    def __init__(self, name: str) -> None:
        self.resource_name = name
        super().__init__(f"Attempted to load {name} but ruamel.yaml was not found")


class DuplicateKeyError(TrackedYamlError):
    """Raised when a mapping declares the same key twice.

    Kept apart from parse errors: the YAML is well-formed, the configuration
    is not.
    """

    def __init__(self, resource: str, key: Any, line: int, column: int) -> None:
        self.resource = resource
        self.key = key
        self.line = line
        self.column = column
        super().__init__(f'Duplicate key "{key}" in {resource} at line {line}, column {column}')


class YAMLExpansionError(TrackedYamlError):
    """Raised when alias expansion cannot be flattened safely.

    Covers recursive anchors and documents whose expanded form exceeds the
    configured node budget.
    """

    def __init__(self, resource: str, path: str, reason: str) -> None:
        self.resource = resource
        self.path = path
        self.reason = reason
        where = f" at '{path}'" if path else ""
        super().__init__(f"Cannot flatten {resource}{where}: {reason}")


class UnsupportedExtensionError(TrackedYamlError):
    """Raised when no property source loader is registered for an extension."""

    def __init__(self, extension: str, available: list[str]) -> None:
        self.extension = extension
        self.available = available
        super().__init__(
            f"Unsupported file extension '{extension}'. Available: {', '.join(available)}"
        )
