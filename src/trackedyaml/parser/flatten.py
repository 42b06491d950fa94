"""Flatten constructed YAML documents into dotted-key property maps."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from trackedyaml.errors import YAMLExpansionError

DOCUMENT_KEY = "document"
DEFAULT_MAX_EXPANDED_NODES = 1_000_000


def as_document_map(data: Any) -> Mapping[Any, Any]:
    """Return the document root as a mapping.

    A document may be a bare scalar or sequence; it is then exposed under the
    ``document`` key.
    """
    if isinstance(data, Mapping):
        return data
    return {DOCUMENT_KEY: data}


def key_segment(key: Any) -> str:
    """Render a mapping key as a path segment.

    String keys are used verbatim, anything else is bracketed (``[1]``,
    ``[true]``, ``[[a, b]]``).
    """
    if isinstance(key, str):
        return key
    return f"[{_key_text(key)}]"


def _key_text(key: Any) -> str:
    if isinstance(key, bool):
        return str(key).lower()
    if key is None:
        return "null"
    if isinstance(key, tuple):
        return "[" + ", ".join(_key_text(item) for item in key) + "]"
    return str(key)


def join_path(path: str, segment: str) -> str:
    if not path:
        return segment
    if segment.startswith("["):
        return path + segment
    return f"{path}.{segment}"


class _Flattener:
    """Single-use walker that owns the output map and the expansion guards."""

    def __init__(self, resource: str, max_nodes: int) -> None:
        self.resource = resource
        self.max_nodes = max_nodes
        self.result: dict[str, Any] = {}
        self._visited = 0
        # containers on the current path, by identity
        self._active: set[int] = set()

    def flatten(self, root: Mapping[Any, Any]) -> dict[str, Any]:
        self._walk_mapping(root, "")
        return self.result

    def _count(self, path: str) -> None:
        self._visited += 1
        if self._visited > self.max_nodes:
            raise YAMLExpansionError(
                self.resource,
                path,
                f"expanded document exceeds maximum node count ({self.max_nodes:,})",
            )

    def _enter(self, container: Any, path: str) -> None:
        if id(container) in self._active:
            raise YAMLExpansionError(self.resource, path, "recursive alias reference")
        self._active.add(id(container))

    def _walk_mapping(self, mapping: Mapping[Any, Any], path: str) -> None:
        self._enter(mapping, path)
        for key, value in mapping.items():
            self._walk(value, join_path(path, key_segment(key)))
        self._active.discard(id(mapping))

    def _walk(self, value: Any, path: str) -> None:
        self._count(path)
        if isinstance(value, Mapping):
            self._walk_mapping(value, path)
        elif isinstance(value, (list, tuple)):
            if not value:
                self.result[path] = ""
                return
            self._enter(value, path)
            for index, item in enumerate(value):
                self._walk(item, f"{path}[{index}]")
            self._active.discard(id(value))
        else:
            self.result[path] = "" if value is None else value


def flatten(
    data: Any,
    resource: str = "<unknown>",
    max_nodes: int = DEFAULT_MAX_EXPANDED_NODES,
) -> dict[str, Any]:
    """Flatten one constructed document into an insertion-ordered dotted-key map.

    Nested mapping keys are joined with ``.``, sequence items are addressed as
    ``key[i]``. Leaves (including origin-tracked values) are stored as-is and
    ``None`` becomes ``""``.

    Raises:
        YAMLExpansionError: if the document refers to itself through an alias,
            or flattening visits more than ``max_nodes`` nodes.
    """
    return _Flattener(resource, max_nodes).flatten(as_document_map(data))
