"""Read-only property sources backed by origin-tracked maps."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from trackedyaml.models.origin import OriginTrackedValue, SourceLocation


class OriginTrackedMapPropertySource:
    """A named key/value source whose values may carry their origin.

    Lookups return the plain value; :meth:`get_origin` exposes where it was
    declared.
    """

    def __init__(self, name: str, source: Mapping[str, Any], immutable: bool = False) -> None:
        self._name = name
        self._source = MappingProxyType(dict(source)) if immutable else source
        self._immutable = immutable

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> Mapping[str, Any]:
        return self._source

    @property
    def immutable(self) -> bool:
        return self._immutable

    @property
    def property_names(self) -> list[str]:
        return list(self._source.keys())

    def contains_property(self, name: str) -> bool:
        return name in self._source

    def get_property(self, name: str) -> Any:
        value = self._source.get(name)
        if isinstance(value, OriginTrackedValue):
            return value.value
        return value

    def get_origin(self, name: str) -> SourceLocation | None:
        value = self._source.get(name)
        if isinstance(value, OriginTrackedValue):
            return value.origin
        return None

    def __contains__(self, name: object) -> bool:
        return name in self._source

    def __iter__(self) -> Iterator[str]:
        return iter(self._source)

    def __len__(self) -> int:
        return len(self._source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, properties={len(self._source)})"
