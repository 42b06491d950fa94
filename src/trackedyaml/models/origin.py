"""Origin models: where in a YAML resource a configuration value came from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict


class SourceLocation(BaseModel):
    """Points to the exact location of a value in its YAML source.

    ``line`` and ``column`` are 1-based.
    """

    model_config = ConfigDict(frozen=True)

    resource: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.resource}:{self.line}:{self.column}"


@dataclass(frozen=True)
class OriginTrackedValue:
    """A parsed value paired with the location it was read from."""

    value: Any
    origin: SourceLocation

    @classmethod
    def of(cls, value: Any, origin: SourceLocation | None) -> Any:
        """Wrap ``value`` unless it is ``None`` or already tracked."""
        if value is None or isinstance(value, OriginTrackedValue):
            return value
        if origin is None:
            return value
        return cls(value=value, origin=origin)

    def __str__(self) -> str:
        return str(self.value)
