"""Abstract property source loader."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from trackedyaml.env.property_source import OriginTrackedMapPropertySource
from trackedyaml.resources import TextResource


class PropertySourceLoader(ABC):
    """Turns a text resource into zero or more named property sources."""

    file_extensions: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def load(self, name: str, resource: TextResource) -> list[OriginTrackedMapPropertySource]:
        """Load ``resource`` into property sources named after ``name``."""
