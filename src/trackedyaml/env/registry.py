"""Property source loader registry: dispatch resources by file extension."""

from __future__ import annotations

from pathlib import PurePath

from trackedyaml.env.base import PropertySourceLoader
from trackedyaml.errors import UnsupportedExtensionError


def _normalize(extension: str) -> str:
    return extension.lstrip(".").lower()


class PropertySourceLoaderRegistry:
    """Registry for property source loaders, keyed by file extension."""

    _loaders: dict[str, type[PropertySourceLoader]] = {}

    @classmethod
    def register(cls, loader_class: type[PropertySourceLoader]) -> type[PropertySourceLoader]:
        """Register a loader class. Can be used as a decorator."""
        for extension in loader_class.file_extensions:
            cls._loaders[_normalize(extension)] = loader_class
        return loader_class

    @classmethod
    def get(cls, extension: str) -> PropertySourceLoader:
        """Get an instance of the loader handling ``extension``."""
        key = _normalize(extension)
        if key not in cls._loaders:
            raise UnsupportedExtensionError(key, available=cls.available())
        return cls._loaders[key]()

    @classmethod
    def for_resource(cls, filename: str) -> PropertySourceLoader:
        """Get the loader matching the extension of ``filename``."""
        return cls.get(PurePath(filename).suffix)

    @classmethod
    def available(cls) -> list[str]:
        """List registered extensions."""
        return sorted(cls._loaders.keys())

    @classmethod
    def reset(cls) -> None:
        """Clear all registered loaders (for testing)."""
        cls._loaders.clear()
