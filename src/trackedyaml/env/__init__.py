"""Property sources and their loaders."""

from trackedyaml.env.base import PropertySourceLoader
from trackedyaml.env.property_source import OriginTrackedMapPropertySource
from trackedyaml.env.registry import PropertySourceLoaderRegistry
from trackedyaml.env.yaml_loader import YamlPropertySourceLoader

__all__ = [
    "OriginTrackedMapPropertySource",
    "PropertySourceLoader",
    "PropertySourceLoaderRegistry",
    "YamlPropertySourceLoader",
]
