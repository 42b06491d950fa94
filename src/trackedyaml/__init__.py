"""Origin-tracked YAML property sources."""

from trackedyaml.env import (
    OriginTrackedMapPropertySource,
    PropertySourceLoader,
    PropertySourceLoaderRegistry,
    YamlPropertySourceLoader,
)
from trackedyaml.errors import (
    DuplicateKeyError,
    TrackedYamlError,
    UnsupportedExtensionError,
    YAMLCapabilityMissingError,
    YAMLExpansionError,
)
from trackedyaml.models import OriginTrackedValue, SourceLocation
from trackedyaml.resources import FileResource, StringResource, TextResource
from trackedyaml.settings import Settings

__all__ = [
    "DuplicateKeyError",
    "FileResource",
    "OriginTrackedMapPropertySource",
    "OriginTrackedValue",
    "PropertySourceLoader",
    "PropertySourceLoaderRegistry",
    "Settings",
    "SourceLocation",
    "StringResource",
    "TextResource",
    "TrackedYamlError",
    "UnsupportedExtensionError",
    "YAMLCapabilityMissingError",
    "YAMLExpansionError",
    "YamlPropertySourceLoader",
]
