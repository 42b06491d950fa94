"""Property source loader for ``.yml`` / ``.yaml`` resources."""

from __future__ import annotations

import importlib.util
import logging
from typing import ClassVar

from trackedyaml.env.base import PropertySourceLoader
from trackedyaml.env.property_source import OriginTrackedMapPropertySource
from trackedyaml.env.registry import PropertySourceLoaderRegistry
from trackedyaml.errors import YAMLCapabilityMissingError
from trackedyaml.resources import TextResource
from trackedyaml.settings import Settings

logger = logging.getLogger("trackedyaml.env")

YAML_MODULE = "ruamel.yaml"


def yaml_available() -> bool:
    try:
        return importlib.util.find_spec(YAML_MODULE) is not None
    except ModuleNotFoundError:
        # parent package ``ruamel`` missing
        return False


@PropertySourceLoaderRegistry.register
class YamlPropertySourceLoader(PropertySourceLoader):
    """Loads each YAML document of a resource as a read-only property source.

    A single document is named ``name``; several documents are named
    ``name (document #0)``, ``name (document #1)`` and so on. Empty documents
    are skipped, so an empty resource yields no sources at all.
    """

    file_extensions: ClassVar[tuple[str, ...]] = ("yml", "yaml")

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings

    def load(self, name: str, resource: TextResource) -> list[OriginTrackedMapPropertySource]:
        if not yaml_available():
            raise YAMLCapabilityMissingError(name)
        # deferred so the capability check above can report a missing parser
        from trackedyaml.parser.loader import TrackedYamlLoader

        loaded = TrackedYamlLoader(resource, self._settings).load()
        if not loaded:
            logger.info("No documents found in %s", name)
            return []
        property_sources: list[OriginTrackedMapPropertySource] = []
        for index, document in enumerate(loaded):
            document_number = f" (document #{index})" if len(loaded) != 1 else ""
            property_sources.append(
                OriginTrackedMapPropertySource(name + document_number, document, immutable=True)
            )
        logger.info("Loaded %d property source(s) from %s", len(property_sources), name)
        return property_sources
