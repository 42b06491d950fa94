"""YAML loader that keeps the source position of every value."""

from __future__ import annotations

import logging
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.nodes import CollectionNode, Node, ScalarNode

from trackedyaml.models.origin import OriginTrackedValue, SourceLocation
from trackedyaml.parser.constructor import OriginTrackingConstructor
from trackedyaml.parser.flatten import flatten
from trackedyaml.parser.resolver import InferenceRuleResolver
from trackedyaml.resources import TextResource
from trackedyaml.settings import Settings

logger = logging.getLogger("trackedyaml.parser")


class TrackedYamlLoader:
    """Load a (possibly multi-document) YAML resource into flattened maps.

    Every scalar, and every empty sequence or mapping, ends up wrapped in an
    :class:`OriginTrackedValue` pointing at its position in the resource.
    Mapping keys stay plain. Each call to :meth:`load` uses a fresh
    ``ruamel.yaml`` instance, so loaders can run on separate threads.
    """

    def __init__(self, resource: TextResource, settings: Settings | None = None) -> None:
        self._resource = resource
        self._settings = settings or Settings()

    @property
    def resource(self) -> TextResource:
        return self._resource

    def _create_yaml(self) -> YAML:
        yaml = YAML(typ="safe", pure=True)
        yaml.Constructor = OriginTrackingConstructor
        yaml.Resolver = InferenceRuleResolver
        yaml.allow_duplicate_keys = False
        yaml.resolver.disable(self._settings.disabled_implicit_types)
        yaml.constructor.node_hook = self._track_origin
        return yaml

    # -- node hook -----------------------------------------------------------

    def _track_origin(self, node: Node, value: Any) -> Any:
        if isinstance(node, ScalarNode) or (
            isinstance(node, CollectionNode) and not node.value
        ):
            return OriginTrackedValue.of("" if value is None else value, self._origin(node))
        return value

    def _origin(self, node: Node) -> SourceLocation:
        mark = node.start_mark
        return SourceLocation(
            resource=self._resource.description,
            line=mark.line + 1,
            column=mark.column + 1,
        )

    # -- public loading API --------------------------------------------------

    def load(self) -> list[dict[str, Any]]:
        """Return one flattened map per non-empty document, in stream order."""
        description = self._resource.description
        yaml = self._create_yaml()
        documents: list[dict[str, Any]] = []
        with self._resource.open() as stream:
            for index, data in enumerate(yaml.load_all(stream)):
                data = _document_data(data)
                if data is None:
                    logger.debug("Skipping empty document #%d in %s", index, description)
                    continue
                documents.append(
                    flatten(
                        data,
                        resource=description,
                        max_nodes=self._settings.max_expanded_nodes,
                    )
                )
        logger.debug("Loaded %d document(s) from %s", len(documents), description)
        return documents


def _document_data(data: Any) -> Any:
    """Map an empty document (blank, ``~`` or ``""``) to ``None``."""
    raw = data.value if isinstance(data, OriginTrackedValue) else data
    if isinstance(raw, str) and not raw:
        return None
    return data
