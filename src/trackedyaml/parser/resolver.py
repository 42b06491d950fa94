"""Implicit type resolution with a configurable deny list."""

from __future__ import annotations

from typing import Any, ClassVar

from ruamel.yaml.resolver import VersionedResolver

YAML_TAG_PREFIX = "tag:yaml.org,2002:"
TIMESTAMP_TAG = YAML_TAG_PREFIX + "timestamp"


def implicit_tag(type_name: str) -> str:
    """Expand a short type name (``timestamp``) to its full YAML tag."""
    if type_name.startswith("tag:"):
        return type_name
    return YAML_TAG_PREFIX + type_name


class InferenceRuleResolver(VersionedResolver):
    """VersionedResolver that never infers the tags in ``disabled_tags``.

    Only implicit resolution of plain scalars is affected: a scalar matching a
    disabled rule resolves to ``str``, while an explicit tag such as
    ``!!timestamp`` is still honoured by the constructor.
    """

    default_disabled_tags: ClassVar[frozenset[str]] = frozenset({TIMESTAMP_TAG})

    def __init__(self, version: Any = None, loader: Any = None, loadumper: Any = None) -> None:
        super().__init__(version=version, loader=loader, loadumper=loadumper)
        self.disabled_tags: frozenset[str] = self.default_disabled_tags

    def disable(self, type_names: list[str]) -> None:
        """Replace the deny list. Must be called before parsing starts."""
        self.disabled_tags = frozenset(implicit_tag(name) for name in type_names)
        self._version_implicit_resolver.clear()

    def add_version_implicit_resolver(
        self, version: Any, tag: Any, regexp: Any, first: Any
    ) -> None:
        if str(tag) in self.disabled_tags:
            # versioned_resolver indexes by version even when every rule is disabled
            self._version_implicit_resolver.setdefault(version, {})
            return
        super().add_version_implicit_resolver(version, tag, regexp, first)
