"""SafeConstructor that reports every constructed value node to a hook."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from enum import Enum
from typing import Any

from ruamel.yaml.constructor import ConstructorError, SafeConstructor
from ruamel.yaml.constructor import DuplicateKeyError as YAMLDuplicateKeyError
from ruamel.yaml.nodes import MappingNode, Node

from trackedyaml.errors import DuplicateKeyError

NodeHook = Callable[[Node, Any], Any]


class NodeRole(Enum):
    """Structural role of a node inside its parent."""

    KEY = "key"
    VALUE = "value"


class OriginTrackingConstructor(SafeConstructor):
    """Construct Python objects and pass each value node through ``node_hook``.

    The role of every node is carried down the construction walk: mapping keys
    are built in the ``KEY`` role and never reach the hook, everything else
    (document roots, sequence items, mapping values) is a ``VALUE``.

    Duplicate keys within one mapping raise :class:`DuplicateKeyError`. Keys
    merged in through ``<<`` may be overridden by the mapping's own keys.
    """

    def __init__(self, preserve_quotes: bool | None = None, loader: Any = None) -> None:
        super().__init__(preserve_quotes=preserve_quotes, loader=loader)
        self.allow_duplicate_keys = False
        self.node_hook: NodeHook | None = None
        # > 0 while the subtree of a mapping key is being constructed
        self._key_depth = 0

    def construct_object(self, node: Any, deep: bool = False) -> Any:
        role = NodeRole.KEY if self._key_depth else NodeRole.VALUE
        return self.construct_node(node, role, deep=deep)

    def construct_node(self, node: Node, role: NodeRole, deep: bool = False) -> Any:
        data = super().construct_object(node, deep=deep)
        if role is NodeRole.KEY or self.node_hook is None:
            return data
        return self.node_hook(node, data)

    def construct_mapping(self, node: Any, deep: bool = False) -> Any:
        if not isinstance(node, MappingNode):
            raise ConstructorError(
                None, None, f"expected a mapping node, but found {node.id!s}", node.start_mark
            )
        try:
            self.flatten_mapping(node)
        except YAMLDuplicateKeyError as exc:
            # raised for a second ``<<`` in the same mapping
            mark = exc.problem_mark
            raise DuplicateKeyError(
                resource=str(mark.name), key="<<", line=mark.line + 1, column=mark.column + 1
            ) from exc
        # flatten_mapping prepends merged pairs to node.value
        merged = getattr(node, "merge", None) or []
        mapping: dict[Any, Any] = self.yaml_base_dict_type()
        for key_node, value_node in merged:
            key = self._construct_key(node, key_node)
            mapping[key] = self.construct_object(value_node, deep=deep)

        seen: set[Any] = set()
        for key_node, value_node in node.value[len(merged) :]:
            key = self._construct_key(node, key_node)
            if key in seen:
                mark = key_node.start_mark
                raise DuplicateKeyError(
                    resource=str(mark.name), key=key, line=mark.line + 1, column=mark.column + 1
                )
            seen.add(key)
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping

    def _construct_key(self, node: MappingNode, key_node: Node) -> Hashable:
        self._key_depth += 1
        try:
            key = self.construct_node(key_node, NodeRole.KEY, deep=True)
        finally:
            self._key_depth -= 1
        # lists are not hashable, but tuples are
        if isinstance(key, list):
            key = tuple(key)
        if not isinstance(key, Hashable):
            raise ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                "found unhashable key",
                key_node.start_mark,
            )
        return key
