"""YAML parsing with origin tracking for tracked-yaml property sources."""

from trackedyaml.parser.constructor import NodeRole, OriginTrackingConstructor
from trackedyaml.parser.flatten import flatten
from trackedyaml.parser.loader import TrackedYamlLoader
from trackedyaml.parser.resolver import InferenceRuleResolver

__all__ = [
    "InferenceRuleResolver",
    "NodeRole",
    "OriginTrackingConstructor",
    "TrackedYamlLoader",
    "flatten",
]
