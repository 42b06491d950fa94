"""Value and origin models for tracked YAML properties."""

from trackedyaml.models.origin import OriginTrackedValue, SourceLocation

__all__ = [
    "OriginTrackedValue",
    "SourceLocation",
]
