"""Text resources that YAML property sources are loaded from."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, TextIO


class TextResource(Protocol):
    """A named, readable piece of text."""

    @property
    def description(self) -> str:
        """Identity used in origins and error messages."""
        ...

    def open(self) -> TextIO:
        """Open a fresh text stream over the resource content."""
        ...


class _NamedStringIO(io.StringIO):
    """StringIO carrying a ``name`` so parser marks point at the resource."""

    def __init__(self, content: str, name: str) -> None:
        super().__init__(content)
        self.name = name


@dataclass(frozen=True)
class FileResource:
    """A UTF-8 encoded file on disk."""

    path: Path

    @property
    def description(self) -> str:
        return str(self.path)

    @property
    def filename(self) -> str:
        return self.path.name

    def open(self) -> TextIO:
        return self.path.open("r", encoding="utf-8")


@dataclass(frozen=True)
class StringResource:
    """In-memory YAML text, mostly useful for tests and embedded defaults."""

    content: str
    name: str = "<string>"

    @property
    def description(self) -> str:
        return self.name

    @property
    def filename(self) -> str:
        return self.name

    def open(self) -> TextIO:
        return _NamedStringIO(self.content, self.name)
