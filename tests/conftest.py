"""Shared test fixtures for tracked-yaml."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from trackedyaml.env.yaml_loader import YamlPropertySourceLoader
from trackedyaml.parser.loader import TrackedYamlLoader
from trackedyaml.resources import FileResource, StringResource
from trackedyaml.settings import Settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"
APPLICATION_YML = FIXTURES_DIR / "application.yml"
PROFILES_YAML = FIXTURES_DIR / "profiles.yaml"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a stray ``.env`` or ``TRACKED_YAML_*`` variable out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "DISABLED_IMPLICIT_TYPES", "MAX_EXPANDED_NODES"):
        monkeypatch.delenv(f"TRACKED_YAML_{name}", raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def yaml_loader() -> YamlPropertySourceLoader:
    return YamlPropertySourceLoader()


@pytest.fixture
def application_resource() -> FileResource:
    return FileResource(APPLICATION_YML)


def load_string(
    content: str, name: str = "test.yml", settings: Settings | None = None
) -> list[dict[str, Any]]:
    """Load YAML text through a fresh TrackedYamlLoader."""
    return TrackedYamlLoader(StringResource(content, name), settings).load()


SAMPLE_YAML = """\
server:
  port: 8080
  address: 127.0.0.1
spring:
  profiles:
    - dev
    - test
name: demo
"""
