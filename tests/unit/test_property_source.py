"""Tests for the YAML property source loader and the property source wrapper."""

from __future__ import annotations

import pytest

from trackedyaml.env import yaml_loader as yaml_loader_module
from trackedyaml.env.property_source import OriginTrackedMapPropertySource
from trackedyaml.env.yaml_loader import YamlPropertySourceLoader
from trackedyaml.errors import DuplicateKeyError, YAMLCapabilityMissingError
from trackedyaml.models.origin import OriginTrackedValue, SourceLocation
from trackedyaml.resources import FileResource, StringResource
from tests.conftest import PROFILES_YAML, SAMPLE_YAML


class TestYamlPropertySourceLoader:
    def test_file_extensions(self) -> None:
        assert YamlPropertySourceLoader.file_extensions == ("yml", "yaml")

    def test_single_document_uses_plain_name(self, yaml_loader: YamlPropertySourceLoader) -> None:
        sources = yaml_loader.load("applicationConfig", StringResource(SAMPLE_YAML))
        assert len(sources) == 1
        assert sources[0].name == "applicationConfig"
        assert sources[0].immutable is True

    def test_multiple_documents_are_numbered(self, yaml_loader: YamlPropertySourceLoader) -> None:
        sources = yaml_loader.load("profiles", FileResource(PROFILES_YAML))
        assert [source.name for source in sources] == [
            "profiles (document #0)",
            "profiles (document #1)",
            "profiles (document #2)",
        ]
        assert [source.get_property("app.mode") for source in sources] == [
            "default",
            "dev",
            "prod",
        ]

    def test_empty_resource_yields_no_sources(self, yaml_loader: YamlPropertySourceLoader) -> None:
        assert yaml_loader.load("empty", StringResource("")) == []

    def test_application_file(
        self, yaml_loader: YamlPropertySourceLoader, application_resource: FileResource
    ) -> None:
        source = yaml_loader.load("application.yml", application_resource)[0]
        assert source.get_property("person.address") == "12 St James's Square"
        assert source.get_property("release.date") == "2024-01-01"
        assert source.get_property("release.version") == "1.2.3"
        assert source.get_property("server.port") == 8080
        origin = source.get_origin("release.date")
        assert origin is not None
        assert (origin.line, origin.column) == (13, 9)

    def test_duplicate_key_returns_nothing(self, yaml_loader: YamlPropertySourceLoader) -> None:
        with pytest.raises(DuplicateKeyError):
            yaml_loader.load("dup", StringResource("a: 1\na: 2\n"))

    def test_missing_yaml_library(
        self, yaml_loader: YamlPropertySourceLoader, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(yaml_loader_module, "YAML_MODULE", "trackedyaml_no_such_parser")
        with pytest.raises(YAMLCapabilityMissingError, match="ruamel.yaml was not found") as exc:
            yaml_loader.load("application.yml", StringResource(SAMPLE_YAML))
        assert exc.value.resource_name == "application.yml"
        assert "application.yml" in str(exc.value)

    def test_missing_parent_package(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(yaml_loader_module, "YAML_MODULE", "no_such_namespace.yaml")
        assert yaml_loader_module.yaml_available() is False


class TestOriginTrackedMapPropertySource:
    @pytest.fixture
    def source(self) -> OriginTrackedMapPropertySource:
        origin = SourceLocation(resource="app.yml", line=1, column=7)
        return OriginTrackedMapPropertySource(
            "app.yml",
            {"name": OriginTrackedValue("demo", origin), "plain": 42},
            immutable=True,
        )

    def test_get_property_unwraps(self, source: OriginTrackedMapPropertySource) -> None:
        assert source.get_property("name") == "demo"
        assert source.get_property("plain") == 42
        assert source.get_property("missing") is None

    def test_get_origin(self, source: OriginTrackedMapPropertySource) -> None:
        assert str(source.get_origin("name")) == "app.yml:1:7"
        assert source.get_origin("plain") is None
        assert source.get_origin("missing") is None

    def test_property_names(self, source: OriginTrackedMapPropertySource) -> None:
        assert source.property_names == ["name", "plain"]
        assert source.contains_property("name")
        assert "plain" in source
        assert len(source) == 2

    def test_immutable_source_is_read_only(self, source: OriginTrackedMapPropertySource) -> None:
        with pytest.raises(TypeError):
            source.source["name"] = "other"  # type: ignore[index]

    def test_immutable_source_is_detached_from_input(self) -> None:
        data = {"a": 1}
        source = OriginTrackedMapPropertySource("x", data, immutable=True)
        data["b"] = 2
        assert "b" not in source
