"""Tests for severity config files (JSON / YAML + schema validation)."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from api_issues.config import RegistryConfig, apply_config, load_config, load_schema, parse_config
from api_issues.errors import ConfigError
from api_issues.model import Severity
from api_issues.registry import IssueRegistry


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


# ═══════════════════════════════════════════════════════════════════════
#  Loading
# ═══════════════════════════════════════════════════════════════════════

class TestSchema:
    """The config schema ships as package data."""

    def test_bundled_schema_loads(self) -> None:
        schema = load_schema()
        assert schema["$id"] == "severity_config.schema.json"
        assert schema["additionalProperties"] is False
        assert set(schema["properties"]) >= {"preset", "severities"}


class TestLoadConfig:
    """load_config reads YAML or JSON and normalises severities."""

    def test_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "sev.yaml", """\
            preset: released-compatibility
            warnings_as_errors: true
            severities:
              error: [AddedMethod, 7]
              hidden: "101,102"
        """)
        config = load_config(path)
        assert config.preset == "released-compatibility"
        assert config.warnings_as_errors is True
        assert config.lints_as_errors is False
        # hidden is applied before error
        assert config.severities == (
            ("101,102", Severity.HIDDEN),
            ("AddedMethod", Severity.ERROR),
            ("7", Severity.ERROR),
        )

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "sev.json"
        path.write_text(json.dumps({
            "lints_as_errors": True,
            "severities": {"warn": "Typo", "lint": ["300"]},
        }), encoding="utf-8")
        config = load_config(path)
        assert config.lints_as_errors is True
        assert config.severities == (
            ("300", Severity.LINT),
            ("Typo", Severity.WARNING),
        )

    def test_empty_yaml_is_default(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "empty.yml", "")
        assert load_config(path) == RegistryConfig()

    def test_preset_none(self) -> None:
        assert parse_config({"preset": "none"}).preset is None


class TestConfigErrors:
    """Bad config files raise ConfigError naming the file."""

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "nope.yaml"
        with pytest.raises(ConfigError, match="does not exist") as exc_info:
            load_config(path)
        assert exc_info.value.path == path

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "bad.yaml", "severities: [unclosed\n")
        with pytest.raises(ConfigError, match="cannot parse"):
            load_config(path)

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "bad.json", "{not json")
        with pytest.raises(ConfigError, match="cannot parse"):
            load_config(path)

    def test_unknown_key(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "x.yaml", "colour: true\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_unknown_severity_name(self) -> None:
        with pytest.raises(ConfigError, match="severities"):
            parse_config({"severities": {"fatal": "7"}})

    def test_inherit_not_allowed(self) -> None:
        with pytest.raises(ConfigError):
            parse_config({"severities": {"inherit": "28"}})

    def test_unknown_preset(self) -> None:
        with pytest.raises(ConfigError, match="preset"):
            parse_config({"preset": "strict"})

    def test_root_must_be_mapping(self) -> None:
        with pytest.raises(ConfigError):
            parse_config(["error", "7"])


# ═══════════════════════════════════════════════════════════════════════
#  Applying
# ═══════════════════════════════════════════════════════════════════════

class TestApplyConfig:
    """apply_config writes the preset and then the user overrides."""

    def test_preset_then_overrides(self) -> None:
        registry = IssueRegistry()
        config = parse_config({
            "preset": "released-compatibility",
            "severities": {"warning": ["AddedPackage"], "error": "Typo,NoSuchIssue"},
        })
        unresolved = apply_config(registry, config)

        assert unresolved == ["NoSuchIssue"]
        assert registry.effective_severity("AddedPackage") is Severity.WARNING
        assert registry.is_user_set("AddedPackage")
        assert registry.effective_severity("AddedClass") is Severity.HIDDEN
        assert not registry.is_user_set("AddedClass")
        assert registry.effective_severity("Typo") is Severity.ERROR

    def test_default_config_is_noop(self) -> None:
        registry = IssueRegistry()
        assert apply_config(registry, RegistryConfig()) == []
        assert not any(registry.is_user_set(i) for i in registry)
