"""Severity configuration files.

A config file is JSON or YAML (chosen by extension) and is validated
against the bundled ``severity_config.schema.json``::

    preset: released-compatibility
    warnings_as_errors: false
    severities:
      error: [AddedMethod, "7"]
      hidden: "101,102"

Severity names are applied in the order ``hidden, info, lint, warning,
error`` so a file that names the same issue twice ends on the stricter
level.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from api_issues.configuration import apply_preset
from api_issues.errors import ConfigError
from api_issues.model import Severity
from api_issues.registry import IssueRegistry

logger = logging.getLogger(__name__)

SCHEMA_DIR = "data/schemas"
CONFIG_SCHEMA = "severity_config.schema.json"


@dataclass(frozen=True)
class RegistryConfig:
    """Immutable severity configuration."""

    preset: str | None = None
    warnings_as_errors: bool = False
    lints_as_errors: bool = False
    # (token, severity) pairs in application order
    severities: tuple[tuple[str, Severity], ...] = field(default_factory=tuple)


def load_schema(name: str = CONFIG_SCHEMA) -> dict[str, Any]:
    """Load a schema bundled as package data."""
    schema = resources.files("api_issues").joinpath(SCHEMA_DIR).joinpath(name)
    return json.loads(schema.read_text(encoding="utf-8"))


def _read(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError("config file does not exist", path=path) from None
    except OSError as exc:
        raise ConfigError(f"cannot read config file: {exc}", path=path) from exc

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(text) or {}
        return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"cannot parse config file: {exc}", path=path) from exc


def parse_config(data: Any, *, path: Path | None = None) -> RegistryConfig:
    """Validate raw config data and turn it into a ``RegistryConfig``."""
    try:
        jsonschema.validate(instance=data, schema=load_schema())
    except jsonschema.ValidationError as exc:
        where = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ConfigError(f"{where}: {exc.message}", path=path) from None

    by_level: dict[Severity, list[str]] = {}
    for name, tokens in (data.get("severities") or {}).items():
        if not isinstance(tokens, list):
            tokens = [tokens]
        by_level.setdefault(Severity.parse(name), []).extend(str(t) for t in tokens)

    pairs = tuple(
        (token, severity)
        for severity in sorted(by_level)
        for token in by_level[severity]
    )
    preset = data.get("preset")
    return RegistryConfig(
        preset=None if preset in (None, "none") else preset,
        warnings_as_errors=bool(data.get("warnings_as_errors", False)),
        lints_as_errors=bool(data.get("lints_as_errors", False)),
        severities=pairs,
    )


def load_config(path: Path) -> RegistryConfig:
    """Load and validate a JSON/YAML severity config file."""
    config = parse_config(_read(path), path=path)
    logger.debug(
        "loaded %d severity overrides from %s", len(config.severities), path
    )
    return config


def apply_config(registry: IssueRegistry, config: RegistryConfig) -> list[str]:
    """Apply a config to *registry*; return the tokens that did not resolve.

    The preset goes in first, then the explicit severities as user
    requests.
    """
    if config.preset is not None:
        apply_preset(registry, config.preset)
    return registry.configure_severities(config.severities, user_requested=True)
