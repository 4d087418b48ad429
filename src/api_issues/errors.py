"""Error taxonomy for the issue registry.

Three kinds of failure exist:

  - internal consistency (``CatalogError``): the compiled-in table or an
    inheritance chain is broken.  Fatal; never defaulted away.
  - invalid argument (``InvalidSeverityError``): a caller asked for a level
    that cannot be stored, e.g. ``inherit`` through an override.
  - configuration (``ConfigError``): a severity config file is missing or
    does not match its schema.

Unknown issue ids/names are *not* errors: lookups return ``None`` and
overrides return ``False`` so batch configuration can keep going.  Only
``IssueRegistry.effective_severity`` raises ``UnknownIssueError``, since a
caller asking for the severity of a non-existent issue has a bug.
"""

from __future__ import annotations

from pathlib import Path


class IssueRegistryError(Exception):
    """Base class for every error raised by ``api_issues``."""


class CatalogError(IssueRegistryError, RuntimeError):
    """The issue catalog violates one of its invariants."""


class InvalidSeverityError(IssueRegistryError, ValueError):
    """A severity value was rejected for the requested operation."""


class UnknownIssueError(IssueRegistryError, KeyError):
    """An issue was required (not merely looked up) but does not exist."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ConfigError(IssueRegistryError):
    """A severity configuration file could not be loaded."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path.as_posix()}: {message}"
        super().__init__(message)
