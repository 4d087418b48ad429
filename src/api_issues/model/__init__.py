"""Enums shared across the catalog, registry and CLI layers."""

from __future__ import annotations

from enum import Enum
from typing import Union

from api_issues.errors import InvalidSeverityError


class Severity(str, Enum):
    """Effective severity of an issue.

    Ordered from least to most severe; ``INHERIT`` is deliberately not a
    member, so anything typed ``Severity`` is already resolved.
    """

    HIDDEN = "hidden"
    INFO = "info"
    LINT = "lint"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _SEV_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Severity:
        """Parse a textual severity name (``hidden``, ``info``, ...).

        Raises ``InvalidSeverityError`` for unknown names and for
        ``inherit``, which can only be declared in the catalog.
        """
        v = (text or "").strip().lower()
        v = _ALIASES.get(v, v)
        if v == Inherit.INHERIT.value:
            raise InvalidSeverityError("severity may not be set to inherit")
        try:
            return cls(v)
        except ValueError:
            raise InvalidSeverityError(f"unknown severity: {text!r}") from None


class Inherit(Enum):
    """Stored-only marker: defer to the parent issue's severity."""

    INHERIT = "inherit"

    def __str__(self) -> str:
        return self.value


INHERIT = Inherit.INHERIT

# A level as stored in the catalog / registry (may still need resolving).
Level = Union[Severity, Inherit]

_SEV_RANK: dict[Severity, int] = {
    Severity.HIDDEN: 0,
    Severity.INFO: 1,
    Severity.LINT: 2,
    Severity.WARNING: 3,
    Severity.ERROR: 4,
}

_ALIASES: dict[str, str] = {
    "hide": "hidden",
    "warn": "warning",
}


class Category(Enum):
    """Reporting group for an issue."""

    COMPATIBILITY = ("compatibility", "Compatibility", None)
    DOCUMENTATION = ("documentation", "Documentation", None)
    API_LINT = ("api_lint", "API Lint", "go/android-api-guidelines")
    UNKNOWN = ("unknown", "Default", None)

    def __init__(self, key: str, description: str, rule_link: str | None) -> None:
        self.key = key
        self.description = description
        self.rule_link = rule_link

    @classmethod
    def parse(cls, text: str) -> Category:
        """Look up a category by key (``api_lint``) or name (``API_LINT``)."""
        v = (text or "").strip().lower().replace("-", "_")
        for cat in cls:
            if cat.key == v:
                return cat
        raise ValueError(f"unknown category: {text!r}")
