"""IssueDefinition — the immutable identity of one diagnostic issue."""

from __future__ import annotations

from dataclasses import dataclass

from . import Category, Inherit, Level


@dataclass(frozen=True, slots=True)
class IssueDefinition:
    """A known issue, as compiled into the catalog.

    Attributes:
        code: Stable numeric id, never reused across versions.
        name: CamelCase name derived from ``declared_id``.
        declared_id: Upper-snake identifier from the catalog table.
        default_level: Compiled-in level; ``INHERIT`` for inherited issues.
        category: Reporting group.
        parent_code: Code of the issue this one inherits from, if any.
        rule: External style-guide rule id (informational).
        explanation: Free text (informational).
    """

    code: int
    name: str
    declared_id: str
    default_level: Level
    category: Category = Category.UNKNOWN
    parent_code: int | None = None
    rule: str | None = None
    explanation: str | None = None

    @property
    def inherits(self) -> bool:
        return isinstance(self.default_level, Inherit)

    def __str__(self) -> str:
        return f"Issue #{self.code} ({self.name})"

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        d: dict = {
            "code": self.code,
            "name": self.name,
            "declared_id": self.declared_id,
            "default_level": self.default_level.value,
            "category": self.category.key,
        }
        if self.parent_code is not None:
            d["parent_code"] = self.parent_code
        if self.rule:
            d["rule"] = self.rule
        if self.explanation:
            d["explanation"] = self.explanation
        return d

