"""Issue registry — lookup, severity resolution and runtime overrides.

The registry is built once from the compiled-in catalog and then consulted
by detection code (``effective_severity``) and configured at startup from
CLI flags or config files (``set_severity`` / ``configure_severities``).

Usage::

    registry = IssueRegistry()
    registry.set_severity("AddedMethod,7", Severity.ERROR)
    registry.effective_severity("RemovedPackage")   # Severity.ERROR

Tests build a fresh ``IssueRegistry()`` (or call ``reset_all``) so no
override leaks from one test into the next.
"""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from typing import Iterable, Iterator, Sequence, Union

from api_issues.catalog import CATALOG, IssueSpec, camel_case_name, validate_catalog
from api_issues.errors import CatalogError, InvalidSeverityError, UnknownIssueError
from api_issues.model import INHERIT, Category, Inherit, Level, Severity
from api_issues.model.issue import IssueDefinition

logger = logging.getLogger(__name__)

IssueRef = Union[IssueDefinition, int, str]


def _coerce_level(level: Severity | Inherit | str) -> Severity:
    """Accept a ``Severity`` or its textual name; reject ``INHERIT``."""
    if isinstance(level, Inherit):
        raise InvalidSeverityError("issue level may not be set to inherit")
    if isinstance(level, Severity):
        return level
    if isinstance(level, str):
        return Severity.parse(level)
    raise InvalidSeverityError(f"not a severity: {level!r}")


class IssueRegistry:
    """Catalog of issue definitions plus their mutable severities."""

    def __init__(self, rows: Sequence[IssueSpec] = CATALOG) -> None:
        rows = tuple(rows)
        validate_catalog(rows)

        self._lock = threading.RLock()
        self._issues: list[IssueDefinition] = []
        self._by_code: dict[int, IssueDefinition] = {}
        self._by_name: dict[str, IssueDefinition] = {}
        self._by_folded_name: dict[str, IssueDefinition] = {}
        self._levels: dict[int, Level] = {}
        self._user_set: dict[int, bool] = {}

        codes = {row.declared_id: row.code for row in rows}
        for row in rows:
            issue = IssueDefinition(
                code=row.code,
                name=camel_case_name(row.declared_id),
                declared_id=row.declared_id,
                default_level=row.level,
                category=row.category,
                parent_code=codes[row.parent] if row.parent is not None else None,
                rule=row.rule,
                explanation=row.explanation,
            )
            self._issues.append(issue)
            self._by_code[issue.code] = issue
            self._by_name[issue.name] = issue
            self._by_folded_name[issue.name.lower()] = issue
            self._levels[issue.code] = issue.default_level
            self._user_set[issue.code] = False

        if len(self._by_code) != len(rows) or len(self._by_folded_name) != len(rows):
            raise CatalogError("issue indices are incomplete after bootstrap")
        logger.debug("issue registry bootstrapped with %d issues", len(rows))

    # ── queries ──────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self) -> Iterator[IssueDefinition]:
        return iter(self._issues)

    def __contains__(self, token: object) -> bool:
        if isinstance(token, IssueDefinition):
            return self._by_code.get(token.code) is token
        if isinstance(token, (int, str)):
            return self.resolve(token) is not None
        return False

    def issues(self, *, category: Category | None = None) -> list[IssueDefinition]:
        """Return issues in declaration order, optionally filtered."""
        result = list(self._issues)
        if category is not None:
            result = [i for i in result if i.category is category]
        return result

    def find_by_id(self, code: int) -> IssueDefinition | None:
        """Look up an issue by numeric code."""
        return self._by_code.get(code)

    def find_by_name(self, name: str) -> IssueDefinition | None:
        """Look up an issue by its exact CamelCase name."""
        return self._by_name.get(name)

    def resolve(self, token: str | int) -> IssueDefinition | None:
        """Resolve a single id-or-name token.

        Tries the exact name, then the token as a numeric code, then the
        name case-insensitively.  Returns ``None`` when nothing matches.
        """
        if isinstance(token, bool):
            return None
        if isinstance(token, int):
            return self._by_code.get(token)

        issue = self._by_name.get(token)
        if issue is not None:
            return issue
        stripped = token.strip()
        # plain decimal codes only: no sign, underscores or non-ASCII digits
        if stripped.isascii() and stripped.isdigit():
            return self._by_code.get(int(stripped))
        return self._by_folded_name.get(stripped.lower())

    def parent_of(self, issue: IssueDefinition) -> IssueDefinition | None:
        if issue.parent_code is None:
            return None
        return self._by_code.get(issue.parent_code)

    def require(self, ref: IssueRef) -> IssueDefinition:
        """Like ``resolve``, but raise ``UnknownIssueError`` on no match."""
        if isinstance(ref, IssueDefinition):
            issue = self._by_code.get(ref.code)
            if issue is None:
                raise UnknownIssueError(f"{ref} is not part of this registry")
            return issue
        issue = self.resolve(ref)
        if issue is None:
            raise UnknownIssueError(f"unknown issue: {ref!r}")
        return issue

    # ── severity resolution ─────────────────────────────────────────

    def stored_level(self, ref: IssueRef) -> Level:
        """Return the level as stored, which may still be ``INHERIT``."""
        issue = self.require(ref)
        with self._lock:
            return self._levels[issue.code]

    def is_inherited(self, ref: IssueRef) -> bool:
        return self.stored_level(ref) is INHERIT

    def is_user_set(self, ref: IssueRef) -> bool:
        issue = self.require(ref)
        with self._lock:
            return self._user_set[issue.code]

    def effective_severity(self, ref: IssueRef) -> Severity:
        """Return the severity to report an issue with.

        Follows the parent chain while the stored level is ``INHERIT``.
        Raises ``CatalogError`` if the chain ends without a level or loops,
        and ``UnknownIssueError`` if *ref* names no issue.
        """
        issue = self.require(ref)
        seen: set[int] = set()
        with self._lock:
            while True:
                level = self._levels[issue.code]
                if isinstance(level, Severity):
                    return level
                seen.add(issue.code)
                parent = self.parent_of(issue)
                if parent is None:
                    raise CatalogError(
                        f"{issue} has level INHERIT but no parent"
                    )
                if parent.code in seen:
                    raise CatalogError(f"inheritance cycle at {parent}")
                issue = parent

    # ── mutation ─────────────────────────────────────────────────────

    def set_level(self, ref: IssueRef, level: Severity | str) -> None:
        """Store an explicit level for one issue and mark it as user-set.

        ``INHERIT`` is rejected: inheritance is only declared in the
        catalog, never re-established by an override.
        """
        severity = _coerce_level(level)
        issue = self.require(ref)
        self._store(issue, severity, user_set=True)

    def set_severity(
        self,
        token: str | int,
        level: Severity | str,
        user_requested: bool = True,
    ) -> bool:
        """Apply *level* to the issue(s) named by *token*.

        *token* is an id, a name, or a comma-separated list of either.
        Every member of a list is attempted; the result is ``True`` only if
        all of them resolved.  Unknown tokens are not errors.
        """
        unresolved: list[str] = []
        self._apply(str(token), _coerce_level(level), user_requested, unresolved)
        return not unresolved

    def configure_severities(
        self,
        requests: Iterable[tuple[str | int, Severity | str]],
        *,
        user_requested: bool = True,
    ) -> list[str]:
        """Apply a sequence of ``(token, level)`` overrides in order.

        Returns the tokens that matched no issue, after logging a warning
        for each; all recognised overrides are still applied.  Invalid
        levels raise ``InvalidSeverityError`` before anything is applied.
        """
        batch = [(str(token), _coerce_level(level)) for token, level in requests]
        unresolved: list[str] = []
        with self._lock:
            for token, severity in batch:
                self._apply(token, severity, user_requested, unresolved)
        for token in unresolved:
            logger.warning("unrecognized issue id %r ignored", token)
        return unresolved

    def reset_all(self) -> None:
        """Restore every issue to its compiled-in level and clear user flags."""
        with self._lock:
            for issue in self._issues:
                self._levels[issue.code] = issue.default_level
                self._user_set[issue.code] = False
        logger.debug("issue severities reset to defaults")

    def _apply(
        self,
        token: str,
        severity: Severity,
        user_requested: bool,
        unresolved: list[str],
    ) -> None:
        if "," in token:
            with self._lock:
                for piece in token.split(","):
                    self._apply(piece.strip(), severity, user_requested, unresolved)
            return

        issue = self.resolve(token) if token else None
        if issue is None:
            unresolved.append(token)
            return
        self._store(issue, severity, user_set=user_requested)

    def _store(self, issue: IssueDefinition, severity: Severity, *, user_set: bool) -> None:
        with self._lock:
            self._levels[issue.code] = severity
            self._user_set[issue.code] = user_set
        logger.debug("%s set to %s (user_set=%s)", issue, severity.value, user_set)

    # ── reporting ────────────────────────────────────────────────────

    def describe(self, ref: IssueRef) -> dict:
        """Return a JSON-ready view of an issue and its current state."""
        issue = self.require(ref)
        d = issue.to_dict()
        d["level"] = self.stored_level(issue).value
        d["effective_severity"] = self.effective_severity(issue).value
        d["user_set"] = self.is_user_set(issue)
        d["category_description"] = issue.category.description
        if issue.category.rule_link:
            d["rule_link"] = issue.category.rule_link
        parent = self.parent_of(issue)
        if parent is not None:
            d["parent"] = parent.name
        return d


@lru_cache(maxsize=None)
def get_registry() -> IssueRegistry:
    """Return the process-wide registry, building it on first use."""
    return IssueRegistry()
