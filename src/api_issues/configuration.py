"""Severity override layers and compatibility-check presets.

A ``SeverityOverrides`` layer maps issues to severities on top of a
registry without mutating it: anything the layer does not mention falls
through to ``IssueRegistry.effective_severity``.  The two built-in presets
reproduce the severities used when checking an API against the current
development snapshot and against the last stable release.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from api_issues.errors import InvalidSeverityError
from api_issues.model import Severity
from api_issues.model.issue import IssueDefinition
from api_issues.registry import IssueRef, IssueRegistry

logger = logging.getLogger(__name__)


class SeverityOverrides:
    """Per-issue severity overrides on top of one registry, keyed by code.

    Refs are resolved once, when the override is added; a ref that names
    no issue (including a comma-separated list) raises
    ``UnknownIssueError``.

    Usage::

        overrides = SeverityOverrides(registry).error(7).hide("AddedClass")
        overrides.severity_of(7)     # Severity.ERROR
    """

    def __init__(
        self,
        registry: IssueRegistry,
        levels: Mapping[IssueRef, Severity] | None = None,
    ) -> None:
        self.registry = registry
        self._levels: dict[int, Severity] = {}
        for ref, severity in (levels or {}).items():
            self.set(ref, severity)

    def set(self, ref: IssueRef, severity: Severity | str) -> SeverityOverrides:
        issue = self.registry.require(ref)
        if not isinstance(severity, Severity):
            if not isinstance(severity, str):
                raise InvalidSeverityError(f"not a severity: {severity!r}")
            severity = Severity.parse(severity)
        self._levels[issue.code] = severity
        return self

    def error(self, ref: IssueRef) -> SeverityOverrides:
        return self.set(ref, Severity.ERROR)

    def hide(self, ref: IssueRef) -> SeverityOverrides:
        return self.set(ref, Severity.HIDDEN)

    def items(self) -> list[tuple[int, Severity]]:
        return sorted(self._levels.items())

    def __len__(self) -> int:
        return len(self._levels)

    def __contains__(self, ref: object) -> bool:
        if isinstance(ref, IssueDefinition):
            return ref.code in self._levels
        if isinstance(ref, (int, str)):
            issue = self.registry.resolve(ref)
            return issue is not None and issue.code in self._levels
        return False

    def severity_of(self, ref: IssueRef) -> Severity:
        """Return the override for *ref*, or the registry's effective severity."""
        issue = self.registry.require(ref)
        severity = self._levels.get(issue.code)
        if severity is not None:
            return severity
        return self.registry.effective_severity(issue)


# issues 2-21, 23-27 -> error
CURRENT_COMPATIBILITY: Mapping[int, Severity] = MappingProxyType(
    {code: Severity.ERROR for code in [*range(2, 22), *range(23, 28)]}
)

# additions hidden, removals and incompatible changes -> error
RELEASED_COMPATIBILITY: Mapping[int, Severity] = MappingProxyType(
    {
        **{code: Severity.HIDDEN for code in (2, 3, 4, 5, 6, 24, 25, 26, 27)},
        **{code: Severity.ERROR for code in [*range(7, 19), 31]},
    }
)

PRESETS: dict[str, Mapping[int, Severity]] = {
    "current-compatibility": CURRENT_COMPATIBILITY,
    "released-compatibility": RELEASED_COMPATIBILITY,
}


def _preset(name: str) -> Mapping[int, Severity]:
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(
            f"unknown preset {name!r}; expected one of {sorted(PRESETS)}"
        ) from None


def overrides_for_preset(registry: IssueRegistry, name: str) -> SeverityOverrides:
    """Return a fresh overrides layer over *registry* seeded from a named preset."""
    return SeverityOverrides(registry, _preset(name))


def apply_preset(registry: IssueRegistry, name: str) -> int:
    """Write a named preset into *registry*.

    Preset levels are not user requests: issues the user already set keep
    their level.  Returns the number of issues changed.  Raises ``KeyError``
    for an unknown preset name.
    """
    changed = 0
    for code, severity in _preset(name).items():
        if registry.is_user_set(code):
            continue
        registry.set_severity(code, severity, user_requested=False)
        changed += 1
    logger.debug("preset %s applied to %d issues", name, changed)
    return changed


def reported_severity(
    severity: Severity,
    *,
    warnings_as_errors: bool = False,
    lints_as_errors: bool = False,
) -> Severity:
    """Promote lint/warning findings to errors when the run asks for it."""
    if severity is Severity.LINT and lints_as_errors:
        return Severity.ERROR
    if severity is Severity.WARNING and warnings_as_errors:
        return Severity.ERROR
    return severity
