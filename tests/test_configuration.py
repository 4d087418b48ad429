"""Tests for override layers, compatibility presets and promotion."""

from __future__ import annotations

import pytest

from api_issues.configuration import (
    CURRENT_COMPATIBILITY,
    RELEASED_COMPATIBILITY,
    SeverityOverrides,
    apply_preset,
    overrides_for_preset,
    reported_severity,
)
from api_issues.errors import InvalidSeverityError, UnknownIssueError
from api_issues.model import INHERIT, Severity
from api_issues.registry import IssueRegistry


@pytest.fixture
def registry() -> IssueRegistry:
    return IssueRegistry()


# ═══════════════════════════════════════════════════════════════════════
#  SeverityOverrides
# ═══════════════════════════════════════════════════════════════════════

class TestSeverityOverrides:
    """An overrides layer shadows the registry without mutating it."""

    def test_override_and_fallback(self, registry: IssueRegistry) -> None:
        overrides = SeverityOverrides(registry).error(2).hide("AddedClass")
        assert overrides.severity_of(2) is Severity.ERROR
        assert overrides.severity_of("3") is Severity.HIDDEN
        assert overrides.severity_of(4) is Severity.WARNING

    def test_registry_untouched(self, registry: IssueRegistry) -> None:
        SeverityOverrides(registry).error(2).severity_of(2)
        assert registry.effective_severity(2) is Severity.WARNING
        assert not registry.is_user_set(2)

    def test_accepts_issue_definition(self, registry: IssueRegistry) -> None:
        issue = registry.find_by_id(9)
        overrides = SeverityOverrides(registry, {"RemovedMethod": Severity.LINT})
        assert overrides.severity_of(issue) is Severity.LINT
        assert issue in overrides

    def test_keyed_by_code(self, registry: IssueRegistry) -> None:
        overrides = SeverityOverrides(registry).set(3, Severity.ERROR).set("addedClass", "info")
        assert overrides.items() == [(3, Severity.INFO)]
        assert overrides.severity_of("AddedClass") is Severity.INFO
        overrides.set("3", Severity.LINT)
        assert len(overrides) == 1
        assert overrides.severity_of(3) is Severity.LINT

    @pytest.mark.parametrize("ref", ["NoSuchIssue", "2,3", "1_0", 99999])
    def test_unresolvable_ref_rejected(self, registry: IssueRegistry, ref) -> None:
        overrides = SeverityOverrides(registry)
        with pytest.raises(UnknownIssueError):
            overrides.error(ref)
        assert len(overrides) == 0

    def test_inherit_rejected(self, registry: IssueRegistry) -> None:
        with pytest.raises(InvalidSeverityError):
            SeverityOverrides(registry).set(2, INHERIT)  # type: ignore[arg-type]
        with pytest.raises(InvalidSeverityError):
            SeverityOverrides(registry).set(2, "inherit")

    def test_unknown_lookup_raises(self, registry: IssueRegistry) -> None:
        with pytest.raises(UnknownIssueError):
            SeverityOverrides(registry).severity_of("NoSuchIssue")

    def test_inherited_fallback(self, registry: IssueRegistry) -> None:
        registry.set_severity("AddedMethod", Severity.ERROR)
        assert SeverityOverrides(registry).severity_of(31) is Severity.ERROR


# ═══════════════════════════════════════════════════════════════════════
#  Presets
# ═══════════════════════════════════════════════════════════════════════

class TestPresets:
    """Built-in compatibility-check presets."""

    def test_current_compatibility_contents(self) -> None:
        assert set(CURRENT_COMPATIBILITY) == set(range(2, 22)) | set(range(23, 28))
        assert set(CURRENT_COMPATIBILITY.values()) == {Severity.ERROR}

    def test_released_compatibility_contents(self) -> None:
        hidden = {c for c, s in RELEASED_COMPATIBILITY.items() if s is Severity.HIDDEN}
        errors = {c for c, s in RELEASED_COMPATIBILITY.items() if s is Severity.ERROR}
        assert hidden == {2, 3, 4, 5, 6, 24, 25, 26, 27}
        assert errors == set(range(7, 19)) | {31}

    def test_presets_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            CURRENT_COMPATIBILITY[1] = Severity.HIDDEN  # type: ignore[index]

    def test_overrides_for_preset_is_a_copy(self, registry: IssueRegistry) -> None:
        overrides = overrides_for_preset(registry, "current-compatibility")
        overrides.hide(2)
        assert CURRENT_COMPATIBILITY[2] is Severity.ERROR
        assert overrides.severity_of(2) is Severity.HIDDEN
        assert overrides.severity_of(7) is Severity.ERROR

    def test_apply_released(self, registry: IssueRegistry) -> None:
        changed = apply_preset(registry, "released-compatibility")
        assert changed == len(RELEASED_COMPATIBILITY)
        assert registry.effective_severity("AddedPackage") is Severity.HIDDEN
        assert registry.effective_severity("RemovedPackage") is Severity.ERROR
        assert registry.effective_severity("AddedAbstractMethod") is Severity.ERROR
        # the parent of 31 is hidden, but 31 now has its own level
        assert registry.effective_severity("AddedMethod") is Severity.HIDDEN
        assert not registry.is_user_set("RemovedPackage")

    def test_apply_keeps_user_choices(self, registry: IssueRegistry) -> None:
        registry.set_severity("AddedPackage", Severity.ERROR, user_requested=True)
        changed = apply_preset(registry, "released-compatibility")
        assert changed == len(RELEASED_COMPATIBILITY) - 1
        assert registry.effective_severity("AddedPackage") is Severity.ERROR

    def test_unknown_preset(self, registry: IssueRegistry) -> None:
        with pytest.raises(KeyError, match="unknown preset"):
            apply_preset(registry, "strict")


# ═══════════════════════════════════════════════════════════════════════
#  Promotion
# ═══════════════════════════════════════════════════════════════════════

class TestReportedSeverity:
    """Lint and warning findings can be promoted to errors."""

    def test_no_promotion_by_default(self) -> None:
        for sev in Severity:
            assert reported_severity(sev) is sev

    def test_warnings_as_errors(self) -> None:
        assert reported_severity(Severity.WARNING, warnings_as_errors=True) is Severity.ERROR
        assert reported_severity(Severity.LINT, warnings_as_errors=True) is Severity.LINT

    def test_lints_as_errors(self) -> None:
        assert reported_severity(Severity.LINT, lints_as_errors=True) is Severity.ERROR
        assert reported_severity(Severity.WARNING, lints_as_errors=True) is Severity.WARNING

    def test_hidden_and_info_never_promoted(self) -> None:
        for sev in (Severity.HIDDEN, Severity.INFO):
            assert reported_severity(
                sev, warnings_as_errors=True, lints_as_errors=True
            ) is sev
