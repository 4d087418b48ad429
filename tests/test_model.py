"""Tests for the Severity / Category enums."""

from __future__ import annotations

import pytest

from api_issues.errors import InvalidSeverityError
from api_issues.model import INHERIT, Category, Inherit, Severity


class TestSeverityParse:
    """Severity.parse accepts the textual names used by config and CLI."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("hidden", Severity.HIDDEN),
            ("hide", Severity.HIDDEN),
            ("info", Severity.INFO),
            ("LINT", Severity.LINT),
            ("warn", Severity.WARNING),
            ("  Warning ", Severity.WARNING),
            ("error", Severity.ERROR),
        ],
    )
    def test_known_names(self, text: str, expected: Severity) -> None:
        assert Severity.parse(text) is expected

    def test_inherit_rejected(self) -> None:
        with pytest.raises(InvalidSeverityError, match="inherit"):
            Severity.parse("inherit")

    def test_unknown_rejected(self) -> None:
        with pytest.raises(ValueError):
            Severity.parse("fatal")

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidSeverityError):
            Severity.parse("")


class TestSeverityOrder:
    """Severities are ordered from hidden to error."""

    def test_sorted(self) -> None:
        shuffled = [Severity.ERROR, Severity.HIDDEN, Severity.WARNING, Severity.INFO, Severity.LINT]
        assert sorted(shuffled) == [
            Severity.HIDDEN,
            Severity.INFO,
            Severity.LINT,
            Severity.WARNING,
            Severity.ERROR,
        ]

    def test_comparisons(self) -> None:
        assert Severity.LINT < Severity.WARNING
        assert Severity.ERROR >= Severity.ERROR
        assert max(Severity.INFO, Severity.LINT) is Severity.LINT

    def test_str_is_value(self) -> None:
        assert str(Severity.WARNING) == "warning"


class TestInherit:
    """INHERIT is not a Severity."""

    def test_not_a_severity(self) -> None:
        assert not isinstance(INHERIT, Severity)
        assert INHERIT is Inherit.INHERIT
        assert str(INHERIT) == "inherit"


class TestCategory:
    """Category carries a description and optional rule link."""

    def test_descriptions(self) -> None:
        assert Category.COMPATIBILITY.description == "Compatibility"
        assert Category.UNKNOWN.description == "Default"
        assert Category.API_LINT.rule_link == "go/android-api-guidelines"
        assert Category.DOCUMENTATION.rule_link is None

    def test_parse(self) -> None:
        assert Category.parse("api-lint") is Category.API_LINT
        assert Category.parse("DOCUMENTATION") is Category.DOCUMENTATION
        with pytest.raises(ValueError):
            Category.parse("style")
