"""Shared utilities for api_issues."""

from api_issues.utils.exit_codes import ExitCode
from api_issues.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
