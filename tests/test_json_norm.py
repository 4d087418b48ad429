"""Canonical JSON output used by the CLI."""

from __future__ import annotations

import io
import json

from api_issues.model import Severity
from api_issues.utils.json_norm import stable_json_dump, stable_json_dumps


class TestStableJsonDumps:
    """Sorted keys, enum values and a trailing newline."""

    def test_sorted_keys_and_newline(self) -> None:
        out = stable_json_dumps({"b": 1, "a": 2})
        assert out.endswith("}\n")
        assert out.index('"a"') < out.index('"b"')

    def test_enums_become_values(self) -> None:
        out = stable_json_dumps({"level": Severity.LINT, "seen": (Severity.ERROR,)})
        assert json.loads(out) == {"level": "lint", "seen": ["error"]}

    def test_deterministic(self) -> None:
        data = {"z": [3, 2, 1], "m": {"y": None, "x": True}}
        assert stable_json_dumps(data) == stable_json_dumps(dict(reversed(list(data.items()))))

    def test_dump_writes_same_text(self) -> None:
        buf = io.StringIO()
        stable_json_dump({"code": 7}, buf)
        assert buf.getvalue() == stable_json_dumps({"code": 7})
