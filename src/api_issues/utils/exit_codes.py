"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success
  1   Violation — an override token matched no issue under ``--strict``
  2   Error — usage error, unknown issue, unreadable or invalid config
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
