"""CLI entry-point for api_issues.

Usage:
    python -m api_issues list [--category api_lint] [--user-set] [--json]
    python -m api_issues show <id-or-name> [--json]
    python -m api_issues --error 7,AddedMethod --hide Typo list
    python -m api_issues --config severities.yaml --preset released-compatibility list

Override flags (``--error``, ``--warning``, ``--lint``, ``--info``,
``--hide``) take an issue code, a name, or a comma-separated list of
either, and may be repeated.  The config file is applied first, then the
preset, then the flags in command-line order.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from api_issues import __version__
from api_issues.config import RegistryConfig, apply_config, load_config
from api_issues.configuration import PRESETS, apply_preset, reported_severity
from api_issues.errors import ConfigError
from api_issues.model import Category, Severity
from api_issues.registry import IssueRegistry
from api_issues.utils.exit_codes import ExitCode
from api_issues.utils.json_norm import stable_json_dump


class _OverrideAction(argparse.Action):
    """Collect ``(token, severity)`` pairs from every override flag in order."""

    def __init__(self, option_strings, dest, severity: Severity, **kwargs):
        self.severity = severity
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        pairs = list(getattr(namespace, self.dest, None) or [])
        pairs.append((values, self.severity))
        setattr(namespace, self.dest, pairs)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="api-issues",
        description="Inspect and configure API-analysis issue severities.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # ── severity overrides ──────────────────────────────────────────
    for flag, severity in (
        ("--error", Severity.ERROR),
        ("--warning", Severity.WARNING),
        ("--lint", Severity.LINT),
        ("--info", Severity.INFO),
        ("--hide", Severity.HIDDEN),
    ):
        p.add_argument(
            flag,
            dest="overrides",
            action=_OverrideAction,
            severity=severity,
            metavar="ID",
            default=[],
            help=f"Report the given issue(s) as {severity.value}.",
        )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON or YAML severity configuration file.",
    )
    p.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="Apply a built-in compatibility-check preset.",
    )
    p.add_argument(
        "--warnings-as-errors",
        action="store_true",
        default=False,
        help="Report warnings as errors.",
    )
    p.add_argument(
        "--lints-as-errors",
        action="store_true",
        default=False,
        help="Report lint findings as errors.",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Exit 1 when an override names an unknown issue.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log every applied override.",
    )

    sub = p.add_subparsers(dest="command")

    list_p = sub.add_parser("list", help="List issues with their effective severity.")
    list_p.add_argument(
        "--category",
        choices=[c.key for c in Category],
        default=None,
        help="Only list issues in this category.",
    )
    list_p.add_argument(
        "--user-set",
        dest="user_set",
        action="store_true",
        default=False,
        help="Only list issues whose severity was overridden.",
    )
    list_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print JSON to stdout.",
    )

    show_p = sub.add_parser("show", help="Show one issue in detail.")
    show_p.add_argument("token", help="Issue code or name.")
    show_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print JSON to stdout.",
    )
    return p


def _configure(
    registry: IssueRegistry, args: argparse.Namespace
) -> tuple[RegistryConfig, list[str]]:
    """Apply config file, preset and flag overrides; return unresolved tokens."""
    config = RegistryConfig()
    unresolved: list[str] = []
    if args.config is not None:
        config = load_config(args.config)
        unresolved += apply_config(registry, config)
    if args.preset is not None:
        apply_preset(registry, args.preset)
    unresolved += registry.configure_severities(args.overrides)
    return config, unresolved


def _handle_list(
    registry: IssueRegistry, args: argparse.Namespace, promote: dict
) -> int:
    category = Category.parse(args.category) if args.category else None
    issues = registry.issues(category=category)
    if args.user_set:
        issues = [i for i in issues if registry.is_user_set(i)]

    if args.json_out:
        rows = []
        for issue in issues:
            d = registry.describe(issue)
            d["reported_severity"] = reported_severity(
                registry.effective_severity(issue), **promote
            ).value
            rows.append(d)
        stable_json_dump(rows, sys.stdout)
        return ExitCode.SUCCESS

    for issue in issues:
        sev = reported_severity(registry.effective_severity(issue), **promote)
        mark = "*" if registry.is_user_set(issue) else " "
        print(
            f"{issue.code:>4} {mark} {issue.name:40s}  {sev.value:8s}  "
            f"{issue.category.description}"
        )
    return ExitCode.SUCCESS


def _handle_show(
    registry: IssueRegistry, args: argparse.Namespace, promote: dict
) -> int:
    issue = registry.resolve(args.token)
    if issue is None:
        print(f"error: unknown issue: {args.token}", file=sys.stderr)
        return ExitCode.ERROR

    d = registry.describe(issue)
    d["reported_severity"] = reported_severity(
        registry.effective_severity(issue), **promote
    ).value
    if args.json_out:
        stable_json_dump(d, sys.stdout)
        return ExitCode.SUCCESS

    for key in sorted(d):
        print(f"{key:22s} {d[key]}")
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_usage(sys.stderr)
        print("error: use 'list' or 'show'.", file=sys.stderr)
        return ExitCode.ERROR

    registry = IssueRegistry()
    try:
        config, unresolved = _configure(registry, args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    promote = {
        "warnings_as_errors": args.warnings_as_errors or config.warnings_as_errors,
        "lints_as_errors": args.lints_as_errors or config.lints_as_errors,
    }
    if args.command == "list":
        rc = _handle_list(registry, args, promote)
    else:
        rc = _handle_show(registry, args, promote)

    if rc == ExitCode.SUCCESS and unresolved and args.strict:
        return ExitCode.VIOLATION
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
