"""
semparse command line.

Usage:
    semparse parse 1.2.3-rc.1+build.5 0.9.0
    semparse check 1.02.0 --format json
    semparse compare 1.0.1-beta.2 1.0.1-beta.10
    semparse sort 1.0.0 1.0.0-alpha 0.9.9 --reverse

Exit codes:
    0 success, 1 invalid version or failed check, 2 usage/configuration error.

Settings come from CliSettings.load (env > TOML > defaults) and are then overridden by
explicit flags.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from semparse.core.errors import VersionParseError
from semparse.core.parser import parse
from semparse.core.schema import VersionRecord
from semparse.core.version import Version

from .config import CliSettings
from .errors import CliConfigError

logger = logging.getLogger("semparse.cli")

_COMPARE_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def _add_common_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--dialect", type=str, default=None, help="Dialect name (default: standard).")
    p.add_argument(
        "--format",
        dest="output_format",
        choices=["text", "json"],
        default=None,
        help="Output format.",
    )
    p.add_argument("--log-level", type=str, default=None, help="Logging level name.")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help="Explicit TOML config (default: ./semparse.toml, then pyproject.toml).",
    )


def _resolve_settings(args: argparse.Namespace) -> CliSettings:
    """Load settings (env > TOML > defaults) and apply explicit flags on top."""
    s = CliSettings.load(args.config)
    overrides: dict[str, Any] = {}
    if args.dialect:
        overrides["dialect"] = args.dialect
    if args.output_format:
        overrides["output_format"] = args.output_format
    if args.log_level:
        overrides["log_level"] = args.log_level
    if getattr(args, "reverse", False):
        overrides["reverse"] = True
    s = CliSettings._apply_mapping(s, overrides)
    _configure_logging(s.log_level)
    return s


def _configure_logging(level: str) -> None:
    logging.basicConfig(format="%(levelname)s:%(name)s:%(message)s", level=level)
    logging.getLogger().setLevel(level)


def _dumps(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _report_error(raw: str, exc: VersionParseError) -> None:
    print(f"{raw}: {exc}", file=sys.stderr)


def _parse_all(raws: list[str], settings: CliSettings) -> tuple[list[Version], int]:
    versions: list[Version] = []
    code = 0
    for raw in raws:
        try:
            versions.append(parse(raw, settings.dialect_member))
        except VersionParseError as exc:
            _report_error(raw, exc)
            code = 1
    return versions, code


def _cmd_parse(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="semparse parse", description="Parse and print canonical versions.")
    p.add_argument("versions", nargs="+", help="Version strings.")
    _add_common_options(p)
    args = p.parse_args(argv)
    settings = _resolve_settings(args)

    versions, code = _parse_all(args.versions, settings)
    for version in versions:
        if settings.output_format == "json":
            print(VersionRecord.from_version(version).model_dump_json())
        else:
            print(version)
    return code


def _cmd_check(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="semparse check", description="Validate version strings.")
    p.add_argument("versions", nargs="+", help="Version strings.")
    _add_common_options(p)
    args = p.parse_args(argv)
    settings = _resolve_settings(args)

    code = 0
    for raw in args.versions:
        error: VersionParseError | None = None
        try:
            parse(raw, settings.dialect_member)
        except VersionParseError as exc:
            error = exc
            code = 1
        if settings.output_format == "json":
            payload: dict[str, Any] = {"input": raw, "valid": error is None}
            if error is not None:
                payload["error"] = {"kind": error.kind.value, "part": error.part.value}
            print(_dumps(payload))
        elif error is None:
            print(f"{raw}: ok")
        else:
            print(f"{raw}: {error.kind.value} ({error.part.value})")
    return code


def _cmd_compare(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="semparse compare", description="Compare two versions.")
    p.add_argument("left", help="First version.")
    p.add_argument("right", help="Second version.")
    _add_common_options(p)
    args = p.parse_args(argv)
    settings = _resolve_settings(args)

    versions, code = _parse_all([args.left, args.right], settings)
    if code:
        return code
    left, right = versions
    result = left.compare(right)
    if result is None:
        # Unreachable while both sides share settings.dialect.
        print(f"{args.left} and {args.right} are not comparable", file=sys.stderr)
        return 1
    if settings.output_format == "json":
        print(_dumps({"left": str(left), "right": str(right), "result": result}))
    else:
        print(f"{left} {_COMPARE_SYMBOLS[result]} {right}")
    return 0


def _cmd_sort(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="semparse sort", description="Sort versions by precedence.")
    p.add_argument("versions", nargs="+", help="Version strings.")
    p.add_argument("--reverse", action="store_true", help="Sort newest first.")
    _add_common_options(p)
    args = p.parse_args(argv)
    settings = _resolve_settings(args)

    versions, code = _parse_all(args.versions, settings)
    if code:
        return code
    ordered = sorted(versions, reverse=settings.reverse)
    logger.debug("Sorted %d versions (reverse=%s)", len(ordered), settings.reverse)
    if settings.output_format == "json":
        print(_dumps([VersionRecord.from_version(v).model_dump() for v in ordered]))
    else:
        for version in ordered:
            print(version)
    return 0


_COMMANDS = {
    "parse": _cmd_parse,
    "check": _cmd_check,
    "compare": _cmd_compare,
    "sort": _cmd_sort,
}


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="semparse", description="Parse, validate, compare and sort semantic versions."
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    for name in _COMMANDS:
        sub.add_parser(name)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        raise SystemExit(2)
    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        raise SystemExit(2)
    try:
        code = handler(rest)
    except CliConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        code = 2
    raise SystemExit(code)
