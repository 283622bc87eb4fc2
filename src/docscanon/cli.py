from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .checks.model import CheckDef
from .checks.registry import DEFAULT_MODE, MODES, get_check, list_checks, modes_including
from .checks.report import build_report_payload, render_json, render_text
from .checks.runner import extract_failures, run_checks
from .core.context import RunContext
from .doctor import run_doctor
from .errors import ScriptError
from .exit_codes import ERR_CONFIG, ERR_INTERNAL
from .logging import log_event

MODE_FLAGS: tuple[tuple[str, str], ...] = (
    ("rest", "validate only reStructuredText files"),
    ("openapi", "validate only OpenAPI specifications"),
    ("graphql", "validate only GraphQL schemas"),
    ("proto", "validate only Protocol Buffers"),
    ("markdown", "validate only Markdown files"),
    ("sphinx", "validate only the Sphinx build"),
    ("pre-commit", "quick validation for pre-commit (markdown + formatting)"),
    ("all", "run every check (default)"),
)


def _version_string() -> str:
    return f"docscanon {__version__}"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="docscanon", description="Validate documentation against the writing canons.")
    p.add_argument("--version", action="version", version=_version_string())
    p.add_argument("--root", help="repository to validate (default: current directory)")
    p.add_argument("--config", help="config file (.toml, .yaml or .yml)")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    p.add_argument("--run-id", help="run identifier for logs and reports")
    p.add_argument("--log-json", action="store_true", help="emit diagnostic events as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="print details, durations and diagnostic events")
    vg.add_argument("--quiet", action="store_true", help="only print problems and the summary")
    sub = p.add_subparsers(dest="cmd", required=True)

    validate_p = sub.add_parser("validate", help="run documentation checks")
    modes = validate_p.add_mutually_exclusive_group()
    for mode, help_text in MODE_FLAGS:
        modes.add_argument(f"--{mode}", dest="mode", action="store_const", const=mode, help=help_text)
    validate_p.set_defaults(mode=DEFAULT_MODE)
    validate_p.add_argument("--fail-fast", action="store_true", help="stop after the first failing check")
    validate_p.add_argument("--out-file", help="also write the JSON report to this path")
    validate_p.add_argument("paths", nargs="*", help="restrict file discovery to these files or directories")

    checks_p = sub.add_parser("checks", help="list registered checks")
    checks_p.add_argument("--json", action="store_true", help="emit JSON output")

    explain_p = sub.add_parser("explain", help="describe one check")
    explain_p.add_argument("check_id")
    explain_p.add_argument("--json", action="store_true", help="emit JSON output")

    doctor_p = sub.add_parser("doctor", help="show external tool availability")
    doctor_p.add_argument("--json", action="store_true", help="emit JSON output")

    version_p = sub.add_parser("version", help="print version")
    version_p.add_argument("--json", action="store_true", help="emit JSON output")
    return p


def _check_row(check: CheckDef) -> dict[str, Any]:
    return {
        "id": check.check_id,
        "group": check.group,
        "title": check.title,
        "tools": list(check.tools),
        "modes": modes_including(check.check_id),
        "fix_hint": check.fix_hint,
    }


def _checks_payload() -> dict[str, Any]:
    return {
        "schema_version": 1,
        "tool": "docscanon",
        "checks": [_check_row(check) for check in list_checks()],
        "modes": {mode: list(ids) for mode, ids in sorted(MODES.items())},
    }


def _render_checks_text(payload: dict[str, Any]) -> str:
    rows = payload["checks"]
    width = max(len(row["id"]) for row in rows)
    return "\n".join(f"{row['id']:<{width}}  {row['group']:<7}  {row['title']}" for row in rows)


def _render_explain_text(row: dict[str, Any]) -> str:
    return "\n".join(
        [
            f"{row['id']}: {row['title']}",
            f"group: {row['group']}",
            f"tools: {', '.join(row['tools']) or '-'}",
            f"modes: {', '.join(row['modes'])}",
            f"fix: {row['fix_hint']}",
        ]
    )


def _write_out_file(out_file: str, rendered: str) -> None:
    path = Path(out_file)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rendered + "\n", encoding="utf-8")
    except OSError as exc:
        raise ScriptError(f"cannot write report to {out_file}: {exc}", ERR_CONFIG, "io_error") from exc


def run_validate(ctx: RunContext, ns: argparse.Namespace) -> int:
    report = run_checks(ctx, ns.mode, fail_fast=ns.fail_fast)
    payload = build_report_payload(report, run_id=ctx.run_id)
    if ns.out_file:
        _write_out_file(ns.out_file, json.dumps(payload, indent=2, sort_keys=True))
    if ctx.output_format == "json":
        print(render_json(payload))
    else:
        print(render_text(report, color=ctx.color, verbose=ctx.verbose, quiet=ctx.quiet))
    if ctx.diagnostics:
        failed = ",".join(row.check_id for row in extract_failures(report))
        log_event(ctx, "info", "cli", "finish", mode=ns.mode, errors=report.errors, warnings=report.warnings, failed=failed or "-")
    return report.exit_code


def _render_error(as_json: bool, message: str, code: int, kind: str) -> str:
    if not as_json:
        return message
    return json.dumps(
        {
            "schema_version": 1,
            "tool": "docscanon",
            "status": "fail",
            "error": {"message": message, "code": code, "kind": kind},
        },
        sort_keys=True,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    fmt = ns.format or "text"
    as_json = fmt == "json" or bool(getattr(ns, "json", False))
    try:
        if ns.cmd == "version":
            if as_json:
                print(json.dumps({"schema_version": 1, "tool": "docscanon", "version": __version__}, sort_keys=True))
            else:
                print(_version_string())
            return 0
        if ns.cmd == "checks":
            payload = _checks_payload()
            print(json.dumps(payload, sort_keys=True) if as_json else _render_checks_text(payload))
            return 0
        if ns.cmd == "explain":
            row = _check_row(get_check(ns.check_id))
            print(json.dumps({"schema_version": 1, "tool": "docscanon", "check": row}, sort_keys=True) if as_json else _render_explain_text(row))
            return 0

        ctx = RunContext.from_args(
            ns.root,
            ns.config,
            ns.run_id,
            fmt,
            ns.verbose,
            ns.quiet,
            ns.log_json,
            ns.no_color,
            getattr(ns, "paths", None),
            strict_config=(ns.cmd != "doctor"),
        )
        if ctx.diagnostics:
            log_event(ctx, "info", "cli", "start", cmd=ns.cmd, fmt=fmt, root=str(ctx.repo_root), config=ctx.config.source)
        if ns.cmd == "doctor":
            return run_doctor(ctx, as_json)
        if ns.cmd == "validate":
            return run_validate(ctx, ns)
        return 2
    except ScriptError as exc:
        print(_render_error(fmt == "json", str(exc), exc.code, exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(_render_error(fmt == "json", f"internal error: {exc}", ERR_INTERNAL, "internal_error"), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
