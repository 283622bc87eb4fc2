from __future__ import annotations

import json
from typing import Any

from ..contracts import REPORT, validate
from .model import CheckResult, CheckRunReport, Finding, Severity

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
NC = "\033[0m"

MARK_OK = "\u2713"
MARK_ERROR = "\u2717"
MARK_WARN = "\u26a0"

BANNER = ("Documentation Validation Script", "================================")

_STYLE = {
    Severity.INFO: (GREEN, MARK_OK),
    Severity.WARN: (YELLOW, MARK_WARN),
    Severity.ERROR: (RED, MARK_ERROR),
}


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{NC}" if enabled else text


def _finding_lines(finding: Finding, color: bool, verbose: bool) -> list[str]:
    tint, mark = _STYLE[finding.severity]
    lines = [_paint(f"{mark} {finding.message}", tint, color)]
    if verbose or finding.severity == Severity.ERROR:
        lines.extend(f"    {item}" for item in finding.details)
    if verbose and finding.hint and finding.severity != Severity.INFO:
        lines.append(f"    hint: {finding.hint}")
    return lines


def _result_lines(result: CheckResult, color: bool, verbose: bool, quiet: bool) -> list[str]:
    lines: list[str] = []
    if not quiet:
        lines.append("")
        lines.append(_paint(f"=== {result.title} ===", GREEN, color))
    for finding in result.findings:
        if quiet and finding.severity == Severity.INFO:
            continue
        lines.extend(_finding_lines(finding, color, verbose))
    if verbose and not quiet:
        lines.append(f"    ({result.check_id}: {result.status.value}, {result.duration_ms}ms)")
    return lines


def summary_lines(report: CheckRunReport, color: bool = False) -> list[str]:
    lines = ["", _paint("=== Validation Summary ===", GREEN, color)]
    lines.append(f"Errors: {report.errors}")
    lines.append(f"Warnings: {report.warnings}")
    if report.errors > 0:
        lines.append(_paint("Validation FAILED", RED, color))
    elif report.warnings > 0:
        lines.append(_paint("Validation PASSED with warnings", YELLOW, color))
    else:
        lines.append(_paint("Validation PASSED", GREEN, color))
    return lines


def render_text(report: CheckRunReport, *, color: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    out: list[str] = [] if quiet else list(BANNER)
    for result in report.results:
        out.extend(_result_lines(result, color, verbose, quiet))
    out.extend(summary_lines(report, color))
    if quiet:
        while out and not out[0]:
            out.pop(0)
    return "\n".join(out)


def _finding_row(finding: Finding) -> dict[str, Any]:
    return {
        "severity": finding.severity.value,
        "message": finding.message,
        "path": finding.path,
        "line": finding.line,
        "hint": finding.hint,
        "details": list(finding.details),
    }


def results_as_rows(results: tuple[CheckResult, ...]) -> list[dict[str, Any]]:
    return [
        {
            "id": result.check_id,
            "title": result.title,
            "group": result.group,
            "status": result.status.value,
            "duration_ms": result.duration_ms,
            "findings": [_finding_row(item) for item in result.findings],
        }
        for result in results
    ]


def build_report_payload(report: CheckRunReport, *, run_id: str = "") -> dict[str, Any]:
    payload: dict[str, Any] = {
        "schema_version": 1,
        "tool": "docscanon",
        "kind": "docs-validation",
        "run_id": run_id,
        "mode": report.mode,
        "status": report.status,
        "exit_code": report.exit_code,
        "summary": {
            "errors": report.errors,
            "warnings": report.warnings,
            "checks": len(report.results),
            "duration_ms": int(report.timings.get("duration_ms", 0)),
        },
        "checks": results_as_rows(report.results),
    }
    validate(REPORT, payload)
    return payload


def render_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, sort_keys=True)


__all__ = [
    "build_report_payload",
    "render_json",
    "render_text",
    "results_as_rows",
    "summary_lines",
]
