from __future__ import annotations

import time
from typing import TYPE_CHECKING

from ..logging import log_event
from .model import CheckDef, CheckResult, CheckRunReport, CheckStatus, Finding
from .registry import checks_for_mode

if TYPE_CHECKING:
    from ..core.context import RunContext


def run_check(ctx: RunContext, check: CheckDef) -> CheckResult:
    if ctx.diagnostics:
        log_event(ctx, "info", "checks", "start", check=check.check_id)
    started = time.perf_counter()
    try:
        findings = tuple(check.fn(ctx))
    except Exception as exc:
        findings = (Finding.error(f"{exc.__class__.__name__}: {exc}", hint=check.fix_hint),)
        if ctx.diagnostics:
            log_event(ctx, "error", "checks", "crash", check=check.check_id, error=str(exc))
    duration_ms = int((time.perf_counter() - started) * 1000)
    result = CheckResult(
        check_id=check.check_id,
        group=check.group,
        title=check.title,
        findings=findings,
        duration_ms=duration_ms,
    )
    if ctx.diagnostics:
        log_event(
            ctx,
            "info",
            "checks",
            "finish",
            check=check.check_id,
            status=result.status.value,
            errors=result.errors,
            warnings=result.warnings,
            duration_ms=duration_ms,
        )
    return result


def run_checks(ctx: RunContext, mode: str, fail_fast: bool = False) -> CheckRunReport:
    selected = checks_for_mode(mode)
    rows: list[CheckResult] = []
    started = time.perf_counter()
    for check in selected:
        result = run_check(ctx, check)
        rows.append(result)
        if fail_fast and result.status == CheckStatus.FAIL:
            break
    total_duration = int((time.perf_counter() - started) * 1000)
    return CheckRunReport(mode=mode, results=tuple(rows), timings={"duration_ms": total_duration})


def extract_failures(report: CheckRunReport) -> list[CheckResult]:
    return [row for row in report.results if row.status == CheckStatus.FAIL]


__all__ = ["extract_failures", "run_check", "run_checks"]
