from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

from ..exit_codes import ERR_VALIDATION, OK

if TYPE_CHECKING:
    from ..core.context import RunContext


class Severity(str, Enum):
    ERROR = "error"
    WARN = "warn"
    INFO = "info"


class CheckStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"
    SKIP = "skip"


@dataclass(frozen=True)
class Finding:
    severity: Severity
    message: str
    path: str = ""
    line: int = 0
    hint: str = ""
    details: tuple[str, ...] = ()

    @classmethod
    def error(cls, message: str, path: str = "", details: tuple[str, ...] = (), hint: str = "") -> "Finding":
        return cls(Severity.ERROR, message, path, hint=hint, details=details)

    @classmethod
    def warn(cls, message: str, path: str = "", line: int = 0, hint: str = "") -> "Finding":
        return cls(Severity.WARN, message, path, line=line, hint=hint)

    @classmethod
    def ok(cls, message: str, path: str = "") -> "Finding":
        return cls(Severity.INFO, message, path)


CheckFunc = Callable[["RunContext"], list[Finding]]


@dataclass(frozen=True)
class CheckDef:
    check_id: str
    group: str
    title: str
    fn: CheckFunc
    tools: tuple[str, ...] = ()
    fix_hint: str = "Review check output and apply the documented fix."


def status_for(findings: list[Finding] | tuple[Finding, ...]) -> CheckStatus:
    severities = {item.severity for item in findings}
    if Severity.ERROR in severities:
        return CheckStatus.FAIL
    if Severity.WARN in severities:
        return CheckStatus.WARN
    if Severity.INFO in severities:
        return CheckStatus.PASS
    return CheckStatus.SKIP


@dataclass(frozen=True)
class CheckResult:
    check_id: str
    group: str
    title: str
    findings: tuple[Finding, ...] = ()
    duration_ms: int = 0

    @property
    def status(self) -> CheckStatus:
        return status_for(self.findings)

    @property
    def errors(self) -> int:
        return sum(1 for item in self.findings if item.severity == Severity.ERROR)

    @property
    def warnings(self) -> int:
        return sum(1 for item in self.findings if item.severity == Severity.WARN)


@dataclass(frozen=True)
class CheckRunReport:
    mode: str
    results: tuple[CheckResult, ...] = ()
    timings: dict[str, int] = field(default_factory=dict)

    @property
    def errors(self) -> int:
        return sum(row.errors for row in self.results)

    @property
    def warnings(self) -> int:
        return sum(row.warnings for row in self.results)

    @property
    def status(self) -> str:
        if self.errors > 0:
            return "fail"
        if self.warnings > 0:
            return "pass-with-warnings"
        return "pass"

    @property
    def exit_code(self) -> int:
        return ERR_VALIDATION if self.errors > 0 else OK


__all__ = [
    "CheckDef",
    "CheckFunc",
    "CheckResult",
    "CheckRunReport",
    "CheckStatus",
    "Finding",
    "Severity",
    "status_for",
]
