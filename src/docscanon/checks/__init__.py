from __future__ import annotations

from .model import CheckDef, CheckResult, CheckRunReport, CheckStatus, Finding, Severity
from .registry import CHECKS, MODES, checks_for_mode, get_check, list_checks
from .runner import run_checks

__all__ = [
    "CHECKS",
    "MODES",
    "CheckDef",
    "CheckResult",
    "CheckRunReport",
    "CheckStatus",
    "Finding",
    "Severity",
    "checks_for_mode",
    "get_check",
    "list_checks",
    "run_checks",
]
