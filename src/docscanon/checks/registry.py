from __future__ import annotations

from ..errors import ScriptError
from ..exit_codes import ERR_USAGE
from .docs import CHECKS as DOCS_CHECKS
from .model import CheckDef
from .schemas import CHECKS as SCHEMA_CHECKS

CHECKS: tuple[CheckDef, ...] = (*SCHEMA_CHECKS, *DOCS_CHECKS)

MODES: dict[str, tuple[str, ...]] = {
    "rest": ("rest",),
    "openapi": ("openapi",),
    "graphql": ("graphql",),
    "proto": ("proto",),
    "markdown": ("markdown",),
    "sphinx": ("sphinx",),
    "pre-commit": ("markdown", "formatting"),
    "all": tuple(check.check_id for check in CHECKS),
}

DEFAULT_MODE = "all"


def list_checks() -> tuple[CheckDef, ...]:
    return CHECKS


def get_check(check_id: str) -> CheckDef:
    for check in CHECKS:
        if check.check_id == check_id:
            return check
    known = ", ".join(check.check_id for check in CHECKS)
    raise ScriptError(f"unknown check `{check_id}` (known: {known})", ERR_USAGE, "usage_error")


def checks_for_mode(mode: str) -> tuple[CheckDef, ...]:
    ids = MODES.get(mode)
    if ids is None:
        known = ", ".join(sorted(MODES))
        raise ScriptError(f"unknown mode `{mode}` (known: {known})", ERR_USAGE, "usage_error")
    return tuple(get_check(check_id) for check_id in ids)


def modes_including(check_id: str) -> list[str]:
    return sorted(mode for mode, ids in MODES.items() if check_id in ids)
