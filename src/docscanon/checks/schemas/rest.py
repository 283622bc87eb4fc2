from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.process import CommandResult
from ...core.tools import RSTCHECK
from ..external import lint_each_file
from ..model import Finding

if TYPE_CHECKING:
    from ...core.context import RunContext

_FAILURE_MARKERS = ("ERROR", "SEVERE")


def rstcheck_passed(result: CommandResult) -> bool:
    output = result.combined_output
    return not any(marker in output for marker in _FAILURE_MARKERS)


def check_rest_files(ctx: RunContext) -> list[Finding]:
    return lint_each_file(
        ctx,
        tool=RSTCHECK,
        rel_dir=ctx.config.paths.rest,
        patterns=("*.rst",),
        build=lambda exe, rel: [exe, rel],
        passed=rstcheck_passed,
        ok_label="reST valid",
        fail_label="reST validation failed",
    )
