from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.tools import SPHINX_BUILD
from ..external import detail_lines, missing_tool, run_tool
from ..model import Finding

if TYPE_CHECKING:
    from ...core.context import RunContext

SUCCESS_MARKER = "build succeeded"


def check_sphinx_build(ctx: RunContext) -> list[Finding]:
    exe = SPHINX_BUILD.locate()
    if exe is None:
        return [missing_tool(SPHINX_BUILD)]
    paths = ctx.config.paths
    source = ctx.path(paths.sphinx_source)
    if not (source.is_dir() and (source / "conf.py").is_file()):
        return [Finding.warn("No Sphinx configuration found", paths.sphinx_source)]
    result = run_tool(ctx, [exe, "-W", "-b", "html", paths.sphinx_source, paths.sphinx_build])
    if not result.timed_out and SUCCESS_MARKER in result.combined_output:
        return [Finding.ok("Sphinx build succeeded", paths.sphinx_source)]
    return [Finding.error("Sphinx build failed", paths.sphinx_source, details=detail_lines(result))]
