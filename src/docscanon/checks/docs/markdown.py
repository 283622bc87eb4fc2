from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ...core.scan import iter_files, selected
from ...core.tools import MARKDOWNLINT
from ..external import detail_lines, missing_tool, run_tool
from ..model import Finding

if TYPE_CHECKING:
    from ...core.context import RunContext


def markdown_targets(ctx: RunContext) -> list[Path]:
    targets: list[Path] = []
    changelog = ctx.path(ctx.config.paths.changelog)
    if changelog.is_file() and selected(changelog, ctx.only_paths):
        targets.append(changelog)
    decisions = ctx.path(ctx.config.paths.decisions)
    if decisions.is_dir():
        targets.extend(iter_files(decisions, ("*.md",), ctx.only_paths))
    return targets


def check_markdown_files(ctx: RunContext) -> list[Finding]:
    exe = MARKDOWNLINT.locate()
    if exe is None:
        return [missing_tool(MARKDOWNLINT)]
    findings: list[Finding] = []
    for path in markdown_targets(ctx):
        rel = ctx.rel(path)
        result = run_tool(ctx, [exe, rel])
        if result.code == 0:
            findings.append(Finding.ok(f"Markdown valid: {rel}", rel))
        else:
            findings.append(Finding.error(f"Markdown validation failed: {rel}", rel, details=detail_lines(result)))
    return findings
