from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable

from ..core.process import CommandResult, run_command
from ..core.scan import iter_files
from ..core.tools import ToolSpec
from .model import Finding

if TYPE_CHECKING:
    from ..core.context import RunContext

CommandBuilder = Callable[[str, str], list[str]]
Verdict = Callable[[CommandResult], bool]

_DETAIL_LINES = 20


def detail_lines(result: CommandResult) -> tuple[str, ...]:
    lines = [line for line in result.combined_output.splitlines() if line.strip()]
    if len(lines) > _DETAIL_LINES:
        lines = lines[:_DETAIL_LINES] + [f"... {len(lines) - _DETAIL_LINES} more line(s)"]
    return tuple(lines)


def missing_tool(tool: ToolSpec) -> Finding:
    return Finding.warn(tool.missing_message, hint=tool.install_hint)


def missing_directory(rel_dir: str) -> Finding:
    return Finding.warn(f"No {rel_dir} directory found")


def run_tool(ctx: RunContext, cmd: list[str]) -> CommandResult:
    return run_command(cmd, ctx.repo_root, ctx.config.tool_timeout_seconds, ctx)


def lint_each_file(
    ctx: RunContext,
    *,
    tool: ToolSpec,
    rel_dir: str,
    patterns: tuple[str, ...],
    build: CommandBuilder,
    passed: Verdict,
    ok_label: str,
    fail_label: str,
) -> list[Finding]:
    """Run `tool` once per matching file under `rel_dir`, one finding per file."""
    exe = tool.locate()
    if exe is None:
        return [missing_tool(tool)]
    root = ctx.path(rel_dir)
    if not root.is_dir():
        return [missing_directory(rel_dir)]
    findings: list[Finding] = []
    for path in iter_files(root, patterns, ctx.only_paths):
        findings.append(_lint_one(ctx, path, exe, build, passed, ok_label, fail_label))
    return findings


def _lint_one(
    ctx: RunContext,
    path: Path,
    exe: str,
    build: CommandBuilder,
    passed: Verdict,
    ok_label: str,
    fail_label: str,
) -> Finding:
    rel = ctx.rel(path)
    result = run_tool(ctx, build(exe, rel))
    if not result.timed_out and passed(result):
        return Finding.ok(f"{ok_label}: {rel}", rel)
    return Finding.error(f"{fail_label}: {rel}", rel, details=detail_lines(result))
