from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from ...core.scan import iter_files
from ..model import Finding

if TYPE_CHECKING:
    from ...core.context import RunContext

ACCESS_LEVELS = {
    1: "Public",
    2: "Internal",
    3: "Restricted",
    4: "Confidential",
}


def declared_levels(text: str, marker: str) -> list[int]:
    return [int(raw) for raw in re.findall(re.escape(marker) + r"\s*(\d+)", text)]


def _file_findings(ctx: RunContext, path: Path) -> list[Finding]:
    rel = ctx.rel(path)
    marker = ctx.config.access_level_marker
    text = path.read_text(encoding="utf-8", errors="ignore")
    if marker not in text:
        return [Finding.warn(f"Missing access level warning: {rel}", rel)]
    if not ctx.config.check_access_level_range:
        return []
    invalid = sorted({level for level in declared_levels(text, marker) if level not in ACCESS_LEVELS})
    return [Finding.warn(f"Unknown access level {level} (expected 1-4): {rel}", rel) for level in invalid]


def check_access_levels(ctx: RunContext) -> list[Finding]:
    rel_dir = ctx.config.paths.rest
    root = ctx.path(rel_dir)
    if not root.is_dir():
        return []
    files = iter_files(root, ("*.rst",), ctx.only_paths)
    findings: list[Finding] = []
    for path in files:
        findings.extend(_file_findings(ctx, path))
    if files and not findings:
        findings.append(Finding.ok(f"Access level warnings present: {len(files)} file(s)", rel_dir))
    return findings
