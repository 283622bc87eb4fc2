from __future__ import annotations

import json
import platform
from typing import Any

from . import __version__
from .core.context import RunContext
from .core.tools import TOOLS


def doctor_payload(ctx: RunContext) -> dict[str, Any]:
    tools = []
    for tool in TOOLS:
        location = tool.locate()
        tools.append(
            {
                "name": tool.name,
                "executable": tool.executable,
                "status": "ok" if location else "missing",
                "path": location or "",
                "install": tool.install_hint,
            }
        )
    return {
        "schema_version": 1,
        "tool": "docscanon",
        "status": "warn" if ctx.config_error else "ok",
        "version": __version__,
        "python": platform.python_version(),
        "run_id": ctx.run_id,
        "repo_root": str(ctx.repo_root),
        "config_source": ctx.config.source,
        "config_error": ctx.config_error,
        "tools": tools,
    }


def render_doctor_text(payload: dict[str, Any]) -> str:
    lines = [
        f"docscanon {payload['version']} (python {payload['python']})",
        f"repo_root: {payload['repo_root']}",
        f"config: {payload['config_source']}",
        "tools:",
    ]
    if payload["config_error"]:
        lines.insert(3, f"config error: {payload['config_error']}")
    width = max(len(row["name"]) for row in payload["tools"])
    for row in payload["tools"]:
        if row["status"] == "ok":
            lines.append(f"  {row['name']:<{width}}  ok       {row['path']}")
        else:
            lines.append(f"  {row['name']:<{width}}  missing  install: {row['install']}")
    return "\n".join(lines)


def run_doctor(ctx: RunContext, as_json: bool) -> int:
    payload = doctor_payload(ctx)
    print(json.dumps(payload, sort_keys=True) if as_json else render_doctor_text(payload))
    return 0
