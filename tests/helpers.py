from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Any

from docscanon.core.context import RunContext

ROOT = Path(__file__).resolve().parents[1]


def write(root: Path, rel: str, text: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def fake_tool(bin_dir: Path, name: str, body: str) -> Path:
    """Install a /bin/sh stand-in for an external linter on the test PATH."""
    path = bin_dir / name
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    path.chmod(0o755)
    return path


def make_context(root: Path, **kwargs: Any) -> RunContext:
    return RunContext.from_args(str(root), run_id="pytest-run", **kwargs)


def run_docscanon(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT / "src")
    env.setdefault("RUN_ID", "pytest-run")
    env["PYTHONIOENCODING"] = "utf-8"
    return subprocess.run(
        [sys.executable, "-m", "docscanon", *args],
        cwd=(cwd or ROOT),
        env=env,
        text=True,
        encoding="utf-8",
        capture_output=True,
        check=False,
    )
