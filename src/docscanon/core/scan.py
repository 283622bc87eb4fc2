from __future__ import annotations

from pathlib import Path
from typing import Iterable

EXCLUDED_PARTS = {
    ".git",
    ".venv",
    "__pycache__",
    ".mypy_cache",
    ".ruff_cache",
    ".hypothesis",
    "node_modules",
}


def selected(path: Path, only: tuple[Path, ...]) -> bool:
    """True when no restriction is set, or `path` is one of `only` or lies under one of them."""
    if not only:
        return True
    resolved = path.resolve()
    for item in only:
        if resolved == item or item in resolved.parents:
            return True
    return False


def iter_files(
    root: Path,
    patterns: Iterable[str],
    only: tuple[Path, ...] = (),
    prune: bool = True,
) -> list[Path]:
    wanted = tuple(patterns)
    out: set[Path] = set()
    for pattern in wanted:
        for path in root.rglob(pattern):
            if not path.is_file():
                continue
            if prune and any(part in EXCLUDED_PARTS for part in path.relative_to(root).parts):
                continue
            if selected(path, only):
                out.add(path)
    return sorted(out)
