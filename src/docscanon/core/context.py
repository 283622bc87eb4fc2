from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..config import DocsConfig, default_config, load_config
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG, ERR_USAGE
from ..run_id import make_run_id

OutputFormat = Literal["text", "json"]


def color_enabled(no_color: bool) -> bool:
    if no_color or os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    config: DocsConfig
    output_format: OutputFormat = "text"
    verbose: bool = False
    quiet: bool = False
    log_json: bool = False
    color: bool = False
    only_paths: tuple[Path, ...] = ()
    config_error: str = ""

    @property
    def diagnostics(self) -> bool:
        return self.verbose and not self.quiet

    def path(self, rel: str) -> Path:
        return self.repo_root / rel

    def rel(self, path: Path) -> str:
        try:
            return path.relative_to(self.repo_root).as_posix()
        except ValueError:
            return path.as_posix()

    @classmethod
    def from_args(
        cls,
        root: str | None,
        config_path: str | None = None,
        run_id: str | None = None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
        no_color: bool = False,
        only_paths: list[str] | None = None,
        strict_config: bool = True,
    ) -> "RunContext":
        repo_root = Path(root or os.getcwd()).resolve()
        if not repo_root.is_dir():
            raise ScriptError(f"repository root is not a directory: {repo_root}", ERR_USAGE, "usage_error")
        explicit = Path(config_path).resolve() if config_path else None
        config_error = ""
        try:
            config = load_config(repo_root, explicit)
        except ScriptError as exc:
            if strict_config or exc.code != ERR_CONFIG:
                raise
            config = default_config()
            config_error = str(exc)
        resolved_run_id = run_id or os.environ.get("RUN_ID") or make_run_id(repo_root)
        resolved_only = tuple(
            (Path(p) if Path(p).is_absolute() else repo_root / p).resolve() for p in (only_paths or [])
        )
        return cls(
            run_id=resolved_run_id,
            repo_root=repo_root,
            config=config,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
            color=(output_format == "text" and color_enabled(no_color)),
            only_paths=resolved_only,
            config_error=config_error,
        )
