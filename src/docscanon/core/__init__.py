from __future__ import annotations

from .context import RunContext
from .process import CommandResult, run_command

__all__ = ["CommandResult", "RunContext", "run_command"]
