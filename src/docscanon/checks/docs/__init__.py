from __future__ import annotations

from ..model import CheckDef
from .access_levels import check_access_levels
from .formatting import check_formatting_rules
from .markdown import check_markdown_files
from .sphinx import check_sphinx_build

CHECKS: tuple[CheckDef, ...] = (
    CheckDef(
        "markdown",
        "docs",
        "Validating Markdown Files",
        check_markdown_files,
        tools=("markdownlint",),
        fix_hint="Run markdownlint on the failing file and fix the reported rules.",
    ),
    CheckDef(
        "sphinx",
        "docs",
        "Validating Sphinx Build",
        check_sphinx_build,
        tools=("sphinx-build",),
        fix_hint="Run `sphinx-build -W -b html` locally; every warning is treated as an error.",
    ),
    CheckDef(
        "access-levels",
        "docs",
        "Checking Access Level Warnings",
        check_access_levels,
        fix_hint="Add the access level banner (for example `INTERNAL DOCUMENTATION - Level 2`) to the document.",
    ),
    CheckDef(
        "formatting",
        "docs",
        "Checking Formatting Rules (No Emojis, No Emdashes)",
        check_formatting_rules,
        fix_hint="Replace emojis with plain words and em dashes with commas, colons or parentheses.",
    ),
)
