from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from docscanon.checks.docs.access_levels import ACCESS_LEVELS, check_access_levels, declared_levels
from docscanon.checks.model import Severity
from helpers import make_context, write

BANNER = "INTERNAL DOCUMENTATION - Level 2\n\nBody\n"


def test_files_without_marker_are_warnings(repo: Path) -> None:
    write(repo, "docs/source/index.rst", BANNER)
    write(repo, "docs/source/guide/setup.rst", "Setup\n=====\n")
    findings = check_access_levels(make_context(repo))
    assert [item.message for item in findings] == ["Missing access level warning: docs/source/guide/setup.rst"]
    assert findings[0].severity == Severity.WARN


def test_every_file_marked_yields_a_success_line(repo: Path) -> None:
    write(repo, "docs/source/index.rst", BANNER)
    write(repo, "docs/source/api.rst", "PUBLIC DOCUMENTATION - Level 1\n")
    findings = check_access_levels(make_context(repo))
    assert len(findings) == 1
    assert findings[0].severity == Severity.INFO


def test_missing_source_directory_reports_nothing(repo: Path) -> None:
    assert check_access_levels(make_context(repo)) == []


def test_level_range_is_only_enforced_when_enabled(repo: Path) -> None:
    write(repo, "docs/source/index.rst", "SECRET DOCUMENTATION - Level 7\n")
    ctx = make_context(repo)
    assert check_access_levels(ctx)[0].severity == Severity.INFO
    strict = replace(ctx, config=replace(ctx.config, check_access_level_range=True))
    findings = check_access_levels(strict)
    assert [item.message for item in findings] == ["Unknown access level 7 (expected 1-4): docs/source/index.rst"]
    assert findings[0].severity == Severity.WARN


def test_declared_levels_reads_every_marker() -> None:
    text = "A DOCUMENTATION - Level 1\nB DOCUMENTATION - Level  4\n"
    assert declared_levels(text, "DOCUMENTATION - Level") == [1, 4]
    assert sorted(ACCESS_LEVELS) == [1, 2, 3, 4]
