"""Forbidden character scan for the documentation tree.

The core writing canon bans emojis and em dashes from every document. The
emoji set is the one the canon names explicitly; projects add their own
sequences through ``extra_forbidden``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ...core.scan import iter_files
from ..model import Finding

if TYPE_CHECKING:
    from ...core.context import RunContext

EMOJIS: tuple[str, ...] = (
    "\U0001F600",
    "\U0001F601",
    "\U0001F602",
    "\U0001F389",
    "\u2705",
    "\u274c",
    "\u26a0\ufe0f",
)
EM_DASH = "\u2014"


@dataclass(frozen=True)
class ForbiddenRule:
    name: str
    sequences: tuple[str, ...]
    error: str
    success: str


@dataclass(frozen=True)
class Hit:
    path: str
    line: int
    sequence: str

    def render(self) -> str:
        return f"{self.path}:{self.line}: {self.sequence!r}"


def rules_for(extra: tuple[str, ...] = ()) -> tuple[ForbiddenRule, ...]:
    rules = [
        ForbiddenRule(
            "emoji",
            EMOJIS,
            "Emojis found in documentation (violates core canon)",
            "No emojis found",
        ),
        ForbiddenRule(
            "em-dash",
            (EM_DASH,),
            f"Emdashes ({EM_DASH}) found in documentation (violates core canon)",
            "No emdashes found",
        ),
    ]
    if extra:
        rules.append(
            ForbiddenRule(
                "extra",
                tuple(extra),
                "Forbidden sequences found in documentation (violates core canon)",
                "No forbidden sequences found",
            )
        )
    return tuple(rules)


def find_forbidden(text: str, sequences: tuple[str, ...]) -> list[tuple[int, str]]:
    hits: list[tuple[int, str]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        for seq in sequences:
            if seq in line:
                hits.append((lineno, seq))
    return hits


def scan_files(ctx: RunContext, files: list[Path], rules: tuple[ForbiddenRule, ...]) -> dict[str, list[Hit]]:
    hits: dict[str, list[Hit]] = {rule.name: [] for rule in rules}
    for path in files:
        text = path.read_text(encoding="utf-8", errors="ignore")
        rel = ctx.rel(path)
        for rule in rules:
            hits[rule.name].extend(Hit(rel, line, seq) for line, seq in find_forbidden(text, rule.sequences))
    return hits


def check_formatting_rules(ctx: RunContext) -> list[Finding]:
    paths = ctx.config.paths
    docs_root = ctx.path(paths.docs)
    if not docs_root.is_dir():
        return []
    # Every file under the docs root counts, generated and binary files included.
    files = iter_files(docs_root, ("*",), ctx.only_paths, prune=False)
    rules = rules_for(ctx.config.extra_forbidden)
    hits = scan_files(ctx, files, rules)
    findings: list[Finding] = []
    for rule in rules:
        rule_hits = hits[rule.name]
        if rule_hits:
            findings.append(
                Finding.error(
                    rule.error,
                    paths.docs,
                    details=tuple(hit.render() for hit in rule_hits),
                )
            )
        else:
            findings.append(Finding.ok(rule.success, paths.docs))
    return findings
