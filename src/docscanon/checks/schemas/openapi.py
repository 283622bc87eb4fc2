from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.process import CommandResult
from ...core.tools import SWAGGER_CLI
from ..external import lint_each_file
from ..model import Finding

if TYPE_CHECKING:
    from ...core.context import RunContext


def swagger_passed(result: CommandResult) -> bool:
    return "is valid" in result.combined_output


def check_openapi_specs(ctx: RunContext) -> list[Finding]:
    return lint_each_file(
        ctx,
        tool=SWAGGER_CLI,
        rel_dir=ctx.config.paths.openapi,
        patterns=("*.yaml", "*.yml"),
        build=lambda exe, rel: [exe, "validate", rel],
        passed=swagger_passed,
        ok_label="OpenAPI valid",
        fail_label="OpenAPI validation failed",
    )
