from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.process import CommandResult
from ...core.scan import iter_files
from ...core.tools import GRAPHQL
from ..external import detail_lines, missing_directory, missing_tool, run_tool
from ..model import Finding

if TYPE_CHECKING:
    from ...core.context import RunContext

MODULE_MISSING_MARKER = "docscanon: graphql module not found"
MODULE_MISSING_CODE = 3

# The schema path arrives as argv[1]; it is never spliced into the script text.
BUILD_SCHEMA_JS = (
    "const fs = require('fs');"
    "let graphql;"
    "try { graphql = require('graphql'); }"
    f" catch (e) {{ console.error('{MODULE_MISSING_MARKER}'); process.exit({MODULE_MISSING_CODE}); }}"
    "try { graphql.buildSchema(fs.readFileSync(process.argv[1], 'utf8')); console.log('valid'); }"
    " catch (e) { console.error(e.message); process.exit(1); }"
)


def graphql_module_missing(result: CommandResult) -> bool:
    return result.code == MODULE_MISSING_CODE and MODULE_MISSING_MARKER in result.stderr


def schema_built(result: CommandResult) -> bool:
    return result.code == 0 and "valid" in result.stdout.split()


def check_graphql_schemas(ctx: RunContext) -> list[Finding]:
    node = GRAPHQL.locate()
    if node is None:
        return [missing_tool(GRAPHQL)]
    rel_dir = ctx.config.paths.graphql
    root = ctx.path(rel_dir)
    if not root.is_dir():
        return [missing_directory(rel_dir)]
    findings: list[Finding] = []
    for path in iter_files(root, ("*.graphql", "*.gql"), ctx.only_paths):
        rel = ctx.rel(path)
        result = run_tool(ctx, [node, "-e", BUILD_SCHEMA_JS, rel])
        if graphql_module_missing(result):
            return [missing_tool(GRAPHQL)]
        if schema_built(result):
            findings.append(Finding.ok(f"GraphQL valid: {rel}", rel))
        else:
            findings.append(Finding.error(f"GraphQL validation failed: {rel}", rel, details=detail_lines(result)))
    return findings
