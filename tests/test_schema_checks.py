from __future__ import annotations

from pathlib import Path

from docscanon.checks.model import CheckStatus, Severity, status_for
from docscanon.checks.schemas.graphql import MODULE_MISSING_MARKER, check_graphql_schemas, schema_built
from docscanon.checks.schemas.openapi import check_openapi_specs
from docscanon.checks.schemas.proto import check_proto_files
from docscanon.checks.schemas.rest import check_rest_files, rstcheck_passed
from docscanon.core.process import CommandResult
from helpers import fake_tool, make_context, write

RSTCHECK = """case "$1" in
  *bad*) echo "$1:3: (ERROR/3) Unexpected indentation."; exit 1;;
esac
echo "Success! No issues detected."
"""

SWAGGER = """case "$2" in
  *bad*) echo "$2 is not a valid OpenAPI definition" >&2; exit 1;;
esac
echo "$2 is valid"
"""

NODE = """case "$3" in
  *bad*) echo "Syntax Error: Unexpected Name" >&2; exit 1;;
esac
echo "valid"
"""

PROTOC = """case "$3" in
  *bad*) echo "$3:2:1: Expected top-level statement" >&2; exit 1;;
esac
exit 0
"""


def _messages(findings) -> list[str]:
    return [item.message for item in findings]


def test_rest_reports_each_file(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "rstcheck", RSTCHECK)
    write(repo, "docs/source/good.rst", "Good\n====\n")
    write(repo, "docs/source/nested/bad.rst", "Bad\n===\n  x\n")
    findings = check_rest_files(make_context(repo))
    assert _messages(findings) == [
        "reST valid: docs/source/good.rst",
        "reST validation failed: docs/source/nested/bad.rst",
    ]
    assert findings[1].severity == Severity.ERROR
    assert "Unexpected indentation" in findings[1].details[0]


def test_rest_missing_tool_is_a_single_warning(repo: Path) -> None:
    write(repo, "docs/source/good.rst", "Good\n====\n")
    findings = check_rest_files(make_context(repo))
    assert _messages(findings) == ["rstcheck not installed. Install: pip install rstcheck"]
    assert status_for(findings) == CheckStatus.WARN


def test_rest_missing_directory_is_a_warning(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "rstcheck", RSTCHECK)
    assert _messages(check_rest_files(make_context(repo))) == ["No docs/source directory found"]


def test_rstcheck_verdict_looks_for_error_markers() -> None:
    assert rstcheck_passed(CommandResult(0, "Success! No issues detected.", "", 1))
    assert not rstcheck_passed(CommandResult(1, "", "a.rst:1: (ERROR/3) bad", 1))
    assert not rstcheck_passed(CommandResult(1, "", "a.rst:1: (SEVERE/4) bad", 1))


def test_openapi_validates_yaml_and_yml(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "swagger-cli", SWAGGER)
    write(repo, "api-specs/users.yaml", "openapi: 3.0.0\n")
    write(repo, "api-specs/bad.yml", "openapi: nope\n")
    write(repo, "api-specs/README.md", "not a spec\n")
    findings = check_openapi_specs(make_context(repo))
    assert _messages(findings) == [
        "OpenAPI validation failed: api-specs/bad.yml",
        "OpenAPI valid: api-specs/users.yaml",
    ]


def test_openapi_missing_directory_is_a_warning(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "swagger-cli", SWAGGER)
    assert _messages(check_openapi_specs(make_context(repo))) == ["No api-specs directory found"]


def test_graphql_builds_each_schema(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "node", NODE)
    write(repo, "graphql/schema.graphql", "type Query { ok: Boolean }\n")
    write(repo, "graphql/bad.gql", "type {\n")
    findings = check_graphql_schemas(make_context(repo))
    assert _messages(findings) == [
        "GraphQL validation failed: graphql/bad.gql",
        "GraphQL valid: graphql/schema.graphql",
    ]


def test_graphql_without_node_module_warns_once(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "node", f'echo "{MODULE_MISSING_MARKER}" >&2\nexit 3\n')
    write(repo, "graphql/a.graphql", "type Query { a: Int }\n")
    write(repo, "graphql/b.graphql", "type Query { b: Int }\n")
    findings = check_graphql_schemas(make_context(repo))
    assert _messages(findings) == ["graphql not installed. Install: npm install -g graphql"]


def test_graphql_without_node_warns(repo: Path) -> None:
    write(repo, "graphql/a.graphql", "type Query { a: Int }\n")
    assert status_for(check_graphql_schemas(make_context(repo))) == CheckStatus.WARN


def test_graphql_verdict_does_not_accept_invalid() -> None:
    assert schema_built(CommandResult(0, "valid\n", "", 1))
    assert not schema_built(CommandResult(0, "invalid\n", "", 1))
    assert not schema_built(CommandResult(1, "valid\n", "", 1))


def test_proto_passes_on_exit_zero(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "protoc", PROTOC)
    write(repo, "proto/api/v1/service.proto", 'syntax = "proto3";\n')
    write(repo, "proto/bad.proto", "garbage\n")
    findings = check_proto_files(make_context(repo))
    assert _messages(findings) == [
        "Proto valid: proto/api/v1/service.proto",
        "Proto validation failed: proto/bad.proto",
    ]
    assert "Expected top-level statement" in findings[1].details[0]


def test_proto_empty_directory_reports_nothing(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "protoc", PROTOC)
    (repo / "proto").mkdir()
    assert check_proto_files(make_context(repo)) == []


def test_rstcheck_exiting_124_without_markers_is_valid(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "rstcheck", 'echo "Success! No issues detected."\nexit 124\n')
    write(repo, "docs/source/good.rst", "Good\n====\n")
    assert _messages(check_rest_files(make_context(repo))) == ["reST valid: docs/source/good.rst"]
