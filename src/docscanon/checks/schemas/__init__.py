from __future__ import annotations

from ..model import CheckDef
from .graphql import check_graphql_schemas
from .openapi import check_openapi_specs
from .proto import check_proto_files
from .rest import check_rest_files

CHECKS: tuple[CheckDef, ...] = (
    CheckDef(
        "rest",
        "schemas",
        "Validating reStructuredText Files",
        check_rest_files,
        tools=("rstcheck",),
        fix_hint="Run rstcheck on the failing file and fix the reported ERROR lines.",
    ),
    CheckDef(
        "openapi",
        "schemas",
        "Validating OpenAPI Specifications",
        check_openapi_specs,
        tools=("swagger-cli",),
        fix_hint="Run `swagger-cli validate <file>` and fix the reported schema errors.",
    ),
    CheckDef(
        "graphql",
        "schemas",
        "Validating GraphQL Schemas",
        check_graphql_schemas,
        tools=("graphql",),
        fix_hint="Fix the SDL so graphql.buildSchema accepts it.",
    ),
    CheckDef(
        "proto",
        "schemas",
        "Validating Protocol Buffers",
        check_proto_files,
        tools=("protoc",),
        fix_hint="Run protoc with --proto_path pointing at the proto root and fix the reported errors.",
    ),
)
