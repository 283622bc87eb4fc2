from __future__ import annotations

import os
from typing import TYPE_CHECKING

from ...core.tools import PROTOC
from ..external import lint_each_file
from ..model import Finding

if TYPE_CHECKING:
    from ...core.context import RunContext


def check_proto_files(ctx: RunContext) -> list[Finding]:
    proto_root = ctx.config.paths.proto
    return lint_each_file(
        ctx,
        tool=PROTOC,
        rel_dir=proto_root,
        patterns=("*.proto",),
        build=lambda exe, rel: [exe, f"--proto_path={proto_root}", f"--descriptor_set_out={os.devnull}", rel],
        passed=lambda result: result.code == 0,
        ok_label="Proto valid",
        fail_label="Proto validation failed",
    )
