from __future__ import annotations

import shutil
from dataclasses import dataclass


@dataclass(frozen=True)
class ToolSpec:
    name: str
    executable: str
    install_hint: str

    def locate(self) -> str | None:
        return shutil.which(self.executable)

    @property
    def missing_message(self) -> str:
        return f"{self.name} not installed. Install: {self.install_hint}"


RSTCHECK = ToolSpec("rstcheck", "rstcheck", "pip install rstcheck")
SWAGGER_CLI = ToolSpec("swagger-cli", "swagger-cli", "npm install -g @apidevtools/swagger-cli")
GRAPHQL = ToolSpec("graphql", "node", "npm install -g graphql")
PROTOC = ToolSpec("protoc", "protoc", "https://grpc.io/docs/protoc-installation/")
MARKDOWNLINT = ToolSpec("markdownlint", "markdownlint", "npm install -g markdownlint-cli")
SPHINX_BUILD = ToolSpec("sphinx-build", "sphinx-build", "pip install sphinx")

TOOLS: tuple[ToolSpec, ...] = (RSTCHECK, SWAGGER_CLI, GRAPHQL, PROTOC, MARKDOWNLINT, SPHINX_BUILD)
