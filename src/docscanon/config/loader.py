from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

try:
    import tomllib  # py311+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

from ..contracts import CONFIG, validate
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG

DEFAULTS: dict[str, Any] = {
    "paths": {
        "rest": "docs/source",
        "openapi": "api-specs",
        "graphql": "graphql",
        "proto": "proto",
        "decisions": "docs/decisions",
        "docs": "docs",
        "changelog": "CHANGELOG.md",
        "sphinx_source": "docs/source",
        "sphinx_build": "docs/build",
    },
    "access_level_marker": "DOCUMENTATION - Level",
    "check_access_level_range": False,
    "extra_forbidden": [],
    "tool_timeout_seconds": 0,
}

CONFIG_FILENAMES = ("docscanon.yaml", ".docscanon.yml")


@dataclass(frozen=True)
class DocsPaths:
    rest: str
    openapi: str
    graphql: str
    proto: str
    decisions: str
    docs: str
    changelog: str
    sphinx_source: str
    sphinx_build: str


@dataclass(frozen=True)
class DocsConfig:
    paths: DocsPaths
    access_level_marker: str
    check_access_level_range: bool
    extra_forbidden: tuple[str, ...]
    tool_timeout_seconds: int
    source: str = "<defaults>"

    @classmethod
    def from_mapping(cls, data: dict[str, Any], source: str = "<defaults>") -> "DocsConfig":
        return cls(
            paths=DocsPaths(**data["paths"]),
            access_level_marker=str(data["access_level_marker"]),
            check_access_level_range=bool(data["check_access_level_range"]),
            extra_forbidden=tuple(str(item) for item in data["extra_forbidden"]),
            tool_timeout_seconds=int(data["tool_timeout_seconds"]),
            source=source,
        )


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ScriptError(f"invalid TOML in {path}: {exc}", ERR_CONFIG, "config_error") from exc
    if path.name == "pyproject.toml":
        section = data.get("tool", {}).get("docscanon", {})
    else:
        section = data.get("tool", {}).get("docscanon", data)
    if not isinstance(section, dict):
        raise ScriptError(f"{path}: docscanon config must be a table", ERR_CONFIG, "config_error")
    return section


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ScriptError(f"invalid YAML in {path}: {exc}", ERR_CONFIG, "config_error") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ScriptError(f"{path}: root must be mapping", ERR_CONFIG, "config_error")
    return data


def read_config_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ScriptError(f"config file not found: {path}", ERR_CONFIG, "config_error")
    if path.suffix == ".toml":
        return _read_toml(path)
    if path.suffix in {".yaml", ".yml"}:
        return _read_yaml(path)
    raise ScriptError(f"unsupported config format: {path.name} (expected .toml, .yaml or .yml)", ERR_CONFIG, "config_error")


def find_config_file(repo_root: Path) -> Path | None:
    for name in CONFIG_FILENAMES:
        candidate = repo_root / name
        if candidate.is_file():
            return candidate
    pyproject = repo_root / "pyproject.toml"
    if pyproject.is_file() and "docscanon" in _pyproject_tools(pyproject):
        return pyproject
    return None


def _pyproject_tools(pyproject: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ScriptError(f"invalid TOML in {pyproject}: {exc}", ERR_CONFIG, "config_error") from exc
    tools = data.get("tool", {})
    return tools if isinstance(tools, dict) else {}


def default_config() -> DocsConfig:
    return DocsConfig.from_mapping(copy.deepcopy(DEFAULTS))


def load_config(repo_root: Path, explicit: Path | None = None) -> DocsConfig:
    """Load defaults merged with the first config file found, validated against the config schema."""
    path = explicit if explicit is not None else find_config_file(repo_root)
    if path is None:
        return default_config()
    override = read_config_file(path)
    validate(CONFIG, override, code=ERR_CONFIG)
    return DocsConfig.from_mapping(_merge(DEFAULTS, override), source=str(path))
