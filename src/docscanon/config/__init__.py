from __future__ import annotations

from .loader import DEFAULTS, DocsConfig, DocsPaths, default_config, find_config_file, load_config

__all__ = ["DEFAULTS", "DocsConfig", "DocsPaths", "default_config", "find_config_file", "load_config"]
