"""Packaged JSON schemas and validation APIs."""

from .validate import CONFIG, REPORT, schema_path, validate

__all__ = ["CONFIG", "REPORT", "schema_path", "validate"]
