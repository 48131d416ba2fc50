"""
Schema Validation Utilities

Validates module catalog manifests against the packaged JSON schema.

The catalog is produced by a separate export step from the compiled game
module, so nothing about its shape is trusted: the whole document is checked
with jsonschema, then cross-record rules the schema cannot express
(unique question ids) are checked by hand.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
CATALOG_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _format_path(parts) -> str:
    return ".".join(str(p) for p in parts)


def validate_catalog(data: Any) -> None:
    """
    Validate a module catalog manifest.

    Args:
        data: Parsed JSON document

    Raises:
        ValidationError: If the document is not a valid catalog. ``errors``
            lists every schema violation found, not just the first.
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Catalog must be a JSON object, got {type(data).__name__}",
        )

    version = data.get("schema_version")
    if version != CATALOG_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported catalog schema version: {version} (expected {CATALOG_SCHEMA_VERSION})",
            path="schema_version",
        )

    validator = jsonschema.Draft7Validator(_load_schema("catalog"))
    violations = sorted(
        validator.iter_errors(data), key=lambda e: tuple(str(p) for p in e.absolute_path)
    )
    if violations:
        first = violations[0]
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=_format_path(first.absolute_path),
            errors=[f"{_format_path(e.absolute_path) or '<root>'}: {e.message}" for e in violations],
        )

    seen: set[str] = set()
    duplicates: list[str] = []
    for question in data["questions"]:
        qid = question["id"]
        if qid in seen:
            duplicates.append(qid)
        seen.add(qid)
    if duplicates:
        raise ValidationError(
            f"Duplicate question ids: {duplicates}",
            path="questions",
            errors=[f"Duplicate question id: {qid}" for qid in duplicates],
        )
