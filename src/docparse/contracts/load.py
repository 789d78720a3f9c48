"""Load bundled JSON schemas and validate configuration documents.

Usage::

    from docparse.contracts.load import validate_document, validate_instance

    validate_document({"encoding": "latin-1"})
    validate_instance(doc, "parser_configuration.schema.json")
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

from docparse.errors import ConfigurationError

SCHEMA_DIR = "data/schemas"
PARSER_CONFIGURATION_SCHEMA = "parser_configuration.schema.json"


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/docparse/data/schemas/`` relative to this file
    2. package data via importlib.resources (wheel / zip installs)
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(resources.files("docparse") / SCHEMA_DIR / name) as p:
        if not p.exists():
            raise FileNotFoundError(f"Schema not found: {name}")
        return p


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    path = _schema_path(name)
    return json.loads(path.read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)


def validate_document(document: Any, *, source: str | None = None) -> None:
    """Check the structure of a parser configuration document.

    Raises ``ConfigurationError`` carrying the location of the first error.
    """
    try:
        validate_instance(document, PARSER_CONFIGURATION_SCHEMA)
    except jsonschema.ValidationError as e:
        path = "".join(f"/{part}" for part in e.absolute_path)
        raise ConfigurationError(e.message, source=source, path=path) from e
