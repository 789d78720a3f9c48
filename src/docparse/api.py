"""
docparse.api
============

Programmatic entrypoints for building and rendering parser configuration.

Goals:
  - No argparse / CLI dependencies
  - Plain, JSON-friendly documents that match the bundled schema

Non-goals:
  - Finding config files — callers pass the paths they want applied

Usage::

    from docparse.api import default_configuration, dump, load

    config = load("docparse.yml", {"encoding": "latin-1"}, rebuild_cache=True)
    print(dump(config, fmt="yaml"))
"""

from __future__ import annotations

from typing import Mapping

import yaml

from docparse.config.loader import Source, load_configuration
from docparse.config.merge import MergePolicy
from docparse.contracts.mapping import to_document
from docparse.model.configuration import ParserConfiguration
from docparse.utils.json_norm import stable_json_dumps

FORMATS = ("json", "yaml")


def default_configuration() -> ParserConfiguration:
    """Return a record holding only the built-in defaults."""
    return ParserConfiguration()


def load(
    *sources: Source,
    rebuild_cache: bool = False,
    policies: Mapping[str, MergePolicy] | None = None,
) -> ParserConfiguration:
    """Apply *sources* (YAML paths or mappings) over the defaults, in order."""
    return load_configuration(*sources, rebuild_cache=rebuild_cache, policies=policies)


def dump(config: ParserConfiguration, *, fmt: str = "json", wrapped: bool = False) -> str:
    """Render *config* as a configuration document.

    The runtime-only ``rebuild_cache`` flag is never rendered.
    """
    doc = to_document(config, wrapped=wrapped)
    if fmt == "json":
        return stable_json_dumps(doc)
    if fmt == "yaml":
        return yaml.safe_dump(doc, sort_keys=False, allow_unicode=True, default_flow_style=False)
    raise ValueError(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")
