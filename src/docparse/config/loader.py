"""Loader — read configuration sources and fold them into one record.

Sources are applied in order; each is structurally checked against the
bundled schema, decoded through the mapping table and merged over the
result so far.  Config files are YAML; a file may hold the parser document
itself or a tool document whose ``parser`` key holds it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from docparse.config.merge import MergePolicy, merge
from docparse.contracts.load import validate_document
from docparse.contracts.mapping import TRANSIENT_KEYS, from_document
from docparse.errors import ConfigurationError
from docparse.model.configuration import ParserConfiguration

_logger = logging.getLogger(__name__)

PARSER_SECTION = "parser"

Source = Union[str, Path, Mapping[str, Any]]


def _parser_section(data: Mapping[str, Any], source: str) -> Mapping[str, Any]:
    section = data[PARSER_SECTION] if PARSER_SECTION in data else data
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(
            f"'{PARSER_SECTION}' section must be a mapping, got {type(section).__name__}",
            source=source,
            path=f"/{PARSER_SECTION}",
        )
    return section


def read_document(path: str | Path) -> dict[str, Any]:
    """Read the parser document from the YAML file at *path*.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ConfigurationError
        If the YAML is malformed or its top level is not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"malformed YAML: {e}", source=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"top level must be a mapping, got {type(data).__name__}", source=str(path)
        )
    return dict(_parser_section(data, str(path)))


def _document_for(source: Source) -> tuple[str, dict[str, Any]]:
    if isinstance(source, Mapping):
        return "<mapping>", dict(_parser_section(source, "<mapping>"))
    return str(source), read_document(source)


def load_configuration(
    *sources: Source,
    rebuild_cache: bool = False,
    policies: Mapping[str, MergePolicy] | None = None,
    base: ParserConfiguration | None = None,
) -> ParserConfiguration:
    """Build a ``ParserConfiguration`` from *sources*, later ones winning.

    Starts from *base* (defaults when omitted).  The runtime-only
    ``rebuild_cache`` flag is never read from a document; it is set from
    the keyword argument.
    """
    # Copy so the caller's base is left untouched.
    config = merge(base, {}) if base is not None else ParserConfiguration()

    for source in sources:
        name, document = _document_for(source)
        _logger.debug("loading parser configuration from %s", name)
        validate_document(document, source=name)

        for key in TRANSIENT_KEYS:
            if key in document:
                _logger.warning("%s: ignoring runtime-only key %r", name, key)
                del document[key]

        config = merge(config, from_document(document, source=name), policies=policies)

    config.set_should_rebuild_cache(rebuild_cache)
    return config
