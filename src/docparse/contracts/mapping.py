"""Record ↔ document mapping for ``ParserConfiguration``.

The mapping is declared once, in ``FIELDS``, instead of being attached to
the record.  A *document* is the plain-mapping form found in config files:

.. code-block:: yaml

    default-package-name: global
    target: build/cache
    visibility: public,protected
    encoding: utf-8
    markers: [TODO, FIXME]
    extensions:
      extension: [php, phtml]     # wrapped form, also accepted

``rebuild_cache`` has no document key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from docparse.errors import ConfigurationError
from docparse.model.configuration import ParserConfiguration

SCALAR = "scalar"
LIST = "list"


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """How one record attribute appears in a document."""

    attribute: str
    key: str
    kind: str = SCALAR
    item_tag: str | None = None     # list fields only

    @property
    def setter(self) -> str:
        return f"set_{self.attribute}"


FIELDS: tuple[FieldDescriptor, ...] = (
    FieldDescriptor("default_package_name", "default-package-name"),
    FieldDescriptor("target", "target"),
    FieldDescriptor("visibility", "visibility"),
    FieldDescriptor("encoding", "encoding"),
    FieldDescriptor("markers", "markers", LIST, item_tag="item"),
    FieldDescriptor("extensions", "extensions", LIST, item_tag="extension"),
)

TRANSIENT_FIELDS: tuple[str, ...] = ("rebuild_cache",)
# Document spellings of transient fields; the loader drops them.
TRANSIENT_KEYS: tuple[str, ...] = ("should-rebuild-cache",)

_BY_KEY = {d.key: d for d in FIELDS}
_BY_ATTRIBUTE = {d.attribute: d for d in FIELDS}


def descriptor_for_key(key: str) -> FieldDescriptor:
    return _BY_KEY[key]


def descriptor_for_attribute(attribute: str) -> FieldDescriptor:
    return _BY_ATTRIBUTE[attribute]


# ── encode ──────────────────────────────────────────────────────────


def to_document(config: ParserConfiguration, *, wrapped: bool = False) -> dict[str, Any]:
    """Encode *config* as a document, keys in ``FIELDS`` order.

    An unset ``target`` is omitted.  With *wrapped* list fields are
    rendered as ``{item_tag: [...]}``.
    """
    doc: dict[str, Any] = {}
    for d in FIELDS:
        value = getattr(config, d.attribute)
        if value is None:
            continue
        if d.kind == LIST:
            items = list(value)
            doc[d.key] = {d.item_tag: items} if wrapped else items
        else:
            doc[d.key] = value
    return doc


# ── decode ──────────────────────────────────────────────────────────


def _decode_list(d: FieldDescriptor, raw: Any, source: str | None) -> list[str]:
    if isinstance(raw, Mapping):
        unexpected = sorted(set(raw) - {d.item_tag})
        if unexpected:
            raise ConfigurationError(
                f"unexpected entry {unexpected[0]!r} in {d.key!r}, "
                f"expected {d.item_tag!r}",
                source=source,
                path=f"/{d.key}",
            )
        raw = raw.get(d.item_tag, [])
        # A wrapper holding one entry collapses to a bare scalar.
        if isinstance(raw, str):
            raw = [raw]
    if not isinstance(raw, (list, tuple)):
        raise ConfigurationError(
            f"{d.key!r} must be a list, got {type(raw).__name__}",
            source=source,
            path=f"/{d.key}",
        )
    return list(raw)


def from_document(
    document: Mapping[str, Any], *, source: str | None = None
) -> dict[str, Any]:
    """Decode *document* into ``{attribute: value}`` for the keys present.

    Raises ``ConfigurationError`` on an unknown key.
    """
    values: dict[str, Any] = {}
    for key, raw in document.items():
        try:
            d = descriptor_for_key(key)
        except KeyError:
            raise ConfigurationError(
                f"unknown configuration key {key!r}", source=source, path=f"/{key}"
            ) from None
        values[d.attribute] = _decode_list(d, raw, source) if d.kind == LIST else raw
    return values


def apply_document(
    config: ParserConfiguration,
    document: Mapping[str, Any],
    *,
    source: str | None = None,
) -> ParserConfiguration:
    """Overwrite the fields of *config* present in *document*; return *config*."""
    for attribute, value in from_document(document, source=source).items():
        getattr(config, descriptor_for_attribute(attribute).setter)(value)
    return config
