"""Per-field merge policies for combining configuration sources.

A later source never appends to a list field by default: ``markers`` and
``extensions`` given by an override replace the earlier list wholesale.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Any, Mapping

from docparse.contracts.mapping import FIELDS
from docparse.model.configuration import ParserConfiguration

_logger = logging.getLogger(__name__)


class MergePolicy(str, Enum):
    REPLACE = "replace"
    APPEND = "append"
    DEEP_MERGE = "deep_merge"


DEFAULT_POLICIES: dict[str, MergePolicy] = {d.attribute: MergePolicy.REPLACE for d in FIELDS}


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        if isinstance(out.get(key), Mapping) and isinstance(value, Mapping):
            out[key] = _deep_merge(out[key], value)
        else:
            out[key] = value
    return out


def merge_value(policy: MergePolicy | str, base: Any, override: Any) -> Any:
    """Combine one field's *base* and *override* values under *policy*."""
    policy = MergePolicy(policy)
    if policy is MergePolicy.APPEND and isinstance(base, list) and isinstance(override, list):
        return base + [item for item in override if item not in base]
    if policy is MergePolicy.DEEP_MERGE and isinstance(base, Mapping) and isinstance(override, Mapping):
        return _deep_merge(base, override)
    return override


def merge(
    base: ParserConfiguration,
    overrides: Mapping[str, Any],
    *,
    policies: Mapping[str, MergePolicy | str] | None = None,
) -> ParserConfiguration:
    """Return a new record: *base* with decoded *overrides* merged in.

    *overrides* maps record attributes to values (see
    ``docparse.contracts.mapping.from_document``).  Attributes absent from
    it keep their base value.  *base* is left untouched.
    """
    effective = dict(DEFAULT_POLICIES)
    if policies:
        effective.update(policies)

    merged = replace(
        base,
        markers=list(base.markers),
        extensions=list(base.extensions),
    )
    for attribute, value in overrides.items():
        policy = MergePolicy(effective.get(attribute, MergePolicy.REPLACE))
        current = getattr(base, attribute)
        combined = merge_value(policy, current, value)
        _logger.debug("merge %s (%s): %r -> %r", attribute, policy.value, current, combined)
        setattr(merged, attribute, combined)
    return merged
