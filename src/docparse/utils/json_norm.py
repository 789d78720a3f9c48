"""Canonical JSON serialization — single dump path for CLI output.

Guarantees:
  - Trailing newline at EOF
  - Key order kept as given unless ``sort_keys=True``
  - Non-ASCII text written as-is
"""

from __future__ import annotations

import json
from typing import Any


def stable_json_dumps(obj: Any, *, sort_keys: bool = False, indent: int | None = 2) -> str:
    s = json.dumps(
        obj,
        indent=indent,
        sort_keys=sort_keys,
        ensure_ascii=False,
    )
    return s + "\n"
