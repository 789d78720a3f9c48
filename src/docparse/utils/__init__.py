"""Shared utilities for docparse."""

from docparse.utils.exit_codes import ExitCode
from docparse.utils.json_norm import stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dumps",
]
