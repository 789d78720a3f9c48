"""Enums and records shared by the loader and the parser engine."""

from __future__ import annotations

from enum import Enum


class Visibility(str, Enum):
    """Access levels a documented element may carry."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


__all__ = ["Visibility", "ParserConfiguration"]

from docparse.model.configuration import ParserConfiguration  # noqa: E402
