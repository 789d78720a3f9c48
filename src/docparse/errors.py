"""Errors raised while turning configuration documents into records."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A configuration document is structurally invalid.

    *source* names the file (or ``"<mapping>"``) the document came from,
    *path* the JSON-pointer-like location inside it, when known.
    """

    def __init__(self, message: str, *, source: str | None = None, path: str = "") -> None:
        self.source = source
        self.path = path
        prefix = f"{source}: " if source else ""
        where = f" (at {path})" if path else ""
        super().__init__(f"{prefix}{message}{where}")
