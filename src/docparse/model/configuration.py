"""ParserConfiguration — settings read by the parser for a single run."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import Visibility

DEFAULT_PACKAGE_NAME = "global"
DEFAULT_VISIBILITY = ",".join(v.value for v in Visibility)
DEFAULT_ENCODING = "utf-8"
DEFAULT_MARKERS = ("TODO", "FIXME")
DEFAULT_EXTENSIONS = ("php", "php3", "phtml")


@dataclass(slots=True)
class ParserConfiguration:
    """Mutable parser settings.

    Populated field by field by ``docparse.config.loader`` and read by the
    parser engine afterwards.  Values are stored exactly as given: nothing
    here validates, coerces or copies them.

    ``rebuild_cache`` is a runtime-only flag and never appears in a
    configuration document (see ``docparse.contracts.mapping``).
    """

    # Package assigned to elements with no ``@package`` tag, own or inherited.
    default_package_name: str = DEFAULT_PACKAGE_NAME
    # Where the parser writes its cache.  Kept apart from the generated docs
    # so the cache may live in a shared location.
    target: str | None = None
    # Comma-separated subset of public, protected, private.
    visibility: str = DEFAULT_VISIBILITY
    encoding: str = DEFAULT_ENCODING
    # Words that, directly following an inline comment opener, put the
    # comment into the markers report (``// TODO: fix this``).
    markers: list[str] = field(default_factory=lambda: list(DEFAULT_MARKERS))
    # Suffixes without the leading dot.
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    rebuild_cache: bool = False

    # ── accessors ───────────────────────────────────────────────────

    def get_default_package_name(self) -> str:
        return self.default_package_name

    def set_default_package_name(self, default_package_name: str) -> None:
        self.default_package_name = default_package_name

    def get_target(self) -> str | None:
        """Path the parsing product (its cache) is written to, if set."""
        return self.target

    def set_target(self, target: str | None) -> None:
        self.target = target

    def get_visibility(self) -> str:
        return self.visibility

    def set_visibility(self, visibility: str) -> None:
        self.visibility = visibility

    def get_encoding(self) -> str:
        """Character encoding the parsed files are expected to use."""
        return self.encoding

    def set_encoding(self, encoding: str) -> None:
        self.encoding = encoding

    def get_markers(self) -> list[str]:
        return self.markers

    def set_markers(self, markers: list[str]) -> None:
        self.markers = markers

    def get_extensions(self) -> list[str]:
        return self.extensions

    def set_extensions(self, extensions: list[str]) -> None:
        self.extensions = extensions

    def should_rebuild_cache(self) -> bool:
        return self.rebuild_cache

    def set_should_rebuild_cache(self, should_rebuild_cache: bool) -> None:
        self.rebuild_cache = should_rebuild_cache
