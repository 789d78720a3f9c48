"""Tests for the ParserConfiguration record."""

from __future__ import annotations

import pytest

from docparse.model import ParserConfiguration, Visibility


class TestDefaults:
    """A fresh record carries the built-in defaults."""

    def test_scalar_defaults(self) -> None:
        config = ParserConfiguration()
        assert config.get_default_package_name() == "global"
        assert config.get_target() is None
        assert config.get_visibility() == "public,protected,private"
        assert config.get_encoding() == "utf-8"

    def test_list_defaults(self) -> None:
        config = ParserConfiguration()
        assert config.get_markers() == ["TODO", "FIXME"]
        assert config.get_extensions() == ["php", "php3", "phtml"]

    def test_rebuild_cache_off_by_default(self) -> None:
        assert ParserConfiguration().should_rebuild_cache() is False

    def test_visibility_default_lists_every_level(self) -> None:
        tokens = ParserConfiguration().get_visibility().split(",")
        assert tokens == [v.value for v in Visibility]

    def test_instances_do_not_share_lists(self) -> None:
        a = ParserConfiguration()
        b = ParserConfiguration()
        a.get_markers().append("XXX")
        assert b.get_markers() == ["TODO", "FIXME"]
        assert a.get_extensions() is not b.get_extensions()


class TestAccessors:
    """Setters store exactly what they are given."""

    @pytest.mark.parametrize(
        "name, value",
        [
            ("default_package_name", "Vendor\\Package"),
            ("target", "build/cache"),
            ("visibility", "public"),
            ("encoding", "iso-8859-1"),
            ("markers", ["HACK"]),
            ("extensions", ["inc", "module"]),
        ],
    )
    def test_set_then_get_returns_same_object(self, name: str, value) -> None:
        config = ParserConfiguration()
        getattr(config, f"set_{name}")(value)
        assert getattr(config, f"get_{name}")() is value
        assert getattr(config, name) is value

    def test_repeated_cycles(self) -> None:
        config = ParserConfiguration()
        for encoding in ("utf-8", "latin-1", "cp1252", "utf-8"):
            config.set_encoding(encoding)
            assert config.get_encoding() == encoding

    def test_target_is_not_normalized(self) -> None:
        config = ParserConfiguration()
        config.set_target("/tmp/cache")
        assert config.get_target() == "/tmp/cache"
        config.set_target("./out//cache/")
        assert config.get_target() == "./out//cache/"

    def test_empty_markers_stay_empty(self) -> None:
        config = ParserConfiguration()
        config.set_markers([])
        assert config.get_markers() == []

    def test_should_rebuild_cache_reflects_last_set(self) -> None:
        config = ParserConfiguration()
        config.set_should_rebuild_cache(True)
        assert config.should_rebuild_cache() is True
        config.set_should_rebuild_cache(False)
        assert config.should_rebuild_cache() is False

    def test_no_validation_of_values(self) -> None:
        config = ParserConfiguration()
        config.set_visibility("public,internal")
        config.set_extensions([".php"])
        assert config.get_visibility() == "public,internal"
        assert config.get_extensions() == [".php"]

    def test_attribute_assignment_seen_by_getter(self) -> None:
        config = ParserConfiguration()
        config.default_package_name = "Default"
        assert config.get_default_package_name() == "Default"
