"""Tests for per-field merge policies."""

from __future__ import annotations

import pytest

from docparse.config.merge import DEFAULT_POLICIES, MergePolicy, merge, merge_value
from docparse.contracts.mapping import FIELDS
from docparse.model import ParserConfiguration


class TestMergeValue:
    def test_replace(self) -> None:
        assert merge_value(MergePolicy.REPLACE, ["a", "b"], ["c"]) == ["c"]

    def test_append_skips_existing(self) -> None:
        assert merge_value(MergePolicy.APPEND, ["a", "b"], ["b", "c"]) == ["a", "b", "c"]

    def test_deep_merge(self) -> None:
        base = {"a": {"x": 1, "y": 2}, "b": 1}
        override = {"a": {"y": 3}, "c": 4}
        assert merge_value(MergePolicy.DEEP_MERGE, base, override) == {
            "a": {"x": 1, "y": 3},
            "b": 1,
            "c": 4,
        }

    def test_policy_name_accepted(self) -> None:
        assert merge_value("append", ["a"], ["b"]) == ["a", "b"]
        assert merge_value("deep_merge", {"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_non_container_values_are_replaced(self) -> None:
        assert merge_value(MergePolicy.APPEND, "utf-8", "latin-1") == "latin-1"
        assert merge_value(MergePolicy.DEEP_MERGE, "a", "b") == "b"


class TestMerge:
    def test_every_mapped_field_replaces_by_default(self) -> None:
        assert set(DEFAULT_POLICIES) == {d.attribute for d in FIELDS}
        assert set(DEFAULT_POLICIES.values()) == {MergePolicy.REPLACE}

    def test_lists_replaced_wholesale(self) -> None:
        merged = merge(ParserConfiguration(), {"extensions": ["md"]})
        assert merged.get_extensions() == ["md"]

    def test_append_policy_per_field(self) -> None:
        merged = merge(
            ParserConfiguration(),
            {"markers": ["XXX"], "extensions": ["inc"]},
            policies={"markers": MergePolicy.APPEND},
        )
        assert merged.get_markers() == ["TODO", "FIXME", "XXX"]
        assert merged.get_extensions() == ["inc"]

    def test_absent_fields_keep_base_value(self) -> None:
        base = ParserConfiguration(target="cache", encoding="latin-1")
        merged = merge(base, {"visibility": "public"})
        assert merged.get_target() == "cache"
        assert merged.get_encoding() == "latin-1"
        assert merged.get_visibility() == "public"

    def test_base_left_untouched(self) -> None:
        base = ParserConfiguration()
        merged = merge(base, {"markers": ["XXX"]}, policies={"markers": MergePolicy.APPEND})
        assert merged is not base
        assert base.get_markers() == ["TODO", "FIXME"]
        assert merged.get_extensions() is not base.get_extensions()

    def test_rebuild_flag_carried_from_base(self) -> None:
        base = ParserConfiguration()
        base.set_should_rebuild_cache(True)
        assert merge(base, {"encoding": "ascii"}).should_rebuild_cache() is True

    def test_policy_given_by_name(self) -> None:
        merged = merge(ParserConfiguration(), {"markers": ["XXX"]}, policies={"markers": "append"})
        assert merged.get_markers() == ["TODO", "FIXME", "XXX"]

    def test_unknown_policy_name(self) -> None:
        with pytest.raises(ValueError):
            merge(ParserConfiguration(), {"markers": ["XXX"]}, policies={"markers": "prepend"})
