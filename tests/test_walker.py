"""Tests for formvalidator.walker: lockstep traversal of data and field tree."""

from typing import Any

import pytest

from formvalidator.tree import FieldRules, compile_tree
from formvalidator.walker import join_path, walk


def _visited(rule_tree: dict[str, Any], data: Any) -> list[tuple[str, Any]]:
    seen: list[tuple[str, Any]] = []

    def visit(path: str, field: FieldRules, value: Any) -> None:
        seen.append((path, value))

    walk(compile_tree(rule_tree), data, visit)
    return seen


class TestJoinPath:
    def test_top_level(self) -> None:
        assert join_path(None, "name") == "name"

    def test_nested(self) -> None:
        assert join_path("address", "city") == "address.city"

    def test_non_string_key(self) -> None:
        assert join_path("items", 0) == "items.0"


class TestWalk:
    def test_flat(self) -> None:
        seen = _visited({"name": {"required": True}}, {"name": "alice"})
        assert seen == [("name", "alice")]

    def test_follows_data_order(self) -> None:
        seen = _visited(
            {"b": {"required": True}, "a": {"required": True}},
            {"a": 1, "b": 2},
        )
        assert seen == [("a", 1), ("b", 2)]

    def test_keys_without_rules_skipped(self) -> None:
        seen = _visited({"name": {"required": True}}, {"name": "alice", "age": 30})
        assert seen == [("name", "alice")]

    def test_rules_without_data_not_visited(self) -> None:
        seen = _visited({"name": {"required": True}, "email": {"email": True}}, {"name": "alice"})
        assert seen == [("name", "alice")]

    def test_nested_path(self) -> None:
        seen = _visited({"address": {"city": {"required": True}}}, {"address": {"city": ""}})
        assert seen == [("address.city", "")]

    def test_deep_nesting_uses_full_path(self) -> None:
        seen = _visited(
            {"user": {"address": {"city": {"required": True}}}},
            {"user": {"address": {"city": "Lyon"}}},
        )
        assert seen == [("user.address.city", "Lyon")]

    def test_sequences_are_leaves(self) -> None:
        seen = _visited({"tags": {"maxlength": 2}}, {"tags": ["a", "b", "c"]})
        assert seen == [("tags", ["a", "b", "c"])]

    def test_mapping_value_against_leaf_rules_is_a_leaf(self) -> None:
        seen = _visited({"meta": {"required": True}}, {"meta": {"k": "v"}})
        assert seen == [("meta", {"k": "v"})]

    @pytest.mark.parametrize("value", [None, "Lyon", 42, ["Lyon"]])
    def test_group_over_non_mapping_skipped(self, value: Any) -> None:
        seen = _visited({"address": {"city": {"required": True}}}, {"address": value})
        assert seen == []

    @pytest.mark.parametrize("data", [None, "text", 42])
    def test_non_mapping_data(self, data: Any) -> None:
        assert _visited({"name": {"required": True}}, data) == []

    def test_does_not_mutate_data(self) -> None:
        data = {"address": {"city": ""}, "name": "alice"}
        snapshot = {"address": {"city": ""}, "name": "alice"}

        _visited({"address": {"city": {"required": True}}, "name": {"required": True}}, data)

        assert data == snapshot
