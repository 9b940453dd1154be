"""Unit tests for the tolerant JSON navigator."""

import pytest

from minik.github import Node


@pytest.mark.unit
class TestNavigation:
    """Tests for key/index access."""

    def test_missing_key_is_null(self) -> None:
        assert Node({"a": 1})["b"].is_null

    def test_key_on_non_mapping_is_null(self) -> None:
        assert Node("text")["a"].is_null
        assert Node(None)["a"]["b"]["c"].is_null

    def test_index_access(self) -> None:
        node = Node([{"id": "x"}, {"id": "y"}])

        assert node[1]["id"].as_str() == "y"
        assert node[5].is_null

    def test_get_follows_path(self) -> None:
        node = Node({"data": {"node": {"items": {"nodes": [{"id": "I1"}]}}}})

        assert node.get("data", "node", "items", "nodes", 0, "id").as_str() == "I1"
        assert node.get("data", "missing", "nodes").as_list() == []


@pytest.mark.unit
class TestTypedDefaults:
    """Tests for typed accessors."""

    def test_as_str_defaults(self) -> None:
        assert Node(None).as_str() == ""
        assert Node(42).as_str("fallback") == "fallback"
        assert Node("ok").as_str("fallback") == "ok"

    def test_as_optional_str(self) -> None:
        assert Node(None).as_optional_str() is None
        assert Node(["x"]).as_optional_str() is None
        assert Node("https://x").as_optional_str() == "https://x"

    def test_as_int_rejects_bool_and_strings(self) -> None:
        assert Node(7).as_int() == 7
        assert Node(True).as_int() == 0
        assert Node("7").as_int(-1) == -1

    def test_as_list_of_non_list_is_empty(self) -> None:
        assert Node({"nodes": 1}).as_list() == []
        assert [n.value for n in Node([1, 2]).as_list()] == [1, 2]

    def test_strings_collects_leaves_and_drops_bad_entries(self) -> None:
        node = Node([{"login": "alice"}, {"login": None}, "junk", {"name": "x"}, {"login": "bob"}])

        assert node.strings("login") == ["alice", "bob"]
