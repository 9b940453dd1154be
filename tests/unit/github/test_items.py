"""Unit tests for item extraction."""

import pytest
from factories import make_board_node, make_item

from minik.github import Item, extract_items


@pytest.mark.unit
class TestExtractItems:
    """Tests for extract_items."""

    def test_scenario_board(self, scenario_board: dict) -> None:
        items, counts = extract_items(scenario_board)

        assert [i.column_id for i in items] == ["O1", ""]
        assert counts == {"O1": 1}

    def test_full_item_fields(self) -> None:
        node = make_board_node(
            items=[
                make_item(
                    "I1",
                    title="Fix login",
                    option_id="O1",
                    assignees=["alice", "bob"],
                    labels=["bug", "p1"],
                    url="https://github.com/acme/app/issues/1",
                )
            ]
        )

        items, _ = extract_items(node)

        assert items == [
            Item(
                id="I1",
                title="Fix login",
                url="https://github.com/acme/app/issues/1",
                assignees=["alice", "bob"],
                labels=["bug", "p1"],
                column_id="O1",
            )
        ]

    def test_null_content_is_skipped_and_not_counted(self) -> None:
        node = make_board_node(
            items=[
                make_item("I1", option_id="O1", content=False),
                make_item("I2", option_id="O1"),
            ]
        )

        items, counts = extract_items(node)

        assert [i.id for i in items] == ["I2"]
        assert counts == {"O1": 1}

    def test_missing_title_uses_placeholder(self) -> None:
        items, _ = extract_items(make_board_node(items=[make_item("I1", title=None)]))

        assert items[0].title == "Untitled"
        assert items[0].url is None

    def test_draft_issue_content_is_kept(self) -> None:
        # Draft issues match neither fragment and come back as {}
        node = make_board_node(items=[{"id": "I1", "content": {}, "fieldValues": {"nodes": []}}])

        items, counts = extract_items(node)

        assert items == [Item(id="I1", title="Untitled")]
        assert counts == {}

    def test_missing_nested_lists_default_to_empty(self) -> None:
        node = make_board_node(items=[{"id": "I1", "content": {"title": "Bare"}}])

        items, _ = extract_items(node)

        assert items[0].assignees == []
        assert items[0].labels == []
        assert items[0].column_id == ""

    def test_first_option_value_wins(self) -> None:
        item = make_item("I1", option_id="O1")
        item["fieldValues"]["nodes"].append({"optionId": "P9"})

        items, counts = extract_items(make_board_node(items=[item]))

        assert items[0].column_id == "O1"
        assert counts == {"O1": 1}

    def test_counts_accumulate_per_column(self) -> None:
        node = make_board_node(
            items=[
                make_item("I1", option_id="O1"),
                make_item("I2", option_id="O2"),
                make_item("I3", option_id="O1"),
                make_item("I4"),
            ]
        )

        _, counts = extract_items(node)

        assert counts == {"O1": 2, "O2": 1}

    def test_no_items_node(self) -> None:
        assert extract_items({"id": "PVT_1"}) == ([], {})

    def test_malformed_items_list(self) -> None:
        assert extract_items({"items": {"nodes": "oops"}}) == ([], {})
