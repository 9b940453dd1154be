"""Unit tests for board data models."""

import pytest

from minik.github import Board, BoardData, Column, Item


@pytest.fixture
def board_data() -> BoardData:
    return BoardData(
        board=Board(id="PVT_1", title="Roadmap", number=7, url="https://example.com/7"),
        columns=[
            Column(id="O1", name="Todo", items_count=2),
            Column(id="O2", name="Doing", items_count=0),
            Column(id="O3", name="Done", items_count=1),
        ],
        items=[
            Item(id="I1", title="One", assignees=["alice"], column_id="O1"),
            Item(id="I2", title="Two", assignees=["bob", "alice"], column_id="O1"),
            Item(id="I3", title="Three", column_id="O3"),
            Item(id="I4", title="Four"),
        ],
        status_field_id="PVTSSF_status",
    )


@pytest.mark.unit
class TestBoardData:
    """Tests for BoardData helpers."""

    def test_hidden_columns_start_empty(self, board_data: BoardData) -> None:
        assert board_data.hidden_columns == []
        assert board_data.visible_columns() == board_data.columns

    def test_with_hidden_columns_returns_copy(self, board_data: BoardData) -> None:
        hidden = ["O2"]

        updated = board_data.with_hidden_columns(hidden)
        hidden.append("O3")

        assert updated.hidden_columns == ["O2"]
        assert board_data.hidden_columns == []
        assert [c.id for c in updated.visible_columns()] == ["O1", "O3"]

    def test_items_in(self, board_data: BoardData) -> None:
        assert [item.id for item in board_data.items_in("O1")] == ["I1", "I2"]
        assert [item.id for item in board_data.items_in("")] == ["I4"]

    def test_items_assigned_to(self, board_data: BoardData) -> None:
        assert [item.id for item in board_data.items_assigned_to("alice")] == ["I1", "I2"]
        assert board_data.items_assigned_to("nobody") == []

    def test_to_dict(self, board_data: BoardData) -> None:
        result = board_data.to_dict()

        assert result["board"]["number"] == 7
        assert result["columns"][0] == {"id": "O1", "name": "Todo", "items_count": 2}
        assert result["items"][3]["column_id"] == ""
        assert result["status_field_id"] == "PVTSSF_status"

    def test_value_equality(self, board_data: BoardData) -> None:
        copy = BoardData(
            board=board_data.board,
            columns=list(board_data.columns),
            items=list(board_data.items),
            status_field_id=board_data.status_field_id,
        )

        assert copy == board_data
