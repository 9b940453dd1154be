"""Shared pytest fixtures and configuration."""

from typing import Any

import pytest
from factories import make_board_node, make_item, status_field


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: talks to the real GitHub API (local only)")


@pytest.fixture
def scenario_board() -> dict[str, Any]:
    """Status field Todo/Done, one item in Todo and one without status."""
    return make_board_node(
        fields=[
            {},  # fields of other kinds match no fragment and come back empty
            status_field([("O1", "Todo"), ("O2", "Done")]),
        ],
        items=[
            make_item("I1", title="First", option_id="O1", assignees=["alice"], labels=["bug"]),
            make_item("I2", title="Second"),
        ],
    )
