"""Status field discovery for a board node."""

from __future__ import annotations

from typing import Any

from minik.config import DEFAULT_STATUS_FIELD
from minik.github.models import Column
from minik.github.tolerant import Node
from minik.logging import get_logger

logger = get_logger("github.schema")


def extract_columns(
    board_node: Node | Any, status_field_name: str = DEFAULT_STATUS_FIELD
) -> tuple[list[Column], str]:
    """Derive the column list from the board's status field.

    Only the first view is inspected. Within it the first field named
    `status_field_name` (case-sensitive) that carries an `options` list is
    used; fields of other kinds never match even when the name does.

    Args:
        board_node: Raw ProjectV2 node
        status_field_name: Name of the single-select field acting as columns

    Returns:
        (columns, status_field_id). Both empty when the board has no view
        or no matching field; that is a valid board, not an error.
    """
    node = board_node if isinstance(board_node, Node) else Node(board_node)

    views = node["views"]["nodes"].as_list()
    if not views:
        logger.debug("Board has no views; no columns")
        return [], ""

    for field in views[0]["fields"]["nodes"].as_list():
        name = field["name"].as_str()
        logger.debug("Found field: %s", name)
        if name != status_field_name or not field["options"].is_list():
            continue

        field_id = field["id"].as_str()
        logger.info("Found %s field with ID: %s", status_field_name, field_id)

        columns: list[Column] = []
        seen: set[str] = set()
        for option in field["options"].as_list():
            option_id = option["id"].as_str()
            if not option_id:
                logger.debug("Skipping option without ID: %s", option.value)
                continue
            if option_id in seen:
                continue
            seen.add(option_id)
            columns.append(Column(id=option_id, name=option["name"].as_str()))
            logger.debug("  Column '%s' with option ID: %s", columns[-1].name, option_id)
        return columns, field_id

    logger.info("No single-select field named '%s' on this board", status_field_name)
    return [], ""
