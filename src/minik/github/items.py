"""Item extraction and column classification for a board node."""

from __future__ import annotations

from collections import Counter
from typing import Any

from minik.github.models import Item
from minik.github.tolerant import Node
from minik.logging import get_logger

logger = get_logger("github.items")

UNTITLED = "Untitled"


def column_of(item_node: Node) -> str:
    """Option ID of the item's first single-select field value.

    Later single-select values are ignored. Empty string when the item has
    none.
    """
    for value in item_node["fieldValues"]["nodes"].as_list():
        option_id = value["optionId"].as_optional_str()
        if option_id is not None:
            return option_id
    return ""


def extract_items(board_node: Node | Any) -> tuple[list[Item], dict[str, int]]:
    """Flatten the board's items.

    Items whose content is null (deleted or inaccessible issue/PR) are
    skipped entirely and not counted anywhere.

    Args:
        board_node: Raw ProjectV2 node

    Returns:
        (items, counts) where counts maps a column ID to the number of
        items classified into it. Unclassified items are not counted.
    """
    node = board_node if isinstance(board_node, Node) else Node(board_node)

    item_nodes = node["items"]["nodes"].as_list()
    logger.debug("Processing %d board items", len(item_nodes))

    items: list[Item] = []
    counts: Counter[str] = Counter()
    for item_node in item_nodes:
        content = item_node["content"]
        if content.is_null:
            logger.debug("Skipping item %s with null content", item_node["id"].as_str())
            continue

        column_id = column_of(item_node)
        if column_id:
            counts[column_id] += 1

        items.append(
            Item(
                id=item_node["id"].as_str(),
                title=content["title"].as_str(UNTITLED),
                url=content["url"].as_optional_str(),
                assignees=content["assignees"]["nodes"].strings("login"),
                labels=content["labels"]["nodes"].strings("name"),
                column_id=column_id,
            )
        )

    return items, dict(counts)
