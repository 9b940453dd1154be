"""MutationClient - moves board items between columns."""

from __future__ import annotations

from minik.github.exceptions import GraphQLError, MutationFailedError, PreconditionFailedError
from minik.github.tolerant import Node
from minik.github.transport import Transport
from minik.logging import get_logger

logger = get_logger("github.mutation")

UPDATE_ITEM_FIELD_MUTATION = """
mutation($projectId: ID!, $itemId: ID!, $fieldId: ID!, $value: ProjectV2FieldValue!) {
    updateProjectV2ItemFieldValue(
        input: {
            projectId: $projectId
            itemId: $itemId
            fieldId: $fieldId
            value: $value
        }
    ) {
        projectV2Item {
            id
        }
    }
}
"""


class MutationClient:
    """Sets an item's single-select status value.

    A move either is confirmed by GitHub or raises; there is no partial
    success, no retry and no rollback.
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def move_item(
        self,
        board_id: str,
        item_id: str,
        status_field_id: str,
        target_column_id: str,
    ) -> None:
        """Move an item to another column.

        Args:
            board_id: ProjectV2 node ID
            item_id: ProjectV2Item node ID
            status_field_id: ID of the status field (from BoardData)
            target_column_id: Option ID of the destination column

        Raises:
            PreconditionFailedError: If status_field_id is empty (no request is sent)
            MutationFailedError: If GitHub returned errors or no item ID
            TransportError: If no response was obtained
            RemoteError: If the HTTP status is not a success
        """
        if not status_field_id:
            logger.error("Status field ID is empty; refusing to move item %s", item_id)
            raise PreconditionFailedError(
                "Status field ID not found - please refresh the board"
            )

        logger.info(
            "Moving item %s on board %s to column %s (field %s)",
            item_id,
            board_id,
            target_column_id,
            status_field_id,
        )

        try:
            data = self.transport.graphql(
                UPDATE_ITEM_FIELD_MUTATION,
                {
                    "projectId": board_id,
                    "itemId": item_id,
                    "fieldId": status_field_id,
                    "value": {"singleSelectOptionId": target_column_id},
                },
            )
        except GraphQLError as e:
            raise MutationFailedError("; ".join(e.messages)) from e

        updated_id = Node(data).get("updateProjectV2ItemFieldValue", "projectV2Item", "id")
        if updated_id.is_null:
            logger.error("No item ID in mutation response: %s", data)
            raise MutationFailedError("no item ID in response")

        logger.info("Moved item %s to column %s", item_id, target_column_id)
