"""Unit tests for MutationClient."""

from unittest.mock import MagicMock

import pytest

from minik.github import (
    GraphQLError,
    MutationClient,
    MutationFailedError,
    PreconditionFailedError,
    RemoteError,
)


@pytest.fixture
def transport() -> MagicMock:
    """Create a mock Transport."""
    return MagicMock()


@pytest.fixture
def mutations(transport: MagicMock) -> MutationClient:
    return MutationClient(transport)


@pytest.mark.unit
class TestMoveItem:
    """Tests for move_item."""

    def test_sends_single_select_update(
        self, mutations: MutationClient, transport: MagicMock
    ) -> None:
        transport.graphql.return_value = {
            "updateProjectV2ItemFieldValue": {"projectV2Item": {"id": "PVTI_1"}}
        }

        mutations.move_item("PVT_1", "PVTI_1", "PVTSSF_status", "O2")

        transport.graphql.assert_called_once()
        query, variables = transport.graphql.call_args.args
        assert "updateProjectV2ItemFieldValue" in query
        assert variables == {
            "projectId": "PVT_1",
            "itemId": "PVTI_1",
            "fieldId": "PVTSSF_status",
            "value": {"singleSelectOptionId": "O2"},
        }

    def test_empty_field_id_sends_nothing(
        self, mutations: MutationClient, transport: MagicMock
    ) -> None:
        with pytest.raises(PreconditionFailedError):
            mutations.move_item("PVT_1", "PVTI_1", "", "O2")

        transport.graphql.assert_not_called()

    def test_null_item_id_is_failure(
        self, mutations: MutationClient, transport: MagicMock
    ) -> None:
        transport.graphql.return_value = {"updateProjectV2ItemFieldValue": {"projectV2Item": None}}

        with pytest.raises(MutationFailedError) as exc_info:
            mutations.move_item("PVT_1", "PVTI_1", "PVTSSF_status", "O2")

        assert "no item ID" in exc_info.value.detail

    def test_missing_payload_is_failure(
        self, mutations: MutationClient, transport: MagicMock
    ) -> None:
        transport.graphql.return_value = {}

        with pytest.raises(MutationFailedError):
            mutations.move_item("PVT_1", "PVTI_1", "PVTSSF_status", "O2")

    def test_graphql_errors_become_mutation_failure(
        self, mutations: MutationClient, transport: MagicMock
    ) -> None:
        transport.graphql.side_effect = GraphQLError(["The single select option Id does not exist"])

        with pytest.raises(MutationFailedError) as exc_info:
            mutations.move_item("PVT_1", "PVTI_1", "PVTSSF_status", "bogus")

        assert exc_info.value.detail == "The single select option Id does not exist"

    def test_http_errors_propagate_unchanged(
        self, mutations: MutationClient, transport: MagicMock
    ) -> None:
        transport.graphql.side_effect = RemoteError("GraphQL request failed", status=500)

        with pytest.raises(RemoteError):
            mutations.move_item("PVT_1", "PVTI_1", "PVTSSF_status", "O2")
