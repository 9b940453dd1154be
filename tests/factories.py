"""Builders for raw GitHub GraphQL nodes used across tests."""

from typing import Any


def make_item(
    item_id: str,
    title: str | None = "Item",
    option_id: str | None = None,
    assignees: list[str] | None = None,
    labels: list[str] | None = None,
    url: str | None = None,
    content: bool = True,
) -> dict[str, Any]:
    """Build a raw ProjectV2Item node as GitHub returns it."""
    node: dict[str, Any] = {"id": item_id}
    if content:
        body: dict[str, Any] = {
            "assignees": {"nodes": [{"login": a} for a in assignees or []]},
            "labels": {"nodes": [{"name": label} for label in labels or []]},
        }
        if title is not None:
            body["title"] = title
        if url is not None:
            body["url"] = url
        node["content"] = body
    else:
        node["content"] = None
    values: list[dict[str, Any]] = [{}]  # non single-select values come back empty
    if option_id is not None:
        values.append({"field": {"id": "PVTSSF_status"}, "optionId": option_id})
    node["fieldValues"] = {"nodes": values}
    return node


def make_board_node(
    fields: list[dict[str, Any]] | None = None,
    items: list[dict[str, Any]] | None = None,
    views: bool = True,
) -> dict[str, Any]:
    """Build a raw ProjectV2 node."""
    node: dict[str, Any] = {
        "id": "PVT_1",
        "title": "Roadmap",
        "number": 7,
        "url": "https://github.com/orgs/acme/projects/7",
        "items": {"nodes": items or []},
    }
    node["views"] = {"nodes": [{"fields": {"nodes": fields or []}}] if views else []}
    return node


def status_field(
    options: list[tuple[str, str]], name: str = "Status", field_id: str = "PVTSSF_status"
) -> dict[str, Any]:
    """Build a single-select field node."""
    return {
        "id": field_id,
        "name": name,
        "options": [{"id": oid, "name": oname} for oid, oname in options],
    }
