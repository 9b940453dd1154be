"""Tolerant navigation over decoded GraphQL JSON.

GitHub returns deeply nested, optional and type-tagged nodes. Extraction
must not fail on a single missing leaf, so every accessor here returns a
typed default instead of raising.

Example:
    >>> node = Node({"content": {"title": "Fix", "labels": {"nodes": []}}})
    >>> node["content"]["title"].as_str()
    'Fix'
    >>> node["content"]["assignees"]["nodes"].as_list()
    []
"""

from __future__ import annotations

from typing import Any


class Node:
    """Read-only view over an untyped JSON value."""

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Node({self._value!r})"

    def __getitem__(self, key: str | int) -> Node:
        value = self._value
        if isinstance(key, str):
            if isinstance(value, dict):
                return Node(value.get(key))
            return Node(None)
        if isinstance(value, list) and -len(value) <= key < len(value):
            return Node(value[key])
        return Node(None)

    def get(self, *path: str | int) -> Node:
        """Follow a path of keys/indexes, yielding a null node on any miss."""
        node = self
        for key in path:
            node = node[key]
        return node

    @property
    def value(self) -> Any:
        return self._value

    @property
    def is_null(self) -> bool:
        return self._value is None

    def is_list(self) -> bool:
        return isinstance(self._value, list)

    def as_str(self, default: str = "") -> str:
        if isinstance(self._value, str):
            return self._value
        return default

    def as_optional_str(self) -> str | None:
        if isinstance(self._value, str):
            return self._value
        return None

    def as_int(self, default: int = 0) -> int:
        # bool is an int subclass but never a valid count/number here
        if isinstance(self._value, int) and not isinstance(self._value, bool):
            return self._value
        return default

    def as_list(self) -> list[Node]:
        if isinstance(self._value, list):
            return [Node(v) for v in self._value]
        return []

    def strings(self, key: str) -> list[str]:
        """Collect the string leaf `key` from each element of a list node.

        Elements without a string at `key` are dropped.
        """
        result = []
        for element in self.as_list():
            leaf = element[key].as_optional_str()
            if leaf is not None:
                result.append(leaf)
        return result
