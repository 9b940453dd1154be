"""GitHub Projects v2 board client."""

from minik.github.client import BoardClient
from minik.github.exceptions import (
    AuthenticationError,
    BoardNotFoundError,
    GitHubError,
    GraphQLError,
    MutationFailedError,
    ParseError,
    PreconditionFailedError,
    RemoteError,
    TransportError,
)
from minik.github.items import extract_items
from minik.github.models import Board, BoardData, Column, Item, Organization
from minik.github.mutation import MutationClient
from minik.github.schema import extract_columns
from minik.github.tolerant import Node
from minik.github.transport import Transport

__all__ = [
    "AuthenticationError",
    "Board",
    "BoardClient",
    "BoardData",
    "BoardNotFoundError",
    "Column",
    "GitHubError",
    "GraphQLError",
    "Item",
    "MutationClient",
    "MutationFailedError",
    "Node",
    "Organization",
    "ParseError",
    "PreconditionFailedError",
    "RemoteError",
    "Transport",
    "TransportError",
    "extract_columns",
    "extract_items",
]
