"""Custom exceptions for the GitHub board client."""

from __future__ import annotations


class GitHubError(Exception):
    """Base exception for GitHub board client errors."""


class AuthenticationError(GitHubError):
    """No usable bearer token could be obtained."""


class TransportError(GitHubError):
    """No response was obtained (connection, DNS or timeout failure)."""


class RemoteError(GitHubError):
    """GitHub answered with a non-success HTTP status."""

    def __init__(self, message: str, status: int, body: str = "") -> None:
        self.status = status
        self.body = body
        super().__init__(message)


class GraphQLError(GitHubError):
    """The query executed but GitHub reported application-level errors."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__("GraphQL errors: " + "; ".join(messages))


class ParseError(GitHubError):
    """Response shape did not match what the caller cannot do without."""


class BoardNotFoundError(GitHubError):
    """Board id does not exist or is not visible to the token."""


class PreconditionFailedError(GitHubError):
    """Operation was asked to proceed without a required value."""


class MutationFailedError(GitHubError):
    """Mutation ran but GitHub did not confirm the write."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to update item field: {detail}")
