"""Transport - authenticated REST and GraphQL calls against GitHub."""

from __future__ import annotations

import json
from types import TracebackType
from typing import Any

import httpx

from minik.config import DEFAULT_API_URL, DEFAULT_GRAPHQL_URL, DEFAULT_USER_AGENT
from minik.github.exceptions import (
    AuthenticationError,
    GraphQLError,
    ParseError,
    RemoteError,
    TransportError,
)
from minik.logging import get_logger, sanitize_for_log, truncate_output

logger = get_logger("github.transport")


class Transport:
    """One HTTP call per invocation, with failures classified.

    No retries and no backoff: a failed call raises immediately and the
    caller decides whether to try again.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Transport.

        Args:
            token: GitHub bearer token
            api_url: REST API base URL (for testing/enterprise)
            graphql_url: GraphQL endpoint (for testing/enterprise)
            user_agent: Client identifier header value
            timeout: Per-request deadline in seconds

        Raises:
            AuthenticationError: If token is empty
        """
        if not token:
            raise AuthenticationError("A GitHub token is required before calling the API")
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.graphql_url = graphql_url
        self.user_agent = user_agent
        self.timeout = timeout
        self._client: httpx.Client | None = None
        logger.debug("Transport created (token length: %d, timeout=%.1fs)", len(token), timeout)

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "User-Agent": self.user_agent,
                    "Accept": "application/vnd.github+json",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> Transport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def rest_get(self, path: str) -> Any:
        """GET a REST resource.

        Args:
            path: Path below the API base URL, e.g. "/user/orgs"

        Returns:
            Decoded JSON body

        Raises:
            TransportError: If no response was obtained or it could not be read
            RemoteError: If the HTTP status is not a success
            ParseError: If the body is not JSON
        """
        url = f"{self.api_url}/{path.lstrip('/')}"
        logger.debug("GET %s", url)
        try:
            response = self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Request to %s failed: %s", url, e)
            raise TransportError(f"Failed to send request to GitHub API: {e}") from e

        self._check_status(response, f"GET {path}")
        return self._decode(response)

    def graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query or mutation.

        GitHub reports query-level failures with HTTP 200 and an `errors`
        array, so the payload is checked even on success.

        Args:
            query: GraphQL document
            variables: Query variables

        Returns:
            The `data` member of the response ({} when absent)

        Raises:
            TransportError: If no response was obtained or it could not be read
            RemoteError: If the HTTP status is not a success
            GraphQLError: If the payload carries a non-empty errors array
            ParseError: If the body is not a JSON object
        """
        variables = variables or {}
        preview = " ".join(line.strip() for line in query.strip().splitlines()[:2])
        logger.debug("GraphQL request: %s", preview)
        logger.debug("GraphQL variables: %s", sanitize_for_log(json.dumps(variables)))

        try:
            response = self.client.post(
                self.graphql_url, json={"query": query, "variables": variables}
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("GraphQL request failed to send: %s", e)
            raise TransportError(f"Failed to send GraphQL request: {e}") from e

        self._check_status(response, "GraphQL request")
        payload = self._decode(response)
        if not isinstance(payload, dict):
            raise ParseError(f"GraphQL response must be an object, got {type(payload).__name__}")

        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            messages = [_error_message(error) for error in errors]
            logger.error("GraphQL response contains errors: %s", messages)
            raise GraphQLError(messages)

        data = payload.get("data")
        return data if isinstance(data, dict) else {}

    def _check_status(self, response: httpx.Response, what: str) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return
        body = response.text
        logger.error(
            "%s failed with status %s: %s", what, status, sanitize_for_log(truncate_output(body))
        )
        raise RemoteError(f"{what} failed: {status} - {body[:200]}", status=status, body=body)

    def _decode(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Failed to parse GitHub response as JSON: {e}") from e


def _error_message(error: Any) -> str:
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return str(error["message"])
    return json.dumps(error)
