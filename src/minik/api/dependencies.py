"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from minik.github import AuthenticationError, BoardClient
from minik.state_store import PreferenceStore

# Global PreferenceStore instance (initialized on app startup)
_preference_store: PreferenceStore | None = None


def init_preference_store(db_path: str = ":memory:") -> PreferenceStore:
    """Initialize the global PreferenceStore instance."""
    global _preference_store  # noqa: PLW0603
    _preference_store = PreferenceStore(db_path)
    return _preference_store


def close_preference_store() -> None:
    """Close the global PreferenceStore instance."""
    global _preference_store  # noqa: PLW0603
    if _preference_store is not None:
        _preference_store.close()
        _preference_store = None


def get_preference_store() -> Generator[PreferenceStore, None, None]:
    """Dependency that provides the PreferenceStore instance."""
    if _preference_store is None:
        raise RuntimeError("PreferenceStore not initialized. Call init_preference_store() first.")
    yield _preference_store


# Type alias for dependency injection
PreferenceStoreDep = Annotated[PreferenceStore, Depends(get_preference_store)]

# Global BoardClient instance (None until a token was obtained)
_board_client: BoardClient | None = None


def init_board_client(client: BoardClient) -> None:
    """Initialize the global BoardClient instance."""
    global _board_client  # noqa: PLW0603
    _board_client = client


def close_board_client() -> None:
    """Close the global BoardClient instance."""
    global _board_client  # noqa: PLW0603
    if _board_client is not None:
        _board_client.close()
        _board_client = None


def get_board_client() -> Generator[BoardClient, None, None]:
    """Dependency that provides the BoardClient instance.

    Raises:
        AuthenticationError: If the server started without a GitHub token
    """
    if _board_client is None:
        raise AuthenticationError(
            "GitHub authentication required. Please run 'gh auth login' first."
        )
    yield _board_client


# Type alias for dependency injection
BoardClientDep = Annotated[BoardClient, Depends(get_board_client)]
