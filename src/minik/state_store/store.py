"""PreferenceStore - load/save interface for local application state."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from minik.logging import get_logger
from minik.state_store.database import Database
from minik.state_store.exceptions import NoBoardSelectedError, StateStoreError
from minik.state_store.models import APP_STATE_ID, AppState, BoardPreference

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = get_logger("state_store")


class PreferenceStore:
    """Selected board, per-board hidden columns and window state.

    Board data itself is never stored here. Writes are serialized so there
    is one writer at a time.
    """

    def __init__(self, db_path: str = ":memory:") -> None:
        """Initialize the store, creating tables if needed.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()
        self._lock = threading.Lock()
        if not self._db.is_wal_mode():
            logger.debug("Preferences database %s is not in WAL mode", self._db.db_path)

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    # --- Application state ---

    def get_state(self) -> AppState:
        """Current application state (defaults on first use)."""
        session = self._db.get_session()
        try:
            state = session.get(AppState, APP_STATE_ID)
            return state if state is not None else AppState()
        finally:
            session.close()

    def selected_board(self) -> str | None:
        """ID of the selected board, if any."""
        return self.get_state().selected_board_id

    def require_selected_board(self) -> str:
        """ID of the selected board.

        Raises:
            NoBoardSelectedError: If no board was ever selected
        """
        board_id = self.selected_board()
        if not board_id:
            raise NoBoardSelectedError("No board selected. Select one with 'minik select'.")
        return board_id

    def select_board(self, board_id: str) -> list[str]:
        """Select a board.

        Args:
            board_id: ProjectV2 node ID

        Returns:
            Hidden columns saved for that board
        """
        if not board_id:
            raise StateStoreError("board_id cannot be empty")
        with self._lock, self._session() as session:
            state = _app_state(session)
            state.selected_board_id = board_id
            hidden = list(_board(session, board_id).hidden_columns)
            session.commit()
        logger.info("Selected board %s (%d hidden columns)", board_id, len(hidden))
        return hidden

    def toggle_my_items(self) -> bool:
        """Flip the "only my items" filter. Returns the new value."""
        with self._lock, self._session() as session:
            state = _app_state(session)
            state.show_only_my_items = not state.show_only_my_items
            value = state.show_only_my_items
            session.commit()
        return value

    def toggle_expanded(self) -> bool:
        """Flip the expanded window flag. Returns the new value."""
        with self._lock, self._session() as session:
            state = _app_state(session)
            state.is_expanded = not state.is_expanded
            value = state.is_expanded
            session.commit()
        logger.info("Window expanded state changed to: %s", value)
        return value

    def save_window_position(self, x: int, y: int) -> None:
        """Remember where the window was placed."""
        with self._lock, self._session() as session:
            state = _app_state(session)
            state.window_x = x
            state.window_y = y
            session.commit()

    # --- Per-board preferences ---

    def hidden_columns(self, board_id: str) -> list[str]:
        """Column IDs hidden on a board, in the order they were hidden."""
        session = self._db.get_session()
        try:
            pref = session.get(BoardPreference, board_id)
            return list(pref.hidden_columns) if pref is not None else []
        finally:
            session.close()

    def hide_column(self, board_id: str, column_id: str) -> list[str]:
        """Hide a column. Hiding an already hidden column is a no-op.

        Returns:
            Hidden columns for the board after the change
        """
        with self._lock, self._session() as session:
            pref = _board(session, board_id)
            if column_id not in pref.hidden_columns:
                pref.hidden_columns = [*pref.hidden_columns, column_id]
            hidden = list(pref.hidden_columns)
            session.commit()
        logger.info("Hid column %s on board %s", column_id, board_id)
        return hidden

    def show_column(self, board_id: str, column_id: str) -> list[str]:
        """Show a column again.

        Returns:
            Hidden columns for the board after the change
        """
        with self._lock, self._session() as session:
            pref = _board(session, board_id)
            pref.hidden_columns = [c for c in pref.hidden_columns if c != column_id]
            hidden = list(pref.hidden_columns)
            session.commit()
        logger.info("Showed column %s on board %s", column_id, board_id)
        return hidden

    def toggle_column(self, board_id: str, column_id: str) -> bool:
        """Flip a column's visibility.

        Returns:
            True if the column is visible afterwards
        """
        with self._lock, self._session() as session:
            pref = _board(session, board_id)
            if column_id in pref.hidden_columns:
                pref.hidden_columns = [c for c in pref.hidden_columns if c != column_id]
                visible = True
            else:
                pref.hidden_columns = [*pref.hidden_columns, column_id]
                visible = False
            session.commit()
        return visible

    def remember_status_field(self, board_id: str, status_field_id: str) -> None:
        """Record the status field ID seen on the latest fetch of a board."""
        with self._lock, self._session() as session:
            _board(session, board_id).status_field_id = status_field_id
            session.commit()

    def status_field(self, board_id: str) -> str:
        """Status field ID from the latest fetch, or "" if never fetched."""
        session = self._db.get_session()
        try:
            pref = session.get(BoardPreference, board_id)
            return pref.status_field_id if pref is not None else ""
        finally:
            session.close()

    def _session(self) -> Session:
        return self._db.get_session()


def _app_state(session: Session) -> AppState:
    state = session.get(AppState, APP_STATE_ID)
    if state is None:
        state = AppState()
        session.add(state)
    return state


def _board(session: Session, board_id: str) -> BoardPreference:
    pref = session.get(BoardPreference, board_id)
    if pref is None:
        pref = BoardPreference(board_id=board_id)
        session.add(pref)
    return pref
