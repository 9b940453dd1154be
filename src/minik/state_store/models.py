"""SQLAlchemy models for the preferences store."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - used at runtime for SQLAlchemy
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

APP_STATE_ID = 1

DEFAULT_WINDOW_X = 100
DEFAULT_WINDOW_Y = 50


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class AppState(Base):
    """Application-wide state. There is exactly one row."""

    __tablename__ = "app_state"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    selected_board_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    show_only_my_items: Mapped[bool] = mapped_column(Boolean, nullable=False)
    is_expanded: Mapped[bool] = mapped_column(Boolean, nullable=False)
    window_x: Mapped[int] = mapped_column(Integer, nullable=False)
    window_y: Mapped[int] = mapped_column(Integer, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("id", APP_STATE_ID)
        kwargs.setdefault("show_only_my_items", False)
        kwargs.setdefault("is_expanded", False)
        kwargs.setdefault("window_x", DEFAULT_WINDOW_X)
        kwargs.setdefault("window_y", DEFAULT_WINDOW_Y)
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<AppState(selected_board_id={self.selected_board_id!r})>"


class BoardPreference(Base):
    """Per-board preferences: hidden columns and the last seen status field."""

    __tablename__ = "board_preferences"

    board_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    hidden_columns: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    status_field_id: Mapped[str] = mapped_column(String(255), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __init__(
        self,
        board_id: str,
        hidden_columns: list[str] | None = None,
        status_field_id: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.board_id = board_id
        self.hidden_columns = list(hidden_columns or [])
        self.status_field_id = status_field_id

    def __repr__(self) -> str:
        return f"<BoardPreference(board_id={self.board_id!r}, hidden={self.hidden_columns!r})>"
