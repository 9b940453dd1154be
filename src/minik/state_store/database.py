"""Database connection manager for the preferences store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from minik.state_store.models import Base

if TYPE_CHECKING:
    from sqlalchemy import Engine

MEMORY = ":memory:"


class Database:
    """SQLite connection manager with WAL mode enabled."""

    def __init__(self, db_path: str) -> None:
        """Initialize database connection.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory DB.
        """
        self.db_path = db_path if db_path == MEMORY else str(Path(db_path).expanduser())
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine:
        """Get or create the database engine."""
        if self._engine is None:
            if self.db_path == MEMORY:
                # One shared connection, usable from TestClient worker threads
                self._engine = create_engine(
                    "sqlite:///:memory:",
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                )
            else:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
                self._engine = create_engine(
                    f"sqlite:///{self.db_path}",
                    connect_args={"check_same_thread": False},
                )

            @event.listens_for(self._engine, "connect")
            def set_sqlite_pragma(dbapi_connection: object, _connection_record: object) -> None:
                cursor = dbapi_connection.cursor()  # type: ignore[attr-defined]
                cursor.execute("PRAGMA journal_mode=WAL")
                cursor.close()

        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        return self._session_factory

    def create_tables(self) -> None:
        """Create all tables if they don't exist."""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """Get a new database session."""
        return self.session_factory()

    def is_wal_mode(self) -> bool:
        """Check whether the journal mode is WAL (always false in memory)."""
        with self.engine.connect() as conn:
            mode = conn.execute(text("PRAGMA journal_mode")).scalar()
        return str(mode).lower() == "wal"

    def close(self) -> None:
        """Dispose of the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
