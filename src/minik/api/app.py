"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from minik.api.dependencies import (
    close_board_client,
    close_preference_store,
    init_board_client,
    init_preference_store,
)
from minik.api.models import APIResponse
from minik.api.routes import auth, boards, organizations, state
from minik.auth import get_token
from minik.config import load_settings
from minik.github import (
    AuthenticationError,
    BoardClient,
    BoardNotFoundError,
    GitHubError,
    GraphQLError,
    MutationFailedError,
    ParseError,
    PreconditionFailedError,
    RemoteError,
    TransportError,
)
from minik.logging import get_logger
from minik.state_store import StateStoreError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from minik.config import Settings

logger = get_logger("api")

# Subclasses must precede their bases: the first isinstance match wins.
ERROR_STATUS: dict[type[Exception], int] = {
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    BoardNotFoundError: status.HTTP_404_NOT_FOUND,
    PreconditionFailedError: status.HTTP_412_PRECONDITION_FAILED,
    MutationFailedError: status.HTTP_502_BAD_GATEWAY,
    GraphQLError: status.HTTP_502_BAD_GATEWAY,
    RemoteError: status.HTTP_502_BAD_GATEWAY,
    ParseError: status.HTTP_502_BAD_GATEWAY,
    TransportError: status.HTTP_504_GATEWAY_TIMEOUT,
    GitHubError: status.HTTP_502_BAD_GATEWAY,
    StateStoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def add_exception_handlers(app: FastAPI) -> None:
    """Map core errors to HTTP responses carrying the error text verbatim."""

    async def core_error_handler(_request: Request, exc: Exception) -> JSONResponse:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
        for error_type, error_code in ERROR_STATUS.items():
            if isinstance(exc, error_type):
                code = error_code
                break
        return JSONResponse(
            status_code=code,
            content=APIResponse[None](data=None, error=str(exc)).model_dump(),
        )

    for error_type in ERROR_STATUS:
        app.add_exception_handler(error_type, core_error_handler)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings or load_settings()

    # Startup
    init_preference_store(settings.db_path)
    try:
        token = get_token()
    except AuthenticationError as e:
        # Served routes answer 401 until the server is restarted with a token
        logger.warning("Starting without GitHub access: %s", e)
    else:
        init_board_client(BoardClient.from_settings(settings, token))

    yield
    # Shutdown
    close_board_client()
    close_preference_store()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Minik API",
        description="Kanban view over GitHub Projects v2 boards",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    app.include_router(auth.router, prefix="/api/v1")
    app.include_router(organizations.router, prefix="/api/v1")
    app.include_router(boards.router, prefix="/api/v1")
    app.include_router(state.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
