"""FastAPI server for the habits API."""

import logging
from typing import Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lembrancas import __version__
from lembrancas.api.middleware.cors import StaticCORSMiddleware
from lembrancas.api.routes import habits
from lembrancas.habits.store import (
    CompletionExistsError,
    CompletionNotFoundError,
    HabitNotFoundError,
    HabitStore,
)


logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": "<message>"}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Invalid request"
        logger.debug(f"Rejected {request.method} {request.url.path}: {errors}")
        return _error(400, message)

    @app.exception_handler(HabitNotFoundError)
    async def habit_not_found(request: Request, exc: HabitNotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(CompletionNotFoundError)
    async def completion_not_found(request: Request, exc: CompletionNotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(CompletionExistsError)
    async def completion_exists(request: Request, exc: CompletionExistsError):
        return _error(409, str(exc))


def create_app(
    store: Optional[HabitStore] = None,
    config: Optional[Mapping[str, str]] = None
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        store: Optional HabitStore instance. If None, creates an empty one.
        config: Environment-style lookup for CORS_ORIGIN. If None, the
                process environment is read.

    Returns:
        FastAPI application instance
    """
    if store is None:
        store = HabitStore()

    app = FastAPI(
        title="Lembrancas API",
        description="Habit tracking API",
        version=__version__
    )

    app.add_middleware(StaticCORSMiddleware, config=config)

    register_error_handlers(app)
    habits.register_routes(app, store)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "lembrancas-api"}

    return app
