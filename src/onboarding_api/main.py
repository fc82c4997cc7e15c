"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from onboarding_api import __version__
from onboarding_api.config import get_settings
from onboarding_api.database import Database
from onboarding_api.middleware.error_handler import (
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from onboarding_api.models.dto.user import StatusResponse
from onboarding_api.routers import users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)
    # SQL statements carry personal data
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if "Cache-Control" not in response.headers:
            response.headers["Cache-Control"] = "no-store, max-age=0"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Opens the connection pool once unless one was injected, and closes the
    pool it opened on shutdown.
    """
    owns_database = app.state.database is None
    if owns_database:
        app.state.database = Database.from_settings(get_settings())
        logger.info("Connection pool initialized")
    yield
    if owns_database:
        await app.state.database.dispose()
        app.state.database = None
        logger.info("Connection pool closed")


def _allowed_origins(origins: list[str], environment: str) -> list[str]:
    """Validate configured CORS origins."""
    allowed = []
    for origin in origins:
        # Wildcards are not allowed together with credentials
        if origin == "*":
            raise ValueError(
                "CORS_ORIGINS cannot contain '*' wildcard when allow_credentials=True. "
                "Specify explicit origins."
            )
        if origin.startswith(("http://", "https://")):
            allowed.append(origin)

    if not allowed and environment != "production":
        allowed = ["http://localhost:3000"]
    return allowed


def create_app(database: Database | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        database: Connection pool to use instead of one built from settings
    """
    config = get_settings()

    app = FastAPI(
        title=config.app_name,
        version=__version__,
        description="Employee Onboarding API",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )
    app.state.database = database

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    allowed_origins = _allowed_origins(config.cors_origins_list, config.environment)
    # Error handlers echo CORS headers from the same validated list
    app.state.cors_origins = allowed_origins

    # Middleware runs in reverse order of addition
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(users.router, prefix="/users", tags=["Users"])

    @app.get("/health", response_model=StatusResponse)
    async def health_check() -> dict[str, int | str]:
        """Liveness check endpoint."""
        return {"statusCode": 201, "msg": "GET point working fine"}

    return app
