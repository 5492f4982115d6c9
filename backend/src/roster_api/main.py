"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from roster_api.config import get_settings
from roster_api.exceptions import RosterAPIError
from roster_api.middleware.error_handler import (
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
    roster_api_exception_handler,
    sqlalchemy_exception_handler,
    validation_exception_handler,
)
from roster_api.middleware.request_context import RequestContextMiddleware
from roster_api.middleware.security_headers import SecurityHeadersMiddleware
from roster_api.routers import employees, users
from roster_api.security.rate_limit import limiter
from roster_api.security.tokens import TokenService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    from roster_api.database import create_tables, engine

    if get_settings().auto_create_tables:
        await create_tables()
        logger.info("Database schema verified")
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Settings are validated and the token service is built here, so a missing
    or weak JWT secret stops the process before it serves any request.
    """
    config = get_settings()
    logging.basicConfig(level=config.log_level)

    app = FastAPI(
        title=config.app_name,
        version="0.1.0",
        description="Employee directory API",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    # Read-only after startup; shared by all requests
    app.state.token_service = TokenService.from_settings(config)

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_exception_handler(RosterAPIError, roster_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Middleware runs in reverse order of addition: CORS first on requests
    app.add_middleware(SecurityHeadersMiddleware, enable_hsts=not config.debug)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Requested-With"],
    )

    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(employees.router, prefix="/employees", tags=["Employees"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
