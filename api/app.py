"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import AuthenticationError, RidehailError
from .dependencies import get_container
from .routes import auth, health, session, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Starts the session synchronizer on startup and stops it on shutdown.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    synchronizer = None
    if settings.session_sync_active:
        synchronizer = get_container().synchronizer
        await synchronizer.start()
    else:
        logger.warning("Session synchronization disabled (feature flag off or Supabase not configured)")

    yield

    # Shutdown
    if synchronizer is not None:
        synchronizer.stop()
    logger.info(f"Shutting down {settings.app_name}")


async def ridehail_error_handler(request: Request, exc: RidehailError) -> JSONResponse:
    """Render application errors with their code and details."""
    status_code = 401 if isinstance(exc, AuthenticationError) else 400
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Authentication and role-based dashboards for the ride-hailing app",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(RidehailError, ridehail_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(session.router, prefix="/api", tags=["session"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
