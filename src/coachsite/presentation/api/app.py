"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers. Run it with
``uvicorn --factory coachsite.presentation.api.app:create_app``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from coachsite import __version__
from coachsite.infrastructure.media import CloudinaryMediaStorage
from coachsite.infrastructure.persistence.sqlalchemy import create_tables
from coachsite.presentation.api.config import get_api_settings
from coachsite.presentation.api.dependencies import get_engine
from coachsite.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from coachsite.presentation.api.routers import (
    auth_router,
    banners_router,
    homepage_router,
    testimonials_router,
    users_router,
)
from coachsite.presentation.api.schemas.common import ErrorResponse, HealthResponse
from coachsite_config.settings import Settings


def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the coachsite application with:
    - Console output with timestamps and module names
    - Configurable log level for coachsite modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("coachsite").setLevel(log_level)
    logging.getLogger("coachsite_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Signup, login and password recovery.

**Signup:** create an account, then submit the emailed code.

**Login:** with a password, or with a code sent by email.

Protected routes expect `Authorization: Bearer <token>`.""",
    },
    {
        "name": "Users",
        "description": "Own profile and administrator user management.",
    },
    {
        "name": "Banners",
        "description": "Hero banners shown on a coach's homepage.",
    },
    {
        "name": "Testimonials",
        "description": "Student reviews shown on a coach's homepage.",
    },
    {
        "name": "Homepage",
        "description": "The assembled homepage for a coach's public site.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Coachsite API v%s...", __version__)
    engine = get_engine()
    await _init_database_schema(engine)

    storage: CloudinaryMediaStorage = app.state.media_storage
    if not storage.enabled:
        logger.warning("Cloudinary credentials missing, image uploads will fail")

    yield

    logger.info("Shutting down Coachsite API...")
    await storage.close()
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    logger.info("Initializing database schema...")
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_api_router() -> APIRouter:
    """Create the API router with all endpoints mounted."""
    api_router = APIRouter(
        responses={
            401: {"model": ErrorResponse, "description": "Not authorized"},
            500: {"model": ErrorResponse, "description": "Internal error"},
        },
    )

    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(users_router, prefix="/users", tags=["Users"])
    api_router.include_router(banners_router, prefix="/banners", tags=["Banners"])
    api_router.include_router(
        testimonials_router,
        prefix="/testimonials",
        tags=["Testimonials"],
    )
    api_router.include_router(homepage_router, prefix="/homepage", tags=["Homepage"])

    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_api_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Backend for **coaching institute websites**: accounts with "
            "email codes, homepage banners and testimonials."
        ),
        version=__version__,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # One media client per application, closed on shutdown
    app.state.media_storage = CloudinaryMediaStorage.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers and monitoring."""
        return HealthResponse(status="healthy", version=__version__)

    return app
