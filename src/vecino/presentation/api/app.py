"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

There is no module-level application instance; uvicorn builds one
through the factory:

    uvicorn vecino.presentation.api.app:create_app --factory
"""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vecino.infrastructure.persistence.mongo import MongoConnection
from vecino.infrastructure.persistence.store import DataStore
from vecino.presentation.api.exception_handlers import setup_exception_handlers
from vecino.presentation.api.routers import (
    auth_router,
    bookings_router,
    providers_router,
    system_router,
)
from vecino.presentation.api.schemas.common import HealthResponse
from vecino_config.settings import Settings, load_settings_or_exit


@lru_cache(maxsize=1)
def _configure_logging(log_level_name: str) -> None:
    """Configure application logging.

    Sets up logging for the vecino packages with:
    - Console output with timestamps and module names
    - Configurable log level for vecino modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("vecino", "vecino_auth", "vecino_config", "vecino_demo"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("motor").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Resident registration, login and profile.

**Security:**
- Passwords are hashed with bcrypt (work factor 10)
- Stateless JWT session tokens, valid for 7 days
- Send `Authorization: Bearer <token>` to protected routes
""",
    },
    {
        "name": "Providers",
        "description": """Service provider listings.

Listing and reading are public. Publishing requires the
`provider` or `admin` role. While the database is unreachable the
listing is served from mock data (`source: "mock"`).
""",
    },
    {
        "name": "Bookings",
        "description": "Book a provider's service and list your bookings.",
    },
    {
        "name": "System",
        "description": "Database status and demo data seeding.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Connects to MongoDB before traffic is accepted. An unreachable
    database does not stop the service: the store falls back to mock
    reads and refuses writes.
    """
    logger.info("Starting Vecino API v%s...", API_VERSION)
    connection: Optional[MongoConnection] = None

    if getattr(app.state, "data_store", None) is None:
        connection = MongoConnection.from_settings(app.state.settings)
        await connection.connect()
        app.state.data_store = DataStore.from_connection(connection)

    logger.info("Serving data from: %s", app.state.data_store.source)
    yield

    logger.info("Shutting down Vecino API...")
    if connection is not None:
        await connection.close()


def create_api_router() -> APIRouter:
    """Create the API router with all endpoints."""
    api_router = APIRouter()

    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(providers_router, prefix="/providers", tags=["Providers"])
    api_router.include_router(bookings_router, prefix="/bookings", tags=["Bookings"])
    api_router.include_router(system_router, tags=["System"])

    return api_router


def create_app(
    settings: Optional[Settings] = None,
    data_store: Optional[DataStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. When omitted, settings
        are loaded from the environment and the process exits if they
        are invalid.
    data_store
        Optional pre-built store for testing. When omitted, the lifespan
        connects to MongoDB and builds one.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = load_settings_or_exit()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Neighborhood services marketplace: residents book trusted "
            "local providers."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.data_store = data_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With", "Accept"],
        max_age=86400,
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers and monitoring."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        store = app.state.data_store
        database_mode = (
            "MongoDB"
            if store is not None and store.is_available
            else "development mode (mock data)"
        )
        return {
            "success": True,
            "app": settings.app_name,
            "version": API_VERSION,
            "database": database_mode,
            "docs": "/docs" if settings.api_debug else None,
            "endpoints": {
                "auth": {
                    "register": f"POST {API_PREFIX}/auth/register",
                    "login": f"POST {API_PREFIX}/auth/login",
                    "profile": f"GET {API_PREFIX}/auth/profile",
                },
                "providers": f"GET {API_PREFIX}/providers",
                "bookings": f"POST {API_PREFIX}/bookings",
                "status": f"GET {API_PREFIX}/status",
                "health": "GET /health",
            },
        }

    return app
