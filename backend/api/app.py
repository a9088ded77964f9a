"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.logging_config import configure_logging
from modules.auth.routes import router as users_router
from modules.progress.routes import router as progress_router

from .dependencies import ServiceContainer
from .errors import register_exception_handlers
from .routes import health

if TYPE_CHECKING:
    from modules.storage.interfaces import ISyncStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings: Settings = app.state.container.settings
    configure_logging(settings.log_level)
    logger.info(
        "Starting %s %s on %s:%s (store: %s)",
        settings.app_name, settings.app_version, settings.host, settings.port, settings.store_backend,
    )
    yield
    # Shutdown
    await app.state.container.close()
    logger.info("Shutting down %s", settings.app_name)


def create_app(
    settings: Optional[Settings] = None,
    store: "Optional[ISyncStore]" = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment ones
        store: Store to use instead of the one selected in settings

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Reading progress synchronization server for KOReader-compatible clients",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )
    app.state.container = ServiceContainer(settings, store)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET", "POST", "PUT"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # Register routes
    prefix = settings.api_prefix.rstrip("/")
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(users_router, prefix=f"{prefix}/users", tags=["users"])
    app.include_router(progress_router, prefix=f"{prefix}/syncs", tags=["progress"])

    return app


# Application instance for uvicorn
app = create_app()
