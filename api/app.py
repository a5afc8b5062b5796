"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import (
    books_router,
    common_router,
    my_books_router,
    user_router,
)
from api.services.app_initializer import AppServiceInitializer
from core import get_logger, setup_logging, setup_production_logging
from core.config import Settings, load_settings

logger = get_logger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure logging for the environment the app runs in."""
    if settings.is_production:
        setup_production_logging(level=settings.log_level)
    else:
        setup_logging(
            level=settings.log_level,
            enable_file_logging=settings.is_development,
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = load_settings()
    configure_logging(settings)
    logger.info(f"Starting Bookshelf API server in {settings.environment} mode")

    initializer = AppServiceInitializer(settings)
    await initializer.initialize_all_services(app)

    logger.info("Bookshelf API server initialized successfully")

    yield

    await initializer.shutdown()
    logger.info("Bookshelf API server shutting down")


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Create FastAPI app with current settings."""
    settings = load_settings()

    app = FastAPI(
        title=settings.api_title,
        description="Backend API for tracking personal reading lists",
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Exception, global_exception_handler)
    app.include_router(common_router)
    app.include_router(user_router)
    app.include_router(books_router)
    app.include_router(my_books_router)
    return app


app = create_app()
