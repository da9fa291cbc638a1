"""
Application factory and runtime registry.

``create_app`` builds the FastAPI instance and registers it; ``get_application``
returns whatever instance is currently registered (None before startup).
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from loguru import logger
from core.config import Settings, settings as app_settings
from core.database.manager import DatabaseManager
from core.exceptions.handler import BusinessException, global_exception_handler
from core.logging.logger import LogConfig
from core.middleware.logging_md import LoggingMiddleware

_application: Optional[FastAPI] = None


def get_application() -> Optional[FastAPI]:
    return _application


def register_application(app: FastAPI) -> FastAPI:
    global _application
    _application = app
    return app


def reset_application() -> None:
    global _application
    _application = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Connect the database manager on startup and release it on shutdown."""
    logger.info(f"Starting {app.title} v{app.version}")

    manager = DatabaseManager.get_instance(app.state.settings)
    try:
        await manager.connect_all()
    except Exception as e:
        logger.error(f"Failed to initialize application: {str(e)}")
        # Release whatever connected before the failure
        await manager.disconnect_all()
        raise
    app.state.db = manager
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application")
    await manager.disconnect_all()
    logger.info("Application shutdown complete")


def create_app(settings: Optional[Settings] = None, configure_logging: bool = True) -> FastAPI:
    settings = settings or app_settings

    # Initialize logging configuration (scripts set up their own)
    if configure_logging:
        LogConfig.setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )
    app.state.settings = settings

    # Register global exception handlers
    app.add_exception_handler(BusinessException, global_exception_handler)
    app.add_exception_handler(RequestValidationError, global_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.add_middleware(LoggingMiddleware)

    # Mount routers (prefix from config for easy override in private projects)
    from apps.system.api.router import router as system_router
    app.include_router(
        system_router,
        prefix=settings.API_HEALTH_PREFIX,
        tags=["System"]
    )

    logger.info(f"Application created | Env: {settings.APP_ENV} | Debug: {settings.DEBUG}")
    return register_application(app)
