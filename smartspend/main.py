# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_exception_handlers
from .api.v1 import auth_router, transaction_router, health_router
from .core.config import Settings, get_settings
from .core.logging_config import configure_logging
from .di.container import get_container, reset_container
from .infrastructure.db.mongo_connection import close_database, ensure_indexes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container (settings, Mongo client, repositories) and makes
    sure the collection indexes exist; closes the Mongo client on shutdown.
    """
    container = get_container(app.state.settings)

    try:
        await ensure_indexes(container.get("database"))
    except Exception as e:
        # The API still starts; requests touching the store will fail with 500
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    logger.info("Application startup complete")

    yield

    close_database()
    reset_container()
    logger.info("Application shutdown complete")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # Create FastAPI app
    application = FastAPI(
        title="SmartSpend API",
        version="1.0.0",
        description="Personal finance tracker: auth and per-user transactions",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.state.settings = settings
    register_exception_handlers(application)

    # Register API routers
    prefix = settings.api_prefix
    application.include_router(health_router, prefix=prefix)
    application.include_router(auth_router, prefix=f"{prefix}/auth")
    application.include_router(transaction_router, prefix=f"{prefix}/transactions")

    return application


# Create application instance
app = create_application()
