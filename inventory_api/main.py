from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

import uvicorn
from sqlalchemy.engine import Engine

from inventory_api.config import Settings, get_settings
from inventory_api.database import create_db_engine, create_session_factory
from inventory_api.errors import register_exception_handlers
from inventory_api.services.product_service import init_db
from inventory_api.api import products, stats, health

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    The schema and seed data are in place before the first request is served.
    """
    settings: Settings = app.state.settings
    engine: Engine = app.state.engine

    # Startup
    logger.info("Starting up application...")
    logger.info("Initializing database schema...")
    try:
        seeded = init_db(engine)
        logger.info("Database ready (%d sample products inserted)", seeded)
    except Exception:
        logger.exception("Database initialization failed")
        if settings.STRICT_STARTUP:
            raise

    yield

    # Shutdown
    logger.info("Shutting down application...")
    engine.dispose()


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment settings)
        engine: Pre-built engine, e.g. a test database (defaults to one built from settings)
    """
    settings = settings or get_settings()
    engine = engine or create_db_engine(settings)

    app = FastAPI(
        title="Inventory API",
        description="""
        CRUD API over a single products table with an aggregate statistics endpoint.

        - **Products**: list, fetch, create, replace and delete products
        - **Stats**: product count, total units, categories and total stock value

        The products table is created and seeded with sample data on startup.
        """,
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, expose_error_details=settings.EXPOSE_ERROR_DETAILS)

    # Include API routers
    app.include_router(products.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    return app


def run() -> None:
    """Start the HTTP server."""
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        create_app(settings),
        host=settings.BIND_HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
