"""Procurement Records API: FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.db.base import engine, init_db
from app.middleware.access_log import RequestLogMiddleware
from app.schemas.common import HealthResponse

from app.routers.auth import router as auth_router
from app.routers.contracts import router as contracts_router
from app.routers.suppliers import router as suppliers_router
from app.routers.vendors import router as vendors_router

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Connecting to %s", engine.url.render_as_string(hide_password=True))
    await init_db()
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
        lifespan=lifespan,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Access log ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- API routes ---
    app.include_router(auth_router, prefix=settings.api_prefix)
    app.include_router(vendors_router, prefix=settings.api_prefix)
    app.include_router(suppliers_router, prefix=settings.api_prefix)
    app.include_router(contracts_router, prefix=settings.api_prefix)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running on http://localhost:%d", settings.app_port)
    uvicorn.run(app, host="0.0.0.0", port=settings.app_port)
