# src/threadline/main.py
"""Main entry point for the Threadline application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from threadline.api.v1 import (
    announcements_router,
    posts_router,
    tags_router,
    users_router,
)
from threadline.core.settings import settings
from threadline.db.session import SessionLocal, create_tables
from threadline.services.errors import ThreadlineError
from threadline.services.tag_service import TagService

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def init_database() -> None:
    """Create tables and seed the tag catalog according to settings."""
    if settings.auto_create_tables:
        create_tables()
        logger.info("Database tables ensured")
    if settings.seed_default_tags:
        db = SessionLocal()
        try:
            TagService(db).seed_defaults()
        finally:
            db.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan events."""
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    init_database()
    yield
    logger.info("Shutting down %s", settings.app_name)


# Initialize FastAPI app
app = FastAPI(
    title="Threadline API",
    description="Community discussion backend: posts, votes, comments and announcements",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(tags_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(posts_router, prefix="/api/v1")
app.include_router(announcements_router, prefix="/api/v1")


@app.exception_handler(ThreadlineError)
async def handle_service_error(request: Request, exc: ThreadlineError) -> JSONResponse:
    """Render service-layer exceptions as JSON error responses."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "Threadline API",
        "version": settings.app_version,
        "description": "Community discussion backend",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("threadline.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
