# src/whycookin/main.py
"""Main entry point for the WhyCookIn application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from whycookin import __version__
from whycookin.api.v1 import (
    auth_router,
    comments_router,
    discount_events_router,
    posts_router,
    profile_router,
    restaurants_router,
    stores_router,
    subcategories_router,
    users_router,
    votes_router,
)
from whycookin.core.exception_handlers import register_exception_handlers
from whycookin.core.settings import settings
from whycookin.services.geocoding import get_geocoder

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Restaurants, discounts and community forum API",
    version=settings.app_version,
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

register_exception_handlers(app)

# Include API routers
for router in (
    auth_router,
    restaurants_router,
    stores_router,
    discount_events_router,
    subcategories_router,
    posts_router,
    votes_router,
    comments_router,
    users_router,
    profile_router,
):
    app.include_router(router, prefix=settings.api_prefix)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await get_geocoder().close()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "description": "Restaurants, discounts and community forum API",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting %s on port 8000", settings.app_name)
    uvicorn.run("whycookin.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
