"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI

from app.api.v1.router import api_router
from app.coach.thresholds import configured_thresholds
from app.core.config import settings
from app.core.logging import configure_logging
from app.regions.registry import RegionRegistry

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Readiness-driven rehab coach: daily mode, plans and dosage per body region.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")

logger.info("Regions available: %s", RegionRegistry.ids())

# Invalid COACH_THRESHOLDS_JSON fails here, before serving requests
configured_thresholds()


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Rehab Coach API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "rehab-coach-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "authors emails": settings.AUTHORS_EMAILS,
        "project url": settings.PROJECT_URL,
        "regions": RegionRegistry.ids(),
    }
