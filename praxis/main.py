"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from praxis.api.v1.router import api_router
from praxis.core.config import settings
from praxis.core.logging import configure_logging
from praxis.db.init_db import init_db
from praxis.services.live_session import LiveSessionManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()
    yield


app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION,
              description="Adaptive periodization and auto-regulated training engine.", docs_url="/docs",
              redoc_url="/redoc", openapi_url="/openapi.json", lifespan=lifespan, )

# One in-progress workout for the local athlete
app.state.live_sessions = LiveSessionManager()

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"message": "Praxis API", "version": settings.VERSION, "status": "healthy"}


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "praxis-api", "version": settings.VERSION}


@app.get("/info")
async def info():
    return {"project name": settings.PROJECT_NAME, "version": settings.VERSION, "authors": settings.AUTHORS,
            "project url": settings.PROJECT_URL, }
