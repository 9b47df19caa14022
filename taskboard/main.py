"""
Main FastAPI application.

This is the entry point for the API server:
    uvicorn taskboard.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from taskboard.core.config import settings
from taskboard.core.logging import configure_logging
from taskboard.errors import register_error_handlers
from taskboard.routers import auth, dashboard, health, projects, tasks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.
    
    Runs once when the server starts and once when it stops.
    """
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting %s...", settings.APP_NAME)
    
    yield
    
    logger.info("Shutting down %s...", settings.APP_NAME)


# Create the FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Multi-user project and task tracker API",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)


# Include routers (API endpoints)
app.include_router(health.router, tags=["Health"])
app.include_router(auth.router)
app.include_router(projects.router)
app.include_router(tasks.router)
app.include_router(dashboard.router)
