"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskmanager.api import auth, tasks
from taskmanager.api.error_handling import register_exception_handlers
from taskmanager.config import get_settings
from taskmanager.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting Task Manager API ({settings.environment})")
    yield
    logger.info("Shutting down Task Manager API")


app = FastAPI(
    title="Task Manager API",
    description="Personal task management with JWT authentication",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(tasks.router)


@app.get("/")
async def root():
    """Greeting endpoint."""
    return {
        "message": "Welcome to the Task Manager API!",
        "timestamp": datetime.now(UTC).isoformat(),
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
