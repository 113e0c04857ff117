"""Exception handlers mapping service errors to JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from taskmanager.errors import ServiceError, UnauthorizedError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers so every failure reaches the client with a stable code."""

    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError):
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.status_code} "
            f"{exc.error_code}: {exc.message}"
        )
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "code": exc.error_code},
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error", "code": "server_error"},
        )
