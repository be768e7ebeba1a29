# src/commentbox/main.py
"""Main entry point for the Commentbox application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from commentbox.api.v1 import auth_router, comments_router, posts_router
from commentbox.core.errors import (
    CannotEditApprovedError,
    CommentboxError,
    CommentDeletedError,
    ConcurrentUpdateError,
    ForbiddenError,
    InvalidParentError,
    NotFoundError,
)
from commentbox.core.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Status codes for domain errors; anything unlisted is a bad request.
ERROR_STATUS_CODES: dict[type[CommentboxError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidParentError: status.HTTP_400_BAD_REQUEST,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    CannotEditApprovedError: status.HTTP_400_BAD_REQUEST,
    CommentDeletedError: status.HTTP_410_GONE,
    ConcurrentUpdateError: status.HTTP_409_CONFLICT,
}

# Initialize FastAPI app
app = FastAPI(
    title="Commentbox API",
    description="Blog posts with moderated, threaded comments",
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

# Include API routers
app.include_router(auth_router, prefix="/api/v1")
app.include_router(posts_router, prefix="/api/v1")
app.include_router(comments_router, prefix="/api/v1")


def error_status_code(exc: CommentboxError) -> int:
    """Return the HTTP status for a domain error."""
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return status.HTTP_400_BAD_REQUEST


@app.exception_handler(CommentboxError)
async def commentbox_error_handler(request: Request, exc: CommentboxError) -> JSONResponse:
    """Translate domain errors into JSON error responses."""
    status_code = error_status_code(exc)
    logger.debug("%s %s -> %d (%s)", request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Blog posts with moderated, threaded comments",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("commentbox.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
