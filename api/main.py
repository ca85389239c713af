"""
FastAPI application for the Movie Catalog API.

CRUD endpoints for movies, genres, directors, actors, users and reviews.
Schema setup and seeding are also available via the CLI.
"""

import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_config
from api.exceptions import (
    catalog_error_handler,
    generic_exception_handler,
    request_validation_handler,
)
from api.logging_config import logger, generate_request_id, set_request_id
from api.routers import actors, directors, genres, movies, users
from api.schemas.common import ErrorResponse
from movie_catalog.errors import CatalogError

app = FastAPI(
    title="Movie Catalog API",
    description="REST API for managing a movie catalog",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_exception_handler(CatalogError, catalog_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Origins come from ALLOWED_ORIGINS, "*" when unset
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all HTTP requests with timing and response status."""
    request_id = generate_request_id()
    set_request_id(request_id)

    skip_paths = {"/health", "/api/docs", "/api/redoc", "/api/openapi.json"}
    if request.url.path in skip_paths:
        return await call_next(request)

    start_time = time.time()
    client_ip = request.client.host if request.client else "unknown"

    logger.info(f"Request started: {request.method} {request.url.path} from {client_ip}")

    try:
        response = await call_next(request)
    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        logger.error(
            f"Request failed: {request.method} {request.url.path} "
            f"duration={duration_ms:.2f}ms error={str(e)}"
        )
        raise

    duration_ms = (time.time() - start_time) * 1000
    log_msg = (
        f"Request completed: {request.method} {request.url.path} "
        f"status={response.status_code} duration={duration_ms:.2f}ms"
    )
    if response.status_code >= 500:
        logger.error(log_msg)
    elif response.status_code >= 400:
        logger.warning(log_msg)
    else:
        logger.info(log_msg)

    response.headers["X-Request-ID"] = request_id
    return response


# Error bodies shared by every catalog route
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Database or internal error"},
}

app.include_router(movies.router, tags=["Movies"], responses=ERROR_RESPONSES)
app.include_router(genres.router, tags=["Genres"], responses=ERROR_RESPONSES)
app.include_router(directors.router, tags=["Directors"], responses=ERROR_RESPONSES)
app.include_router(actors.router, tags=["Actors"], responses=ERROR_RESPONSES)
app.include_router(users.router, tags=["Users"], responses=ERROR_RESPONSES)


@app.get("/health", include_in_schema=False)
def health():
    """Simple health check endpoint."""
    return {"health": "ok", "status": 200}
