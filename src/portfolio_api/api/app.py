"""
FastAPI application factory for the portfolio API.

The public symbol is ``app``, the ASGI application object used by
uvicorn and by the test client.

Architecture:
    - Shared services (ProfileStore, SearchEngine) are initialised once in
      the lifespan context manager and stored on ``app.state``.
    - Route modules access them through dependency functions in
      ``dependencies.py`` (which read from ``request.app.state``).
    - Domain exceptions are rendered into the ``{success, message}``
      envelope by the handlers registered here; routes simply raise.
    - No business logic lives here.
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_api import __version__
from portfolio_api.api.schemas import ErrorResponse, FieldError
from portfolio_api.config import get_settings
from portfolio_api.core import (
    DuplicateProfileError,
    PortfolioError,
    ProfileNotFoundError,
    ProfileValidationError,
    SearchError,
    get_logger,
)

logger = get_logger(__name__)

# First match wins; anything else derived from PortfolioError is a 500.
_STATUS_BY_ERROR: tuple[tuple[type[PortfolioError], int], ...] = (
    (ProfileNotFoundError, 404),
    (DuplicateProfileError, 409),
    (SearchError, 400),
    (ProfileValidationError, 400),
)


def status_for_error(exc: PortfolioError) -> int:
    """Map a domain exception to its HTTP status code."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


# ---------------------------------------------------------------------------
# Lifespan: initialise shared services, store on app.state
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Initialise and clean up application-level services.

    Startup order:
        1. ProfileStore (SQLite, creates the table if needed)
        2. SearchEngine (stateless, reads page-size defaults)
    """
    from portfolio_api.database import ProfileStore
    from portfolio_api.search import SearchEngine

    logger.info("Portfolio API starting up (v%s)", __version__)

    settings = get_settings()
    store = ProfileStore()
    search_engine = SearchEngine()

    app.state.store = store
    app.state.search_engine = search_engine
    app.state.settings = settings

    active = store.get_active_record()
    if active is None:
        logger.warning(
            "No active profile in %s; profile routes will return 404 until one is "
            "loaded with 'portfolio manage seed' or 'portfolio manage load'.",
            store.db_path,
        )
    else:
        logger.info("Serving profile #%d (%s)", active.id, active.email)

    yield
    logger.info("Portfolio API shutting down.")


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------


async def _portfolio_error_handler(request: Request, exc: PortfolioError) -> JSONResponse:
    status_code = status_for_error(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    body = ErrorResponse(message=exc.message, details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        FieldError(
            field=".".join(str(part) for part in err.get("loc", ())[1:]) or "request",
            message=err.get("msg", "Invalid value"),
        )
        for err in exc.errors()
    ]
    body = ErrorResponse(message="Validation failed", errors=errors)
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


async def _http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Route {request.url.path} not found"
    else:
        message = str(exc.detail)
    body = ErrorResponse(message=message)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fully configured ASGI application with CORS middleware,
    request logging, envelope-rendering exception handlers, lifespan
    management and the profile and health routers.
    """
    settings = get_settings()

    application = FastAPI(
        title="Portfolio API",
        description=(
            "Read-only REST API serving a single portfolio profile: bio, "
            "skills, projects, work history and education, with search and "
            "skill filters."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -- CORS ---------------------------------------------------------------
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # -- Request logging ----------------------------------------------------
    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    # -- Error envelope -----------------------------------------------------
    application.add_exception_handler(PortfolioError, _portfolio_error_handler)
    application.add_exception_handler(RequestValidationError, _validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, _http_error_handler)

    # -- Routers ------------------------------------------------------------
    from portfolio_api.api.routes.health import router as health_router
    from portfolio_api.api.routes.profile import router as profile_router

    application.include_router(health_router, prefix="/api/health", tags=["meta"])
    application.include_router(profile_router, prefix="/api/profile", tags=["profile"])

    return application


app = create_app()
