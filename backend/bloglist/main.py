"""
Bloglist Backend - FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn bloglist.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │  Request ID  │→│   Logging    │→│    CORS     │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ /api/blogs[/stats|/{id}] │ │ GET /health     │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation/MalformedId→400 │ NotFound→404    │   │
    │  │ StoreUnavailable→503       │ other→500       │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate settings, log startup
    Shutdown: dispose database engine, log shutdown
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bloglist import __version__
from bloglist.config import settings
from bloglist.database import dispose_engine
from bloglist.exceptions import (
    BloglistError,
    MalformedIdError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from bloglist.middleware.logging import RequestLoggingMiddleware
from bloglist.middleware.request_id import RequestIDMiddleware, request_id_var
from bloglist.routes import blogs, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    What:    Root logger to stdout with one consistent format.
    When:    Called once during app startup, before any other initialization.

    Format: 2026-01-15T12:00:00 [INFO] bloglist.access: GET /api/blogs 200 ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that log every operation at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:  logging, settings validation, banner.
    Shutdown: dispose the engine so pooled connections are closed.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Bloglist Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Still start: a local database with the default URL is the dev setup
        logger.warning("Configuration warning: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Bloglist Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    # The Exception fallback runs in ServerErrorMiddleware, outside
    # RequestIDMiddleware, where the ContextVar value is not visible
    return getattr(request.state, "request_id", "") or request_id_var.get("")


def _error_response(
    request: Request, status_code: int, error: str, message: str, details=None
) -> JSONResponse:
    content = {
        "error": error,
        "message": message,
        "request_id": _request_id(request),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler map:
        ValidationError         → 400 validation_error
        MalformedIdError        → 400 malformed_id ("malformatted id")
        NotFoundError           → 404 not_found
        StoreUnavailableError   → 503 store_unavailable
        BloglistError (base)    → 500 server_error
        StarletteHTTPException  → its own status (404 unknown_endpoint)
        Exception (fallback)    → 500 internal_server_error

    Responses never include stack traces or SQL; those are logged server-side.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", _request_id(request), exc.message)
        return _error_response(request, 400, "validation_error", exc.message, exc.context)

    @app.exception_handler(MalformedIdError)
    async def handle_malformed_id(request: Request, exc: MalformedIdError):
        logger.warning("[%s] Malformed id: %r", _request_id(request), exc.raw_id)
        return _error_response(request, 400, "malformed_id", exc.message, exc.context)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(request, 404, "not_found", exc.message)

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(request: Request, exc: StoreUnavailableError):
        logger.error(
            "[%s] Store unavailable: %s | Context: %s",
            _request_id(request), exc.message, exc.context,
        )
        return _error_response(request, 503, "store_unavailable", exc.message)

    @app.exception_handler(BloglistError)
    async def handle_bloglist_error(request: Request, exc: BloglistError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            _request_id(request), exc.message, exc.context,
        )
        return _error_response(request, 500, "server_error", exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error_response(request, 404, "unknown_endpoint", "unknown endpoint")
        return _error_response(request, exc.status_code, "http_error", str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            _request_id(request),
            str(exc),
            exc_info=True,
        )
        return _error_response(
            request,
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Bloglist API",
        description="Store blogs (title, author, url, likes) and report on them.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in reverse order of addition: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(blogs.router)
    app.include_router(health.router)

    return app


# uvicorn expects `bloglist.main:app` to be importable
app = create_app()
