"""
Library API — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own catalog and activity logger wired in.
Who:   Called by uvicorn to start the server (uvicorn library_api.main:app),
       by run() / `library-api`, and by the test suite.
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ GET/POST/DELETE books    │ │ GET /health     │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  app.state (injected via library_api.dependencies): │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ book_service: BookService │ activity_logger  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:   configure logging, log the banner
    Shutdown:  log shutdown (the in-memory catalog is simply discarded)
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from library_api import __version__
from library_api.config import Settings, settings as default_settings
from library_api.exceptions import LibraryError, NotFoundError
from library_api.middleware.logging import RequestLoggingMiddleware
from library_api.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from library_api.routes import books, health
from library_api.services.activity_logger import build_activity_logger
from library_api.services.book_service import InMemoryBookService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    All output goes to stdout. LoggingActivityLogger writes through this
    configuration, so its lines carry the same timestamp format.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report what was wired in.
    Shutdown: log it. The catalog has no teardown.
    """
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    app.state.started_at = time.time()
    logger.info("=" * 60)
    logger.info("%s starting up...", app_settings.app_name)
    logger.info(
        "Catalog: %s with %d books",
        type(app.state.book_service).__name__,
        len(app.state.book_service.list_books()),
    )
    logger.info("Activity logger: %s", type(app.state.activity_logger).__name__)
    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", app_settings.backend_host, app_settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("%s shutting down...", app_settings.app_name)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        NotFoundError           → 404 Not Found, empty body
        LibraryError (base)     → 500 Internal Server Error (catch-all for custom)
        Exception (fallback)    → 500 Internal Server Error (unexpected errors)

    Request validation (malformed JSON body, non-integer id) keeps FastAPI's
    default 422 handler.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """Requested book doesn't exist: bare 404."""
        logger.debug("[%s] %s", request_id_var.get(""), exc.message)
        return Response(status_code=404)

    @app.exception_handler(LibraryError)
    async def handle_library_error(request: Request, exc: LibraryError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
            headers={REQUEST_ID_HEADER: rid},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        Returns a generic 500 with the request ID; the stack trace is logged
        server-side only.
        """
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
            # ServerErrorMiddleware runs outside RequestIDMiddleware
            headers={REQUEST_ID_HEADER: rid},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Each call builds a fresh catalog and activity logger and stores them on
    `app.state`, where library_api.dependencies picks them up. Tests rely on
    this to get an isolated catalog per app.

    Args:
        app_settings: Settings to build from. Defaults to the module-level
                      `library_api.config.settings` singleton.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title=app_settings.app_name,
        description=(
            "In-memory book catalog: list, get, add and delete books. "
            "The catalog and activity logger are injected into every route."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Wire Services ─────────────────────────────────────────────────────
    app.state.settings = app_settings
    app.state.started_at = time.time()
    app.state.book_service = (
        InMemoryBookService() if app_settings.seed_catalog else InMemoryBookService(books=[])
    )
    app.state.activity_logger = build_activity_logger(app_settings.activity_logger)

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # added CORS → Logging → RequestID, runs RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "Location"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(books.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Serve the module-level app with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "library_api.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `library_api.main:app` to be importable
app = create_app()
