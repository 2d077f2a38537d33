"""
Incubator Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware, route mounting, error envelopes
       and lifecycle management in one place.
How:   create_app(settings, database) builds the Database handle (unless one
       is passed in), the services and the routers, and returns the app.
Who:   uvicorn (`uvicorn incubator.main:app`) and the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                       FastAPI App                        │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌────────────┐ ┌────────┐ ┌─────────┐ ┌──────┐ ┌──────┐ │
    │  │ Rate Limit │→│ Req ID │→│ Logging │→│ GZip │→│ CORS │ │
    │  └────────────┘ └────────┘ └─────────┘ └──────┘ └──────┘ │
    │                                                          │
    │  Routes (/api prefix):                                   │
    │    auth · admin · announcement · blog · event · program  │
    │    mentor · contact · pre-incubation · incubation        │
    │  Routes (no prefix): /health, /                          │
    │                                                          │
    │  Exception Handlers → {success: false, message, ...}     │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → configuration check → optional create_all →
              bootstrap admin
    Shutdown: dispose the Database handle
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from incubator import __version__
from incubator.config import Settings
from incubator.config import settings as default_settings
from incubator.database import Database
from incubator.exceptions import DatabaseError, IncubatorError, ValidationError
from incubator.middleware.logging import RequestLoggingMiddleware
from incubator.middleware.rate_limit import RateLimitMiddleware
from incubator.middleware.request_id import RequestIDMiddleware, request_id_var
from incubator.routes import auth, health
from incubator.routes.admin import build_admin_router
from incubator.routes.events import build_event_router
from incubator.routes.mentors import build_mentor_router
from incubator.routes.resources import build_resource_router
from incubator.services.catalog import build_services
from incubator.validation import format_errors

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout
    (containers capture stdout). Called once from the lifespan handler.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
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
    Startup sequence:
        1. Setup logging
        2. Validate production configuration (logged; the server keeps running
           so /health can still report)
        3. Create tables when DB_AUTO_CREATE is set
        4. Create the bootstrap admin when BOOTSTRAP_ADMIN_* are set

    Shutdown sequence:
        1. Dispose the Database handle (close pooled connections)
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings.log_level)
    logger.info("=" * 60)
    logger.info("Incubator Backend %s starting up (%s)...", __version__, settings.environment)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")

    try:
        if settings.db_auto_create:
            await database.create_all()
            logger.info("Database tables created")
        if settings.bootstrap_admin_email and settings.bootstrap_admin_password:
            await app.state.services.auth.ensure_admin(
                settings.bootstrap_admin_email,
                settings.bootstrap_admin_password,
                settings.bootstrap_admin_name,
            )
    except (IncubatorError, SQLAlchemyError) as e:
        # The database may be down at boot; /health reports it until it is back
        logger.error("Startup database step failed: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Incubator Backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to the error envelope.

    Handler hierarchy:
        RequestValidationError  → 400 {message: "Validation error", errors: [...]}
        IncubatorError family   → exc.status_code (400/401/403/404/500)
        Starlette HTTPException → 404 "Route not found" + path, others as-is
        Exception (fallback)    → 500, `error` detail outside production only

    Internal details (SQL, stack traces) are logged server-side only.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Body, path or query failed schema validation; report every violation."""
        rid = request_id_var.get("")
        errors = format_errors(exc.errors())
        logger.warning("[%s] Validation error on %s: %s", rid, request.url.path, errors)
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Validation error", "errors": errors},
        )

    @app.exception_handler(IncubatorError)
    async def handle_incubator_error(request: Request, exc: IncubatorError):
        rid = request_id_var.get("")
        content = {"success": False, "message": exc.message}
        if isinstance(exc, ValidationError) and exc.errors:
            content["errors"] = exc.errors
        if isinstance(exc, DatabaseError):
            logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        elif exc.status_code >= 500:
            logger.error("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        else:
            logger.warning("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content={"success": False, "message": "Route not found", "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        The stack trace is logged; the response carries the exception text
        only outside production.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        content = {"success": False, "message": "Something went wrong!"}
        if not app.state.settings.is_production:
            content["error"] = str(exc)
        return JSONResponse(status_code=500, content=content)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: defaults to the module-level settings loaded from the environment
        database: an existing handle (tests); built from settings when omitted

    Returns:
        Fully configured FastAPI instance. The Database handle, settings and
        services are kept on `app.state`.
    """
    settings = settings or default_settings
    database = database or Database.from_settings(settings)
    services = build_services(database)

    app = FastAPI(
        title="Incubator API",
        description=(
            "Content and applicant workflow backend for an incubation centre: "
            "announcements, blogs, events, programs, mentors, contact forms, "
            "admin accounts and pre-incubation / incubation applications."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.services = services

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RateLimit → RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    if settings.rate_limit_enabled:
        app.add_middleware(
            RateLimitMiddleware,
            max_requests=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window,
        )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    prefix = settings.api_prefix
    app.include_router(auth.router, prefix=prefix)
    app.include_router(build_admin_router(services.admins), prefix=prefix)
    for service in services.resources().values():
        if service is services.events:
            router = build_event_router(service)
        elif service is services.mentors:
            router = build_mentor_router(service)
        else:
            router = build_resource_router(service)
        app.include_router(router, prefix=prefix)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `incubator.main:app` to be importable
app = create_app()
