"""
Incubator Backend — Health Check and Root Routes
==================================================

What:  GET /health for monitors and load balancers, GET / for humans.
Why:   The health probe must answer even when the database is down, so the
       database state is reported in the body instead of failing the request.
How:   Runs `SELECT 1` through the Database handle on every call.
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from incubator import __version__
from incubator.database import Database, get_database
from incubator.schemas.health import HealthResponse, RootResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: set once when the process imports the routes
_start_time = time.time()

RESOURCE_PATHS = (
    "auth",
    "admin",
    "announcement",
    "blog",
    "event",
    "program",
    "mentor",
    "contact",
    "pre-incubation",
    "incubation",
)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    database: Database = Depends(get_database),
) -> HealthResponse:
    """
    Report process and database status.

    Always answers 200 with status "OK"; `database` is "connected" or
    "disconnected" depending on a SELECT 1 probe.
    """
    settings = request.app.state.settings
    connected = await database.ping()
    if not connected:
        logger.warning("Health check: database unreachable")
    return HealthResponse(
        status="OK",
        message="Incubator backend is running",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )


@router.get("/", response_model=RootResponse, summary="Service index")
async def root(request: Request) -> RootResponse:
    prefix = request.app.state.settings.api_prefix
    return RootResponse(
        message="Welcome to the Incubator backend API",
        version=__version__,
        endpoints={name: f"{prefix}/{name}" for name in RESOURCE_PATHS},
    )
