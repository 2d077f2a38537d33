"""Incubator Backend — Health and root endpoint schemas."""

from datetime import datetime
from typing import Dict

from pydantic import Field

from incubator.schemas.common import ApiModel


class HealthResponse(ApiModel):
    """
    What:  Liveness report for load balancers and monitors.
    Why:   A backend that cannot reach its database is effectively down, so
           the database probe is reported alongside process status.
    """
    status: str = Field(description="OK while the process is serving requests")
    message: str
    timestamp: datetime
    environment: str
    version: str
    database: str = Field(description="connected | disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


class RootResponse(ApiModel):
    message: str
    version: str
    endpoints: Dict[str, str]
