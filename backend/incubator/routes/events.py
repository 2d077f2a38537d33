"""
Incubator Backend — Event Routes
==================================

The generic event route family plus GET /event/public/upcoming.
"""

from typing import List

from fastapi import APIRouter, Depends

from incubator.routes.dependencies import query_params
from incubator.routes.resources import build_resource_router, envelope
from incubator.schemas.common import Envelope
from incubator.schemas.event import EventPublic, UpcomingQuery
from incubator.services.event_service import EventService


def build_event_router(service: EventService) -> APIRouter:
    router = build_resource_router(service)

    @router.get(
        "/public/upcoming",
        response_model=Envelope[List[EventPublic]],
        response_model_exclude_unset=True,
        summary="Upcoming events, soonest first",
    )
    async def upcoming_events(query: UpcomingQuery = Depends(query_params(UpcomingQuery))) -> Envelope:
        return envelope(await service.upcoming(limit=query.limit))

    return router
