"""
Incubator Backend — Mentor Routes
===================================

The generic mentor route family plus PUT /mentor/{id}/status.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from incubator.routes.dependencies import require_admin
from incubator.routes.resources import build_resource_router, envelope
from incubator.schemas.common import Envelope, StatusUpdate
from incubator.schemas.mentor import MentorRead
from incubator.schemas.user import UserRead
from incubator.services.resource_service import ResourceService


def build_mentor_router(service: ResourceService) -> APIRouter:
    router = build_resource_router(service)

    @router.put(
        "/{item_id}/status",
        response_model=Envelope[MentorRead],
        response_model_exclude_unset=True,
        summary="Activate or deactivate a mentor",
    )
    async def set_mentor_status(
        item_id: UUID,
        payload: StatusUpdate,
        user: UserRead = Depends(require_admin),
    ) -> Envelope:
        mentor = await service.set_active(item_id, payload.is_active, user)
        state = "activated" if payload.is_active else "deactivated"
        return envelope(mentor, f"Mentor {state} successfully")

    return router
