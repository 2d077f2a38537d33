"""
Incubator Backend — Admin Account Routes
==========================================

Route Inventory (prefix /admin):
    POST /add-admin              create an admin account           admin
    PUT  /change-password        change the caller's password      any signed-in user
    GET  /admins                 list admin accounts               admin
    GET  /admin/{id}             one admin account                 admin
    PUT  /admin/{id}/status      activate / deactivate             admin
    GET  /stats, /stats/overview account statistics               admin
"""

import logging
from typing import Any, Dict
from uuid import UUID

from fastapi import APIRouter, Depends, status

from incubator.routes.dependencies import get_current_user, query_params, require_admin
from incubator.routes.resources import envelope
from incubator.schemas.common import Envelope, Page, StatusUpdate
from incubator.schemas.user import AdminCreate, AdminCreated, AdminQuery, PasswordChange, UserRead
from incubator.services.admin_service import AdminService

logger = logging.getLogger(__name__)


def build_admin_router(service: AdminService) -> APIRouter:
    router = APIRouter(prefix="/admin", tags=["Admin"])

    @router.post(
        "/add-admin",
        status_code=status.HTTP_201_CREATED,
        response_model=Envelope[AdminCreated],
        response_model_exclude_unset=True,
        summary="Create an admin account",
    )
    async def add_admin(
        payload: AdminCreate,
        user: UserRead = Depends(require_admin),
    ) -> Envelope:
        created = await service.add_admin(payload, user)
        return envelope(created, "Admin user created successfully")

    @router.put(
        "/change-password",
        response_model=Envelope,
        response_model_exclude_unset=True,
        summary="Change the caller's password",
    )
    async def change_password(
        payload: PasswordChange,
        user: UserRead = Depends(get_current_user),
    ) -> Envelope:
        await service.change_password(user.id, payload)
        return envelope(message="Password changed successfully")

    @router.get(
        "/admins",
        response_model=Envelope[Page[UserRead]],
        response_model_exclude_unset=True,
        summary="List admin accounts",
    )
    async def list_admins(
        query: AdminQuery = Depends(query_params(AdminQuery)),
        user: UserRead = Depends(require_admin),
    ) -> Envelope:
        return envelope(await service.list(query))

    @router.get(
        "/stats",
        response_model=Envelope[Dict[str, Any]],
        response_model_exclude_unset=True,
        summary="Admin account statistics",
    )
    @router.get(
        "/stats/overview",
        response_model=Envelope[Dict[str, Any]],
        response_model_exclude_unset=True,
        include_in_schema=False,
    )
    async def admin_stats(user: UserRead = Depends(require_admin)) -> Envelope:
        return envelope(await service.stats())

    @router.get(
        "/admin/{admin_id}",
        response_model=Envelope[UserRead],
        response_model_exclude_unset=True,
        summary="Get an admin account",
    )
    async def get_admin(admin_id: UUID, user: UserRead = Depends(require_admin)) -> Envelope:
        return envelope(await service.get(admin_id))

    @router.put(
        "/admin/{admin_id}/status",
        response_model=Envelope[UserRead],
        response_model_exclude_unset=True,
        summary="Activate or deactivate an admin account",
    )
    async def set_admin_status(
        admin_id: UUID,
        payload: StatusUpdate,
        user: UserRead = Depends(require_admin),
    ) -> Envelope:
        updated = await service.set_status(admin_id, payload.is_active, user)
        state = "activated" if payload.is_active else "deactivated"
        return envelope(updated, f"Admin {state} successfully")

    return router
