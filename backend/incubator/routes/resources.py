"""
Incubator Backend — Generic Resource Routes
=============================================

What:  Builds the route family for one ResourceService.
Why:   Every resource exposes the same HTTP surface; only its schemas, its
       gating of create and its optional public views differ.
How:   `build_resource_router(service)` reads the service's ResourceConfig and
       registers handlers closing over that service.

Route family (prefix /<name>):
    POST   /                 create          admin, or public for intake forms
    GET    /                 list            admin
    GET    /stats            stats           admin
    GET    /stats/overview   stats           admin
    GET    /public/list      public list     anyone (active/published only)
    GET    /{item_id}        get             admin
    PUT    /{item_id}        partial update  admin
    DELETE /{item_id}        delete          admin

The stats routes are registered before `/{item_id}`, which would otherwise
capture "stats" as an id.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from incubator.schemas.common import Envelope, Page
from incubator.schemas.user import UserRead
from incubator.routes.dependencies import query_params, require_admin
from incubator.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


def envelope(data: Any = None, message: Optional[str] = None) -> Envelope:
    """Build a success envelope carrying only the parts that were given."""
    fields: Dict[str, Any] = {"success": True}
    if message is not None:
        fields["message"] = message
    if data is not None:
        fields["data"] = data
    return Envelope(**fields)


def build_resource_router(service: ResourceService) -> APIRouter:
    config = service.config
    label = config.label
    read_schema = config.read_schema
    create_schema = config.create_schema
    update_schema = config.update_schema
    created_schema = config.receipt_schema or read_schema

    router = APIRouter(prefix=config.path, tags=[label])

    # ── Create ────────────────────────────────────────────────────────────
    if config.public_create:

        @router.post(
            "",
            status_code=status.HTTP_201_CREATED,
            response_model=Envelope[created_schema],
            response_model_exclude_unset=True,
            summary=f"Submit a {label.lower()}",
        )
        async def submit_item(payload: create_schema) -> Envelope:
            item = await service.create(payload, schema=created_schema)
            return envelope(item, config.created_message or f"{label} submitted successfully")

    else:

        @router.post(
            "",
            status_code=status.HTTP_201_CREATED,
            response_model=Envelope[created_schema],
            response_model_exclude_unset=True,
            summary=f"Create a {label.lower()}",
        )
        async def create_item(
            payload: create_schema,
            user: UserRead = Depends(require_admin),
        ) -> Envelope:
            item = await service.create(payload, user, schema=created_schema)
            return envelope(item, config.created_message or f"{label} created successfully")

    # ── List ──────────────────────────────────────────────────────────────
    @router.get(
        "",
        response_model=Envelope[Page[read_schema]],
        response_model_exclude_unset=True,
        summary=f"List {label.lower()}s (filtered, sorted, paginated)",
    )
    async def list_items(
        query=Depends(query_params(config.query_schema)),
        user: UserRead = Depends(require_admin),
    ) -> Envelope:
        return envelope(await service.list(query))

    # ── Stats ─────────────────────────────────────────────────────────────
    if config.stats is not None:

        @router.get(
            "/stats",
            response_model=Envelope[Dict[str, Any]],
            response_model_exclude_unset=True,
            summary=f"{label} statistics",
        )
        @router.get(
            "/stats/overview",
            response_model=Envelope[Dict[str, Any]],
            response_model_exclude_unset=True,
            include_in_schema=False,
        )
        async def item_stats(user: UserRead = Depends(require_admin)) -> Envelope:
            return envelope(await service.stats())

    # ── Public list ───────────────────────────────────────────────────────
    if config.public_schema is not None:

        @router.get(
            "/public/list",
            response_model=Envelope[Page[config.public_schema]],
            response_model_exclude_unset=True,
            summary=f"Public {label.lower()} listing",
        )
        async def public_list_items(
            query=Depends(query_params(config.public_query_schema)),
        ) -> Envelope:
            return envelope(await service.public_list(query))

    # ── Single item ───────────────────────────────────────────────────────
    @router.get(
        "/{item_id}",
        response_model=Envelope[read_schema],
        response_model_exclude_unset=True,
        summary=f"Get a {label.lower()}",
    )
    async def get_item(item_id: UUID, user: UserRead = Depends(require_admin)) -> Envelope:
        return envelope(await service.get(item_id))

    if update_schema is not None:

        @router.put(
            "/{item_id}",
            response_model=Envelope[read_schema],
            response_model_exclude_unset=True,
            summary=f"Update a {label.lower()}",
        )
        async def update_item(
            item_id: UUID,
            payload: update_schema,
            user: UserRead = Depends(require_admin),
        ) -> Envelope:
            item = await service.update(item_id, payload, user)
            return envelope(item, f"{label} updated successfully")

    @router.delete(
        "/{item_id}",
        response_model=Envelope,
        response_model_exclude_unset=True,
        summary=f"Delete a {label.lower()}",
    )
    async def delete_item(item_id: UUID, user: UserRead = Depends(require_admin)) -> Envelope:
        await service.delete(item_id, user)
        return envelope(message=f"{label} deleted successfully")

    return router
