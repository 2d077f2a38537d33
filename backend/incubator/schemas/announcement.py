"""
Incubator Backend — Announcement Schemas
==========================================

Create/update/read contracts plus the admin and public query parameters.
`publishedAt` is read-only: it is set by the service, never by clients.
"""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import Field

from incubator.schemas.common import (
    ApiModel,
    DocumentRead,
    ListQuery,
    PublicQuery,
    UtcDateTime,
    WebUrl,
)
from incubator.validation import make_partial

AnnouncementStatus = Literal["draft", "published", "archived"]
Priority = Literal["low", "medium", "high", "urgent"]


class AnnouncementCreate(ApiModel):
    title: str = Field(min_length=5, max_length=200)
    description: str = Field(min_length=10, max_length=1000)
    link: WebUrl = Field(description="Call-to-action URL (http or https)")
    status: AnnouncementStatus = "draft"
    priority: Priority = "medium"
    is_active: bool = True
    expires_at: Optional[UtcDateTime] = None


AnnouncementUpdate = make_partial(AnnouncementCreate, "AnnouncementUpdate")


class AnnouncementRead(DocumentRead, AnnouncementCreate):
    published_at: Optional[datetime] = None


class AnnouncementPublic(ApiModel):
    id: UUID
    title: str
    description: str
    link: str
    priority: str
    published_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    created_at: datetime


class AnnouncementQuery(ListQuery):
    status: Optional[AnnouncementStatus] = None
    priority: Optional[Priority] = None
    is_active: Optional[bool] = None
    sort_by: Literal["title", "createdAt", "publishedAt", "priority", "status"] = "createdAt"


class AnnouncementPublicQuery(PublicQuery):
    priority: Optional[Priority] = None
    sort_by: Literal["publishedAt", "createdAt", "title", "priority"] = "publishedAt"
