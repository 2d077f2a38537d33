"""Incubator Backend — Blog Schemas."""

from datetime import datetime
from typing import Annotated, List, Literal, Optional
from uuid import UUID

from pydantic import Field

from incubator.schemas.common import (
    ApiModel,
    DocumentRead,
    ListQuery,
    PublicQuery,
    WebUrlOrEmpty,
)
from incubator.validation import make_partial

BlogStatus = Literal["draft", "published"]
Tag = Annotated[str, Field(min_length=1, max_length=50)]


class BlogCreate(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    cover_image: WebUrlOrEmpty = ""
    tags: List[Tag] = Field(default_factory=list)
    status: BlogStatus = "draft"
    is_active: bool = True


BlogUpdate = make_partial(BlogCreate, "BlogUpdate")


class BlogRead(DocumentRead, BlogCreate):
    published_at: Optional[datetime] = None


class BlogPublic(ApiModel):
    id: UUID
    title: str
    content: str
    cover_image: str
    tags: List[str]
    published_at: Optional[datetime] = None
    created_at: datetime


class BlogQuery(ListQuery):
    status: Optional[BlogStatus] = None
    is_active: Optional[bool] = None
    sort_by: Literal["publishedAt", "createdAt", "title"] = "createdAt"


class BlogPublicQuery(PublicQuery):
    limit: int = Field(default=10, ge=1, le=100)
    sort_by: Literal["publishedAt", "createdAt", "title"] = "publishedAt"
