"""Incubator Backend — Program Schemas."""

from datetime import datetime
from typing import Annotated, List, Literal, Optional
from uuid import UUID

from pydantic import Field

from incubator.schemas.common import ApiModel, DocumentRead, ListQuery, PublicQuery
from incubator.validation import make_partial

Bullet = Annotated[str, Field(min_length=1, max_length=500)]


class ProgramCreate(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    duration: Optional[str] = Field(default=None, max_length=100)
    bullets: List[Bullet] = Field(min_length=1, description="At least one bullet point")
    is_active: bool = True


ProgramUpdate = make_partial(ProgramCreate, "ProgramUpdate")


class ProgramRead(DocumentRead, ProgramCreate):
    pass


class ProgramPublic(ApiModel):
    id: UUID
    title: str
    duration: Optional[str] = None
    bullets: List[str]
    created_at: datetime


class ProgramQuery(ListQuery):
    limit: int = Field(default=50, ge=1, le=100)
    is_active: Optional[bool] = None
    sort_by: Literal["createdAt", "title"] = "createdAt"


class ProgramPublicQuery(PublicQuery):
    sort_by: Literal["createdAt", "title"] = "createdAt"
