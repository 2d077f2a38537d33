"""
Incubator Backend — Mentor Schemas
====================================

The public view leaves out contact details (email, phone) and audit fields.
"""

import re
from datetime import datetime
from typing import Annotated, List, Literal, Optional
from uuid import UUID

from pydantic import AfterValidator, Field

from incubator.schemas.common import (
    ApiModel,
    DocumentRead,
    Email,
    ListQuery,
    PublicQuery,
    WebUrlOrEmpty,
)
from incubator.validation import make_partial

_PHONE_RE = re.compile(r"^\+?[1-9]\d{0,15}$")


def _mentor_phone(value: str) -> str:
    if not _PHONE_RE.match(value):
        raise ValueError("Please provide a valid phone number")
    return value


MentorPhone = Annotated[str, Field(max_length=20), AfterValidator(_mentor_phone)]
Expertise = Annotated[str, Field(min_length=2, max_length=50)]


class MentorCreate(ApiModel):
    name: str = Field(min_length=2, max_length=100)
    email: Email
    phone: MentorPhone
    designation: str = Field(min_length=2, max_length=100)
    company: str = Field(min_length=2, max_length=100)
    expertise: List[Expertise] = Field(min_length=1)
    bio: str = Field(min_length=10, max_length=1000)
    profile_image: WebUrlOrEmpty = ""
    linkedin_profile: WebUrlOrEmpty = ""
    is_active: bool = True


MentorUpdate = make_partial(MentorCreate, "MentorUpdate")


class MentorRead(DocumentRead, MentorCreate):
    pass


class MentorPublic(ApiModel):
    id: UUID
    name: str
    designation: str
    company: str
    expertise: List[str]
    bio: str
    profile_image: str
    linkedin_profile: str
    created_at: datetime


class MentorQuery(ListQuery):
    is_active: Optional[bool] = None
    sort_by: Literal["createdAt", "name", "company"] = "createdAt"


class MentorPublicQuery(PublicQuery):
    limit: int = Field(default=10, ge=1, le=100)
    sort_by: Literal["createdAt", "name"] = "createdAt"
