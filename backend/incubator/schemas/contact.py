"""
Incubator Backend — Contact Submission Schemas
================================================

Three audiences:
    - the public form (ContactCreate → ContactReceipt)
    - admins handling the submission (ContactUpdate: status, priority, response)
    - admin reads (ContactRead, with derived fullName / timeSinceSubmission)
"""

import re
from datetime import datetime, timezone
from typing import Annotated, Any, Literal, Optional
from uuid import UUID

from pydantic import AfterValidator, Field, ValidationInfo, computed_field, field_validator

from incubator.schemas.common import (
    ApiModel,
    DocumentRead,
    Email,
    ListQuery,
    UserRef,
    resolve_user_ref,
)
from incubator.validation import make_partial

ContactStatus = Literal["new", "in-progress", "responded", "closed"]
ContactPriority = Literal["low", "medium", "high", "urgent"]
ContactSource = Literal["website", "email", "phone", "referral", "other"]

_PHONE_RE = re.compile(r"^\+?[0-9\s\-()]{10,20}$")


def _contact_phone(value: str) -> str:
    if value and not _PHONE_RE.match(value):
        raise ValueError("Please provide a valid phone number")
    return value


ContactPhone = Annotated[str, Field(max_length=20), AfterValidator(_contact_phone)]


def _contact_email_length(value: str) -> str:
    if len(value) > 100:
        raise ValueError("String should have at most 100 characters")
    return value


ContactEmail = Annotated[Email, AfterValidator(_contact_email_length)]


class ContactCreate(ApiModel):
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: ContactEmail
    phone: Optional[ContactPhone] = None
    organization: Optional[str] = Field(default=None, max_length=100)
    subject: str = Field(min_length=5, max_length=200)
    message: str = Field(min_length=10, max_length=2000)
    subscribe_newsletter: bool = False
    source: ContactSource = "website"
    referrer: Optional[str] = Field(default=None, max_length=200)


class ContactHandling(ApiModel):
    """Fields an admin may change after submission."""
    status: ContactStatus = "new"
    priority: ContactPriority = "medium"
    response: Optional[str] = Field(default=None, max_length=2000)


ContactUpdate = make_partial(ContactHandling, "ContactUpdate")


class ContactReceipt(ApiModel):
    """What the submitter gets back."""
    id: UUID
    submitted_at: datetime
    status: str


def time_since(moment: datetime, now: Optional[datetime] = None) -> str:
    """Coarse relative age: "Just now", "N hours ago", "N days ago", "N weeks ago"."""
    now = now or datetime.now(timezone.utc)
    hours = int((now - moment).total_seconds() // 3600)
    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours} hours ago"
    if hours < 24 * 7:
        return f"{hours // 24} days ago"
    return f"{hours // (24 * 7)} weeks ago"


class ContactRead(DocumentRead, ContactCreate, ContactHandling):
    responded_by: Optional[UserRef] = None
    responded_at: Optional[datetime] = None
    submitted_at: datetime
    last_activity_at: datetime

    @field_validator("responded_by", mode="before")
    @classmethod
    def expand_responder(cls, value: Any, info: ValidationInfo) -> Any:
        return resolve_user_ref(value, info)

    @computed_field(alias="fullName")
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @computed_field(alias="timeSinceSubmission")
    @property
    def time_since_submission(self) -> str:
        return time_since(self.submitted_at)


class ContactQuery(ListQuery):
    status: Optional[ContactStatus] = None
    priority: Optional[ContactPriority] = None
    source: Optional[ContactSource] = None
    sort_by: Literal[
        "submittedAt", "firstName", "lastName", "email", "status", "priority"
    ] = "submittedAt"
