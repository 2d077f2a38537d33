"""
Incubator Backend — Event Schemas
===================================

Core fields are required; the descriptive fields are optional and bounded
(see EVENT_DETAIL_FIELDS in the model for their lengths). Listing supports
`startDate`/`endDate` on the event date in addition to the shared filters.
"""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import Field

from incubator.schemas.common import ApiModel, DocumentRead, ListQuery, PublicQuery, UtcDateTime
from incubator.validation import make_partial

EventType = Literal[
    "workshop",
    "seminar",
    "webinar",
    "outreach",
    "collaboration",
    "hackathon",
    "capacity-building",
    "calendar-event",
    "past-event",
]
EventStatus = Literal["upcoming", "ongoing", "completed", "cancelled"]
EventMode = Literal["In-person", "Online", "Hybrid"]


class EventDetails(ApiModel):
    venue: Optional[str] = Field(default=None, max_length=200)
    speaker: Optional[str] = Field(default=None, max_length=200)
    audience: Optional[str] = Field(default=None, max_length=200)
    participants: Optional[str] = Field(default=None, max_length=100)
    focus: Optional[str] = Field(default=None, max_length=500)
    partners: Optional[str] = Field(default=None, max_length=500)
    objective: Optional[str] = Field(default=None, max_length=1000)
    theme: Optional[str] = Field(default=None, max_length=200)
    prizes: Optional[str] = Field(default=None, max_length=200)
    teams: Optional[str] = Field(default=None, max_length=100)
    duration: Optional[str] = Field(default=None, max_length=100)
    sessions: Optional[str] = Field(default=None, max_length=100)
    certification: Optional[str] = Field(default=None, max_length=200)
    eligibility: Optional[str] = Field(default=None, max_length=500)
    modules: Optional[str] = Field(default=None, max_length=1000)
    highlight: Optional[str] = Field(default=None, max_length=500)


class EventCreate(EventDetails):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=2000)
    date: UtcDateTime
    type: EventType
    mode: EventMode = "In-person"
    status: EventStatus = "upcoming"
    is_active: bool = True


EventUpdate = make_partial(EventCreate, "EventUpdate")


class EventRead(DocumentRead, EventCreate):
    pass


class EventPublic(EventDetails):
    id: UUID
    title: str
    description: str
    date: datetime
    type: str
    mode: str
    status: str
    created_at: datetime


class EventQuery(ListQuery):
    type: Optional[EventType] = None
    status: Optional[EventStatus] = None
    is_active: Optional[bool] = None
    sort_by: Literal["title", "date", "type", "status", "createdAt", "updatedAt"] = "createdAt"


class EventPublicQuery(PublicQuery):
    type: Optional[EventType] = None
    status: Optional[EventStatus] = None
    sort_by: Literal["date", "title", "createdAt"] = "date"


class UpcomingQuery(ApiModel):
    limit: int = Field(default=10, ge=1, le=50)
