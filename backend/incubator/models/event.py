"""
Incubator Backend — Event Model
=================================

Workshops, seminars, hackathons and the like. Besides the core columns an
event carries a set of optional descriptive fields; different event types
fill different subsets of them (a hackathon has prizes and teams, a
capacity-building programme has modules and certification).
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from incubator.database import Base, UTCDateTime
from incubator.models.mixins import ActiveMixin, DocumentMixin

EVENT_TYPES = (
    "workshop",
    "seminar",
    "webinar",
    "outreach",
    "collaboration",
    "hackathon",
    "capacity-building",
    "calendar-event",
    "past-event",
)
EVENT_STATUSES = ("upcoming", "ongoing", "completed", "cancelled")
EVENT_MODES = ("In-person", "Online", "Hybrid")

# Optional descriptive fields and their maximum lengths
EVENT_DETAIL_FIELDS = {
    "venue": 200,
    "speaker": 200,
    "audience": 200,
    "participants": 100,
    "focus": 500,
    "partners": 500,
    "objective": 1000,
    "theme": 200,
    "prizes": 200,
    "teams": 100,
    "duration": 100,
    "sessions": 100,
    "certification": 200,
    "eligibility": 500,
    "modules": 1000,
    "highlight": 500,
}


class Event(DocumentMixin, ActiveMixin, Base):
    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(String(2000), nullable=False)
    date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    mode: Mapped[str] = mapped_column(String(20), nullable=False, default="In-person")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="upcoming")

    venue: Mapped[Optional[str]] = mapped_column(String(200))
    speaker: Mapped[Optional[str]] = mapped_column(String(200))
    audience: Mapped[Optional[str]] = mapped_column(String(200))
    participants: Mapped[Optional[str]] = mapped_column(String(100))
    focus: Mapped[Optional[str]] = mapped_column(String(500))
    partners: Mapped[Optional[str]] = mapped_column(String(500))
    objective: Mapped[Optional[str]] = mapped_column(String(1000))
    theme: Mapped[Optional[str]] = mapped_column(String(200))
    prizes: Mapped[Optional[str]] = mapped_column(String(200))
    teams: Mapped[Optional[str]] = mapped_column(String(100))
    duration: Mapped[Optional[str]] = mapped_column(String(100))
    sessions: Mapped[Optional[str]] = mapped_column(String(100))
    certification: Mapped[Optional[str]] = mapped_column(String(200))
    eligibility: Mapped[Optional[str]] = mapped_column(String(500))
    modules: Mapped[Optional[str]] = mapped_column(String(1000))
    highlight: Mapped[Optional[str]] = mapped_column(String(500))

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, type='{self.type}', date='{self.date}')>"
