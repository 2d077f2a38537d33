"""
Incubator Backend — Contact Submission Model
==============================================

A public contact-form submission plus the admin-side handling state.

Lifecycle:
    1. Submitted by anyone (status='new', submitted_at=now)
    2. Triaged by an admin (status, priority)
    3. Answered: response text, responded_by and responded_at are stamped
       together and status moves to 'responded'
    4. Closed

last_activity_at is touched on every write; submitted_at never changes.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from incubator.database import Base, UTCDateTime, utcnow
from incubator.models.mixins import DocumentMixin

CONTACT_STATUSES = ("new", "in-progress", "responded", "closed")


class Contact(DocumentMixin, Base):
    __tablename__ = "contacts"

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20))
    organization: Mapped[Optional[str]] = mapped_column(String(100))
    subject: Mapped[str] = mapped_column(String(200), nullable=False)
    message: Mapped[str] = mapped_column(String(2000), nullable=False)
    subscribe_newsletter: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    source: Mapped[str] = mapped_column(String(20), nullable=False, default="website")
    referrer: Mapped[Optional[str]] = mapped_column(String(200))

    # ── Admin-side handling ───────────────────────────────────────────────
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="new")
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default="medium")
    response: Mapped[Optional[str]] = mapped_column(String(2000))
    responded_by: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    responded_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    submitted_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    last_activity_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (
        Index("idx_contacts_status_submitted", "status", "submitted_at"),
    )

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, email='{self.email}', status='{self.status}')>"
