"""
Incubator Backend — Announcement Model
========================================

Publishable notice with a call-to-action link. `published_at` is written by
the service on the first transition into `published` and never cleared.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from incubator.database import Base, UTCDateTime
from incubator.models.mixins import ActiveMixin, DocumentMixin


class Announcement(DocumentMixin, ActiveMixin, Base):
    __tablename__ = "announcements"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    link: Mapped[str] = mapped_column(String(500), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default="medium")
    published_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)
    expires_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    # Public list: WHERE status='published' AND is_active ORDER BY published_at DESC
    __table_args__ = (
        Index("idx_announcements_status_active", "status", "is_active"),
    )

    def __repr__(self) -> str:
        return f"<Announcement(id={self.id}, status='{self.status}', title='{self.title}')>"
