"""Incubator Backend — Blog post model (publishable, tagged)."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from incubator.database import Base, UTCDateTime
from incubator.models.mixins import ActiveMixin, DocumentMixin


class Blog(DocumentMixin, ActiveMixin, Base):
    __tablename__ = "blogs"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    cover_image: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")
    published_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<Blog(id={self.id}, status='{self.status}', title='{self.title}')>"
