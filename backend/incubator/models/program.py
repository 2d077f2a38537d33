"""Incubator Backend — Program model (title, duration and bullet points)."""

from typing import List, Optional

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from incubator.database import Base
from incubator.models.mixins import ActiveMixin, DocumentMixin


class Program(DocumentMixin, ActiveMixin, Base):
    __tablename__ = "programs"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    duration: Mapped[Optional[str]] = mapped_column(String(100))
    bullets: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Program(id={self.id}, title='{self.title}')>"
