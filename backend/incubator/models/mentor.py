"""Incubator Backend — Mentor model. Email is unique across mentors."""

from typing import List

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from incubator.database import Base
from incubator.models.mixins import ActiveMixin, DocumentMixin


class Mentor(DocumentMixin, ActiveMixin, Base):
    __tablename__ = "mentors"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    designation: Mapped[str] = mapped_column(String(100), nullable=False)
    company: Mapped[str] = mapped_column(String(100), nullable=False)
    expertise: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    bio: Mapped[str] = mapped_column(String(1000), nullable=False)
    profile_image: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    linkedin_profile: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Mentor(id={self.id}, email='{self.email}')>"
