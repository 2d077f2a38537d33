"""
Incubator Backend — User Model
================================

Admin accounts (and the reviewer/applicant roles the token format allows).
The password is stored only as a bcrypt hash; the column is never serialized.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from incubator.database import Base, UTCDateTime
from incubator.models.mixins import ActiveMixin, DocumentMixin

ADMIN_ROLES = ("admin", "super_admin")


class User(DocumentMixin, ActiveMixin, Base):
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="admin")
    last_login: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
