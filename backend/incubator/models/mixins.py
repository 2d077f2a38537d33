"""
Incubator Backend — Shared Column Mixins
==========================================

What:  Identity, timestamp, audit and visibility columns shared by every table.
Why:   Each resource declares only its content columns; the generic service
       relies on these names (`id`, `created_at`, `created_by`, `is_active`).

Audit references point at users.id with ON DELETE SET NULL: removing an admin
never removes the content they wrote.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from incubator.database import UTCDateTime, utcnow


class IdMixin:
    # Non-sequential IDs: cannot be enumerated by guessing the next value.
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow, onupdate=utcnow
    )


class AuditMixin:
    created_by: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    updated_by: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )


class ActiveMixin:
    # Soft visibility flag: inactive rows never reach public listings.
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class DocumentMixin(IdMixin, TimestampMixin, AuditMixin):
    """Everything a stored document carries besides its content."""
