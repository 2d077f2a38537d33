"""
Incubator Backend — Intake Application Service
================================================

Shared by the pre-incubation and incubation resources.

Status moves are permissive: any valid `applicationStatus` is accepted from
any other. Two timeline fields are stamped once and never rewritten:
    reviewedAt   first move away from "submitted"
    approvedAt   first move into "approved"
"""

import logging
from typing import Any, Dict, Optional

from incubator.database import utcnow
from incubator.schemas.user import UserRead
from incubator.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class ApplicationService(ResourceService):

    def before_update(
        self, obj: Any, changes: Dict[str, Any], actor: Optional[UserRead]
    ) -> Dict[str, Any]:
        new_status = changes.get("application_status")
        if new_status is None or new_status == obj.application_status:
            return changes

        now = utcnow()
        if new_status != "submitted" and obj.reviewed_at is None:
            changes["reviewed_at"] = now
        if new_status == "approved" and obj.approved_at is None:
            changes["approved_at"] = now
        logger.info(
            "%s %s: %s → %s",
            self.config.label,
            obj.id,
            obj.application_status,
            new_status,
        )
        return changes
