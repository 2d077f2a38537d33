"""
Incubator Backend — Contact Service
=====================================

Contact submissions are created by the public and handled by admins.

Response tracking:
    An update carrying a new, non-empty `response` stamps `responded_by` (the
    acting admin) and `responded_at`, and moves the submission to
    `responded` unless the same update sets a status explicitly. Resending the
    stored response changes nothing.
"""

import logging
from typing import Any, Dict, Optional

from incubator.database import utcnow
from incubator.schemas.user import UserRead
from incubator.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class ContactService(ResourceService):

    def before_update(
        self, obj: Any, changes: Dict[str, Any], actor: Optional[UserRead]
    ) -> Dict[str, Any]:
        if changes.get("response") and changes["response"] != obj.response:
            changes["responded_at"] = utcnow()
            if actor is not None:
                changes["responded_by"] = actor.id
            changes.setdefault("status", "responded")
        return changes
