"""
Incubator Backend — Admin Account Service
===========================================

What:  Creating admin accounts, listing them, toggling their status and
       changing one's own password.
Why:   Accounts are Users scoped to the admin roles; they reuse the generic
       list/get/stats behaviour and add the credential rules.

Credential rules:
    - An email may belong to one user only. The check runs before the insert
      so the caller gets "User with this email already exists" rather than a
      constraint error.
    - Passwords are stored as bcrypt hashes only.
    - Changing a password requires the current one.
    - An admin cannot deactivate their own account.
"""

import logging
import uuid
from typing import Any, Dict, Optional

from incubator.exceptions import NotFoundError, ValidationError
from incubator.models.user import User
from incubator.schemas.user import AdminCreate, AdminCreated, PasswordChange, UserRead
from incubator.security import get_password_hash, verify_password
from incubator.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class AdminService(ResourceService):

    def before_create(self, values: Dict[str, Any], actor: Optional[UserRead]) -> Dict[str, Any]:
        values["password_hash"] = get_password_hash(values.pop("password"))
        values.setdefault("is_active", True)
        return values

    async def add_admin(self, payload: AdminCreate, actor: UserRead) -> AdminCreated:
        """
        Create an admin account.

        Raises:
            ConflictError: the email is already registered (any role)
        """
        return await self.create(payload, actor, schema=AdminCreated)

    async def change_password(self, user_id: uuid.UUID, payload: PasswordChange) -> None:
        """
        Replace the caller's password after re-checking the current one.

        Raises:
            ValidationError: current password does not match
            NotFoundError: the account no longer exists
        """
        async with self.database.session() as session:
            user = await session.get(User, user_id)
            if user is None:
                raise NotFoundError(resource="User", resource_id=str(user_id))
            if not verify_password(payload.current_password, user.password_hash):
                logger.warning("Password change rejected for %s: wrong current password", user_id)
                raise ValidationError(message="Current password is incorrect")
            user.password_hash = get_password_hash(payload.new_password)
            user.updated_by = user_id
        logger.info("Password changed for user %s", user_id)

    async def set_status(
        self, target_id: uuid.UUID, is_active: bool, actor: UserRead
    ) -> UserRead:
        """
        Activate or deactivate an admin account.

        Raises:
            ValidationError: the caller tried to deactivate themselves
            NotFoundError: no admin account with that id
        """
        if target_id == actor.id and not is_active:
            raise ValidationError(message="You cannot deactivate your own account")
        return await self.set_active(target_id, is_active, actor)
