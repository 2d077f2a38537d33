"""
Incubator Backend — User, Admin and Auth Schemas
==================================================

Passwords only ever travel inbound; no response model has a password field.
"""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import Field

from incubator.schemas.common import ApiModel, DocumentRead, Email, ListQuery

UserRole = Literal["admin", "super_admin", "reviewer", "applicant"]
AdminRole = Literal["admin", "super_admin"]


class AdminCreate(ApiModel):
    name: str = Field(min_length=2, max_length=100)
    email: Email
    password: str = Field(min_length=8, max_length=128)
    role: AdminRole = "admin"


class AdminCreated(ApiModel):
    id: UUID
    name: str
    email: str
    role: str
    is_active: bool
    created_at: datetime


class UserRead(DocumentRead):
    """A user as seen by other code and by API clients (no secret fields)."""
    name: str
    email: str
    role: str
    is_active: bool
    last_login: Optional[datetime] = None


class PasswordChange(ApiModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=8, max_length=128)


class LoginRequest(ApiModel):
    email: Email
    password: str = Field(min_length=1)


class TokenResponse(ApiModel):
    token: str
    user: UserRead


class AdminQuery(ListQuery):
    role: Optional[AdminRole] = None
    is_active: Optional[bool] = None
    sort_by: Literal["createdAt", "name", "email", "lastLogin"] = "createdAt"
