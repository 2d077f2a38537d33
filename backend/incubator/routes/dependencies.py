"""
Incubator Backend — Route Dependencies (Access Gate)
======================================================

What:  FastAPI dependencies resolving the caller and checking their role, and
       the query-string validator used by listing endpoints.
Why:   Role checks are declared per route (`Depends(require_admin)`) instead
       of being repeated inside handlers.
How:
    get_current_user   bearer token → UserRead, stored on request.state.user
                       missing credential → 401 "No token, authorization denied"
                       invalid credential → 401 "Token is not valid"
    require_role(...)  wraps get_current_user; wrong role → 403

Role equality is strict: `require_role("admin")` admits only "admin", not
"super_admin". Pass both roles where both should pass.
"""

import logging
from typing import Callable, Optional, Type

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from incubator.exceptions import AuthError, PermissionDeniedError
from incubator.schemas.user import UserRead
from incubator.services.auth_service import AuthService
from incubator.validation import validate

logger = logging.getLogger(__name__)

# auto_error=False: a missing header is answered with our 401 envelope
bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.services.auth


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> UserRead:
    if credentials is None:
        raise AuthError(message="No token, authorization denied")
    user = await auth.authenticate(credentials.credentials)
    request.state.user = user
    return user


def require_role(*roles: str) -> Callable:
    """Dependency factory admitting only callers whose role is one of `roles`."""
    label = " or ".join(role.replace("_", " ").title() for role in roles)

    async def checker(user: UserRead = Depends(get_current_user)) -> UserRead:
        if user.role not in roles:
            logger.warning("User %s with role %s denied (needs %s)", user.id, user.role, roles)
            raise PermissionDeniedError(message=f"Access denied. {label} role required.")
        return user

    return checker


require_admin = require_role("admin")


def query_params(schema: Type[BaseModel]) -> Callable:
    """Dependency validating the query string against `schema` (400 on failure)."""

    def dependency(request: Request) -> BaseModel:
        return validate(schema, request.query_params, "Invalid query parameters")

    return dependency
