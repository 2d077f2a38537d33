"""
Incubator Backend — Authentication Routes
===========================================

POST /auth/login   email + password → {token, user}
GET  /auth/me      the caller, resolved from the bearer token
"""

from fastapi import APIRouter, Depends

from incubator.routes.dependencies import get_auth_service, get_current_user
from incubator.routes.resources import envelope
from incubator.schemas.common import Envelope
from incubator.schemas.user import LoginRequest, TokenResponse, UserRead
from incubator.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=Envelope[TokenResponse],
    response_model_exclude_unset=True,
    summary="Log in and receive a bearer token",
)
async def login(
    payload: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> Envelope:
    return envelope(await auth.login(payload), "Login successful")


@router.get(
    "/me",
    response_model=Envelope[UserRead],
    response_model_exclude_unset=True,
    summary="The authenticated user",
)
async def me(user: UserRead = Depends(get_current_user)) -> Envelope:
    return envelope(user)
