"""
Incubator Backend — Authentication Service
============================================

What:  Login, bearer-token resolution and the bootstrap admin account.
How:   Tokens are HS256 JWTs whose `sub` is the user id. Resolving a token
       re-reads the user, so a deleted account stops working immediately.
       A deactivated account keeps working until its token expires; only
       login checks `is_active`.
"""

import logging
import uuid

from sqlalchemy import select

from incubator.database import Database, utcnow
from incubator.exceptions import AuthError
from incubator.models.user import User
from incubator.schemas.user import LoginRequest, TokenResponse, UserRead
from incubator.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, database: Database):
        self.database = database

    async def login(self, payload: LoginRequest) -> TokenResponse:
        """
        Exchange email and password for a bearer token.

        Raises:
            AuthError: unknown email, wrong password, or deactivated account
        """
        async with self.database.session() as session:
            result = await session.execute(select(User).where(User.email == payload.email))
            user = result.scalar_one_or_none()
            if user is None or not verify_password(payload.password, user.password_hash):
                logger.warning("Failed login for %s", payload.email)
                raise AuthError(message="Invalid credentials")
            if not user.is_active:
                logger.warning("Login attempt on deactivated account %s", user.id)
                raise AuthError(message="Account is deactivated")
            user.last_login = utcnow()
            await session.flush()
            await session.refresh(user)

        token = create_access_token({"sub": str(user.id), "role": user.role})
        logger.info("User %s logged in", user.id)
        return TokenResponse(token=token, user=UserRead.model_validate(user))

    async def authenticate(self, token: str) -> UserRead:
        """
        Resolve a bearer token to its user.

        Raises:
            AuthError: bad signature, expired, malformed subject, or unknown user
        """
        claims = decode_access_token(token)
        try:
            user_id = uuid.UUID(str(claims["sub"]))
        except ValueError as exc:
            raise AuthError(context={"reason": "malformed subject"}) from exc

        async with self.database.session() as session:
            user = await session.get(User, user_id)
        if user is None:
            logger.warning("Token for unknown user %s", user_id)
            raise AuthError()
        return UserRead.model_validate(user)

    async def ensure_admin(self, email: str, password: str, name: str) -> bool:
        """
        Create the first admin account if no user has `email` yet.

        Returns:
            True when an account was created
        """
        email = email.strip().lower()
        async with self.database.session() as session:
            result = await session.execute(select(User.id).where(User.email == email))
            if result.first() is not None:
                return False
            session.add(
                User(
                    name=name,
                    email=email,
                    password_hash=get_password_hash(password),
                    role="admin",
                    is_active=True,
                )
            )
        logger.info("Bootstrap admin account created: %s", email)
        return True
