"""
Incubator Backend — Password Hashing and Access Tokens
========================================================

What:  bcrypt password hashing (passlib) and signed JWT bearer tokens (python-jose).
Why:   Passwords are stored one-way only; tokens carry the user id and role so
       the access gate can resolve the caller with a single lookup.
How:   A fixed-secret HS256 signature with an expiry claim. There is no refresh
       or revocation list: a token stays valid until `exp`.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from incubator.config import settings
from incubator.exceptions import AuthError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign `data` with an `exp` claim (default lifetime from settings)."""
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises:
        AuthError: bad signature, expired token, or no `sub` claim
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise AuthError(context={"reason": str(exc)}) from exc
    if not payload.get("sub"):
        raise AuthError(context={"reason": "missing subject"})
    return payload
