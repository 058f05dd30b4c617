"""
Authentication Dependency for FastAPI.

- Issues HS256 JWTs carrying the caller's nickname (see POST /login)
- Extracts and validates the token from the Authorization header
- Raises HTTPException 401 if unauthorized

Config used (from chatroom.config.settings):
- SERVICE_AUTH_SECRET
- SERVICE_AUTH_ISSUER
- SERVICE_AUTH_AUDIENCE
- ACCESS_TOKEN_EXPIRE_MINUTES
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from chatroom.config.settings import Config
from chatroom.domain.exceptions import DomainValidationError
from chatroom.domain.value_objects.nickname import Nickname

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthUser:
    nickname: Nickname


# auto_error=False so a missing header is reported as 401 like a bad token
security = HTTPBearer(auto_error=False)


def create_access_token(
    nickname: Nickname, expires_delta: Optional[timedelta] = None
) -> str:
    now = datetime.now(timezone.utc)
    expires = now + (
        expires_delta
        if expires_delta is not None
        else timedelta(minutes=Config.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    return jwt.encode(
        {
            "sub": nickname.value,
            "nickname": nickname.value,
            "iat": now,
            "exp": expires,
            "iss": Config.SERVICE_AUTH_ISSUER,
            "aud": Config.SERVICE_AUTH_AUDIENCE,
        },
        Config.SERVICE_AUTH_SECRET,
        algorithm="HS256",
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Resolve the caller from the bearer token.

    Raises:
        HTTPException 401 if the token is missing, invalid, expired, or has no nickname
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss"]},
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.info("Rejected token: %s", e)
        raise _unauthorized(f"Invalid token: {str(e)}")

    try:
        nickname = Nickname(claims.get("nickname") or claims.get("sub") or "")
    except DomainValidationError:
        raise _unauthorized("Missing required claims in token")

    return AuthUser(nickname=nickname)
