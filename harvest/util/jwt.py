"""Session tokens carried in the ``auth_token`` cookie.

Tokens are issued elsewhere; the API only needs to read them back. Both
ends share ``AuthSettings`` (secret, algorithm, lifetime).
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from harvest.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims inside an ``auth_token``."""

    user_id: str
    handle: str
    exp: datetime


class JWTError(Exception):
    """Token could not be decoded, failed its signature check or expired."""

    pass


def create_token(user_id: str, handle: str, settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` that expires after ``jwt_expiry_days``."""
    expires_at = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    claims = {"user_id": user_id, "handle": handle, "exp": expires_at}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode ``token`` and return its claims.

    Raises:
        JWTError: If the token is expired, tampered with or malformed
    """
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
    return TokenPayload(**claims)
