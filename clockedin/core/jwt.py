from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from clockedin.config import settings

ALGORITHM = "HS256"


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT session token for a principal.

    Args:
        user_id: The ephemeral principal id minted at login
        expires_delta: Optional expiration time delta. Defaults to JWT_EXPIRE_HOURS.

    Returns:
        The encoded JWT token
    """
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.JWT_EXPIRE_HOURS)

    to_encode = {
        "userId": user_id,
        "authenticated": True,
        "exp": datetime.now(tz=timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """
    Verify and decode a JWT session token.

    Returns:
        The decoded payload if valid, None if the signature or expiry check fails
    """
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None
