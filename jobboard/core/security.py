# jobboard/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError
from pydantic import BaseModel

from jobboard.core.config import settings


class TokenData(BaseModel):
    sub: Optional[str] = None


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Mint a token the way the auth provider does. Used by tests and local
    development; production tokens come from the provider.
    """
    now = datetime.now(timezone.utc)
    exp = now + (expires_delta if expires_delta else timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"sub": subject, "iat": now, "exp": exp}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """Raises JWTError when the signature or expiry check fails."""
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    return TokenData(sub=payload.get("sub"))


__all__ = ["TokenData", "create_access_token", "decode_access_token", "JWTError"]
