from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import re

from jose import JWTError, jwt

from ideabank import config
from ideabank.errors import AuthError

_BEARER_RE = re.compile(r"^Bearer$", re.IGNORECASE)


@dataclass(frozen=True)
class TokenClaims:
    id: int
    email: str


def _get_secret_key() -> str:
    secret = config.SECRET_KEY
    if not secret:
        # Fail fast with a clear message instead of a generic 500
        raise RuntimeError("SECRET_KEY is not configured in the backend environment")
    if len(secret) < 32:
        raise RuntimeError("SECRET_KEY is too short; use at least 32 characters")
    return secret


def create_access_token(user_id: int, email: str, now: Optional[datetime] = None) -> str:
    issued = now or datetime.now(timezone.utc)
    expire = issued + timedelta(days=config.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode = {
        "id": user_id,
        "email": email,
        "exp": expire,
    }
    return jwt.encode(to_encode, _get_secret_key(), algorithm=config.ALGORITHM)


def decode_access_token(token: str) -> TokenClaims:
    try:
        payload = jwt.decode(token, _get_secret_key(), algorithms=[config.ALGORITHM])
    except JWTError:
        raise AuthError("Token inválido ou expirado")

    user_id = payload.get("id")
    if user_id is None:
        raise AuthError("Token inválido ou expirado")

    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        raise AuthError("Token inválido ou expirado")

    return TokenClaims(id=user_id, email=payload.get("email"))


def parse_bearer_header(authorization: Optional[str]) -> str:
    """Return the raw token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        raise AuthError("Token ausente")

    parts = authorization.split(" ")
    if len(parts) != 2:
        raise AuthError("Token inválido")

    scheme, token = parts
    if not _BEARER_RE.match(scheme):
        raise AuthError("Token mal formatado")

    return token


def verify_token(authorization: Optional[str]) -> TokenClaims:
    return decode_access_token(parse_bearer_header(authorization))
