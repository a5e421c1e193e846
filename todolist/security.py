# todolist/security.py
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import Settings

_pwd = CryptContext(schemes=["bcrypt"], deprecated="auto")

def hash_password(plain: str) -> str:
    return _pwd.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    return _pwd.verify(plain, hashed)

def dummy_verify() -> None:
    # Burns one bcrypt round so an unknown email costs as much as a wrong password
    _pwd.dummy_verify()

def token_expiry(cfg: Settings, now: Optional[datetime] = None) -> datetime:
    issued = now or datetime.now(timezone.utc)
    return issued + timedelta(minutes=cfg.JWT_EXPIRATION_MINUTES)

def create_access_token(
    subject: int | str,
    cfg: Settings,
    *,
    email: str,
    name: str,
    expires_at: datetime,
    issued_at: Optional[datetime] = None,
) -> str:
    to_encode: dict[str, Any] = {
        "sub": str(subject),
        "email": email,
        "name": name,
        "jti": uuid.uuid4().hex,  # unique per issuance
        "iat": issued_at or datetime.now(timezone.utc),
        "exp": expires_at,
        "iss": cfg.JWT_ISSUER,
        "aud": cfg.JWT_AUDIENCE,
    }
    return jwt.encode(to_encode, cfg.JWT_SECRET_KEY, algorithm=cfg.JWT_ALGORITHM)

def decode_token(token: str, cfg: Settings) -> dict[str, Any]:
    # Raises jose.JWTError on bad signature, expiry, issuer or audience
    return jwt.decode(
        token,
        cfg.JWT_SECRET_KEY,
        algorithms=[cfg.JWT_ALGORITHM],
        audience=cfg.JWT_AUDIENCE,
        issuer=cfg.JWT_ISSUER,
    )

__all__ = [
    "hash_password",
    "verify_password",
    "dummy_verify",
    "token_expiry",
    "create_access_token",
    "decode_token",
    "JWTError",
]
