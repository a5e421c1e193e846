# todolist/services/auth.py
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from .. import models, schemas
from ..config import Settings
from ..security import create_access_token, dummy_verify, token_expiry, verify_password


class AuthService:
    # Unknown email and wrong password both cost one bcrypt check and return None

    def __init__(self, db: Session, cfg: Settings):
        self.db = db
        self.cfg = cfg

    def _find_user(self, email: str) -> Optional[models.User]:
        return self.db.execute(
            select(models.User).where(models.User.email == email)
        ).scalar_one_or_none()

    def authenticate(self, email: str, password: str) -> Optional[schemas.LoginResponse]:
        user = self._find_user(email)
        if user is None:
            dummy_verify()
            return None
        if not verify_password(password, user.password_hash):
            return None

        # JWT timestamps are whole seconds; keep the echoed expiry identical to "exp"
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        expires_at = token_expiry(self.cfg, issued_at)
        token = create_access_token(
            user.id,
            self.cfg,
            email=user.email,
            name=user.full_name,
            expires_at=expires_at,
            issued_at=issued_at,
        )
        return schemas.LoginResponse(
            token=token,
            email=user.email,
            full_name=user.full_name,
            expires_at=expires_at,
        )
