import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from jose import JWTError

from ..config import Settings, settings
from ..database import get_db
from .. import models, schemas
from ..security import hash_password, decode_token
from ..services.auth import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

# Swagger "Authorize" support; tokens come from POST /api/auth/login
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", scheme_name="Bearer")


def get_settings() -> Settings:
    return settings()


def get_auth_service(
    db: Session = Depends(get_db),
    cfg: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, cfg)


@router.post("/register", response_model=schemas.UserOut, status_code=status.HTTP_201_CREATED,
             summary="Register a new user")
def register(payload: schemas.UserCreate, db: Session = Depends(get_db)):
    user = models.User(
        email=payload.email,
        full_name=payload.full_name,
        password_hash=hash_password(payload.password),  # hash before storing
    )
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Email already registered")
    logger.info("User registered: %s", user.id)
    return user


@router.post("/login", response_model=schemas.LoginResponse, summary="Login and get JWT")
def login(payload: schemas.LoginRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.authenticate(payload.email, payload.password)
    if result is None:
        logger.warning("Failed login attempt for email: %s", payload.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    logger.info("Successful login for user: %s", payload.email)
    return result


def get_current_user_id(
    token: str = Depends(oauth2_scheme),
    cfg: Settings = Depends(get_settings),
) -> int:
    cred_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(token, cfg)
        sub = payload.get("sub")
        user_id = int(sub) if sub is not None else None
    except (JWTError, ValueError):
        raise cred_exc

    if not user_id:
        raise cred_exc
    return user_id


def get_current_user(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> models.User:
    user = db.get(models.User, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


@router.get(
    "/me",
    response_model=schemas.UserOut,
    summary="Get current user (requires Bearer token)",
)
def me(current_user: models.User = Depends(get_current_user)):
    return current_user
