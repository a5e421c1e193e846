# todolist/schemas.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
PASSWORD_MIN_LENGTH = 6

class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)

class TaskUpdate(BaseModel):
    # Full replacement: title/description are overwritten on every update
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    is_completed: bool = False

class TaskOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    is_completed: bool
    created_at: datetime
    completed_at: Optional[datetime] = None

    # Accept attributes from SQLAlchemy models
    model_config = ConfigDict(from_attributes=True)

class TaskStatistics(BaseModel):
    total: int
    completed: int
    pending: int

class UserCreate(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    full_name: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)  # triggers 422 if too short

class UserOut(BaseModel):
    id: int
    email: str
    full_name: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)

class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    email: str
    full_name: str
    expires_at: datetime
