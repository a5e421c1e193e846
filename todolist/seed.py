# todolist/seed.py
import logging
from datetime import timedelta

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from . import models
from .models import utcnow
from .security import hash_password

logger = logging.getLogger(__name__)

DEMO_EMAIL = "admin@todolist.com"
DEMO_PASSWORD = "Admin123"
DEMO_NAME = "Administrador"


def seed_demo_data(db: Session) -> bool:
    """Insert a demo user with sample tasks into an empty database.

    Returns False without touching anything if any user already exists.
    """
    if db.scalar(select(func.count()).select_from(models.User)):
        return False

    now = utcnow()
    user = models.User(
        email=DEMO_EMAIL,
        password_hash=hash_password(DEMO_PASSWORD),
        full_name=DEMO_NAME,
        created_at=now,
    )
    db.add(user)
    db.flush()

    db.add_all([
        models.Task(
            title="Finish the API backend",
            description="Implement every endpoint",
            is_completed=True,
            created_at=now - timedelta(days=2),
            completed_at=now - timedelta(days=1),
            user_id=user.id,
        ),
        models.Task(
            title="Build the Angular frontend",
            description="Create components and services",
            is_completed=False,
            created_at=now - timedelta(days=1),
            user_id=user.id,
        ),
        models.Task(
            title="Write unit tests",
            description="Keep coverage up",
            is_completed=False,
            created_at=now,
            user_id=user.id,
        ),
    ])
    db.commit()
    logger.info("Seeded demo user %s with sample tasks", DEMO_EMAIL)
    return True
