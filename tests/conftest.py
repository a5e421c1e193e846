# tests/conftest.py
import os
from contextlib import asynccontextmanager

# Must be set before the app (and its engine/settings) is imported
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-chars!")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todolist.main import app
from todolist.config import Settings
from todolist.database import Base, get_db
from todolist import models
from todolist.security import hash_password
from todolist.services.auth import AuthService
from todolist.services.tasks import TaskService

# In-memory SQLite shared across threads
engine = create_engine(
    "sqlite+pysqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Disable lifespan so app.main doesn't run create_all/seed on the app engine
@asynccontextmanager
async def _noop_lifespan(_app):
    yield
app.router.lifespan_context = _noop_lifespan

# Override get_db to use the test session
def _override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = _override_get_db

# ---------- Fixtures ----------

@pytest.fixture(autouse=True)
def _fresh_schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture()
def client():
    return TestClient(app)

@pytest.fixture()
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture()
def cfg():
    return Settings(
        JWT_SECRET_KEY="service-secret-key-with-at-least-32-chars",
        JWT_ISSUER="TodoListAPI",
        JWT_AUDIENCE="TodoListClient",
        JWT_EXPIRATION_MINUTES=60,
    )

@pytest.fixture()
def make_user(db_session):
    def _make(email: str, password: str = "Password123", full_name: str = "Test User"):
        user = models.User(
            email=email,
            password_hash=hash_password(password),
            full_name=full_name,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make

@pytest.fixture()
def auth_service(db_session, cfg):
    return AuthService(db_session, cfg)

@pytest.fixture()
def task_service(db_session):
    return TaskService(db_session)

@pytest.fixture()
def create_user_and_token(client):
    def _make(email: str, password: str = "StrongPass1"):
        # Register
        r = client.post("/api/auth/register", json={
            "email": email,
            "full_name": "Test User",
            "password": password,
        })
        assert r.status_code in (201, 400), r.text  # 400 if email exists

        # Login (JSON body)
        r = client.post("/api/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.text
        token = r.json()["token"]
        return {"Authorization": f"Bearer {token}"}
    return _make

@pytest.fixture()
def owner_headers(create_user_and_token):
    return create_user_and_token("owner@example.com")

@pytest.fixture()
def other_headers(create_user_and_token):
    return create_user_and_token("other@example.com")

@pytest.fixture()
def create_task(client, owner_headers):
    def _make(title="Buy milk", desc="2L milk", headers=None):
        h = headers or owner_headers
        r = client.post("/api/tasks", json={
            "title": title,
            "description": desc,
        }, headers=h)
        assert r.status_code == 201, r.text
        return r.json()
    return _make
