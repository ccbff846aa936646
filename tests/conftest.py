"""Pytest bootstrap: settings, in-memory database and API client fixtures."""

import os
import sys
from pathlib import Path

# Ensure project root is on sys.path so `import skillboard` works without install
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

# Settings are read at import time; give them test values first.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from skillboard.database import Base, get_db
from skillboard.models.user import User


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def api_client(db_session):
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from skillboard.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


def create_user(
    db,
    *,
    name: str,
    email: str = None,
    teach=None,
    learn=None,
    is_active: bool = True,
) -> User:
    user = User(
        name=name,
        email=email or f"{name.lower().replace(' ', '.')}@skills.edu",
        password_hash="hash",
        skills_to_teach=list(teach or []),
        skills_to_learn=list(learn or []),
        is_active=is_active,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    from skillboard.utils.security import create_user_token

    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def make_user(db_session):
    def _make(name: str, **kwargs) -> User:
        return create_user(db_session, name=name, **kwargs)

    return _make


@pytest.fixture(name="auth_headers")
def auth_headers_fixture():
    return auth_headers
