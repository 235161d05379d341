import os
import sys
from datetime import datetime, timedelta

import pytest

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from learning_portal.config import settings
from learning_portal.domain.entities import Session
from learning_portal.infrastructure.db import make_engine
from learning_portal.infrastructure.models import Base, CourseORM
from learning_portal.infrastructure.rate_limit import limiter
from learning_portal.infrastructure.repositories import SqlBackend, get_backend
from learning_portal.main import app

PASSWORD = "password123"


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Настройка тестового окружения"""
    # Отключаем кэш и rate limiting для тестов
    monkeypatch.setattr(settings, "CACHE_ENABLED", False)
    monkeypatch.setattr(limiter, "enabled", False)


@pytest.fixture
def db_factory(tmp_path):
    """Отдельная SQLite БД на каждый тест"""
    engine = make_engine(f"sqlite:///{tmp_path / 'portal.db'}")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    engine.dispose()


@pytest.fixture
def sql_backend(db_factory):
    return SqlBackend(db_factory)


@pytest.fixture
def client(sql_backend):
    """Клиент, работающий с тестовой БД"""
    app.dependency_overrides[get_backend] = lambda: sql_backend
    yield TestClient(app)
    app.dependency_overrides.pop(get_backend, None)


@pytest.fixture
def mock_client():
    """Клиент + мок бэкенда; сессия уже есть"""
    from unittest.mock import MagicMock
    from learning_portal.application.backend import IBackend

    backend = MagicMock(spec=IBackend)
    backend.get_session.return_value = make_session()
    app.dependency_overrides[get_backend] = lambda: backend
    yield TestClient(app, cookies={settings.SESSION_COOKIE_NAME: "token"}), backend
    app.dependency_overrides.pop(get_backend, None)


def make_session(user_id="user-1", email="jane@example.com") -> Session:
    return Session(
        user_id=user_id,
        email=email,
        session_id="sid-1",
        access_token="token",
        expires_at=datetime.now() + timedelta(hours=1),
    )


def add_course(db_factory, slug, name, created_at=None, **fields) -> str:
    db = db_factory()
    try:
        row = CourseORM(slug=slug, name=name, **fields)
        if created_at is not None:
            row.created_at = created_at
        db.add(row)
        db.commit()
        return row.id
    finally:
        db.close()


def sign_up(client, email="jane@example.com", full_name="Jane Doe", password=PASSWORD):
    response = client.post(
        "/auth/sign-up",
        json={"email": email, "password": password, "full_name": full_name},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return response
