from __future__ import annotations

import base64
import os
import tempfile
import uuid
from pathlib import Path
from typing import Callable, Dict

# Served under /uploads by the app; must be set before the settings module loads
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="taskini-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from app.config.settings import settings
from app.database import Base, build_engine, get_db
from app.models import User, UserRole
from app.services.file_storage import LocalFileStorage, get_file_storage
from app.utils.security import create_access_token, hash_password
from main import app

PASSWORD = "password123"

# Smallest valid images of each accepted type
PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)
JPEG = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"
GIF = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00\x00\x00\x00"
    b",\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
)


@pytest.fixture()
def engine(tmp_path: Path):
    engine = build_engine(f"sqlite:///{tmp_path / 'taskini.sqlite3'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory) -> Session:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def storage() -> LocalFileStorage:
    # A folder per test inside the served upload directory
    return LocalFileStorage(settings.UPLOADS["upload_dir"], folder=f"profiles-{uuid.uuid4().hex}")


@pytest.fixture()
def client(session_factory, storage) -> TestClient:
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_file_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db: Session) -> Callable[..., User]:
    def _make(name: str, email: str, password: str = PASSWORD, role: str = UserRole.MEMBER.value) -> User:
        user = User(name=name, email=email, hashed_password=hash_password(password), role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture()
def alice(make_user) -> User:
    return make_user("Alice", "alice@example.com")


@pytest.fixture()
def bob(make_user) -> User:
    return make_user("Bob", "bob@example.com")


@pytest.fixture()
def carol(make_user) -> User:
    return make_user("Carol", "carol@example.com")


@pytest.fixture()
def admin(make_user) -> User:
    return make_user("Admin", "admin@example.com", role=UserRole.ADMIN.value)


def auth_headers(user: User) -> Dict[str, str]:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}
