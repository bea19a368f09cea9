import os

# Configuration is read on import, so the test environment has to be in place first
os.environ["DATABASE_URL"] = "sqlite://"
for name in ("PRODUCTION", "RUN_MIGRATIONS", "ADMIN_EMAIL", "ADMIN_PASSWORD", "CLOUDINARY_CLOUD_NAME"):
    os.environ.pop(name, None)

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from app.main import app
from app.database import engine, SessionLocal
from app.domain.model_base import Base
from app.domain.user.models import User, UserRole
from app.dependencies import get_db
from typing import Generator
import pytest
from .utils import create_test_user, auth_headers


@pytest.fixture
def session() -> Generator[Session, None, None]:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def client(session: Session) -> Generator[TestClient, None, None]:
    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()

@pytest.fixture
def create_user(session: Session) -> User:
    return create_test_user(session, name='Asha Citizen', email='asha@example.com')

@pytest.fixture
def create_other_user(session: Session) -> User:
    return create_test_user(session, name='Bharat Citizen', email='bharat@example.com')

@pytest.fixture
def create_admin(session: Session) -> User:
    return create_test_user(session, name='Chitra Admin', email='chitra@example.com', role=UserRole.ADMIN)

@pytest.fixture
def user_headers(create_user: User) -> dict:
    return auth_headers(create_user)

@pytest.fixture
def other_headers(create_other_user: User) -> dict:
    return auth_headers(create_other_user)

@pytest.fixture
def admin_headers(create_admin: User) -> dict:
    return auth_headers(create_admin)

@pytest.fixture
def authorized_client(client: TestClient, user_headers: dict) -> TestClient:
    client.headers.update(user_headers)

    return client
