# tests/conftest.py
import os

# Configure before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["SEED_ADMIN"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from taskboard import models  # noqa: E402,F401
from taskboard.database import Base, SessionLocal, engine  # noqa: E402
from taskboard.main import app  # noqa: E402
from taskboard.models.user import User, Role  # noqa: E402
from taskboard.utils.security import hash_password, create_access_token  # noqa: E402


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    return TestClient(app)


@pytest.fixture()
def make_user(db):
    def _make_user(email: str, role: Role = Role.MEMBER, password: str = "secret123", full_name: str = None) -> User:
        user = User(
            full_name=full_name or email.split("@")[0].title(),
            email=email,
            hashed_password=hash_password(password),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


def auth_headers(user: User) -> dict:
    token, _ = create_access_token(data={"sub": user.email, "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin(make_user):
    return make_user("admin@example.com", role=Role.ADMIN)


@pytest.fixture()
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture()
def member(make_user):
    return make_user("member@example.com")


@pytest.fixture()
def member_headers(member):
    return auth_headers(member)
