# tests/conftest.py
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from database import SessionLocal, engine
from models import Base
from models.user import User


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    from core.security import PasswordHasher

    hasher = PasswordHasher()

    def _make(email="alice@mail.com", password="password1", name="Alice"):
        user = User(name=name, email=email, hashed_password=hasher.hash(password))
        db.add(user)
        db.commit()
        return user

    return _make


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client):
    def _register(email="a@x.com", password="password1", name="A"):
        res = client.post("/api/register", json={
            "name": name,
            "email": email,
            "password": password,
            "password_confirmation": password,
        })
        assert res.status_code == 201, res.json()
        return res.json()["data"]["token"]

    return _register


@pytest.fixture
def auth_headers(register):
    return {"Authorization": f"Bearer {register()}"}
