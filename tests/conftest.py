import os

# Pin the engine to in-memory SQLite before casebook.db.database is imported
os.environ.setdefault("CASEBOOK_TEST_DB", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient

import casebook.db.database as db_module
from casebook.db import models
from casebook.api.main import app

ADMIN_EMAIL = "admin@example.com"
INVESTIGATOR_EMAIL = "investigator@example.com"


@pytest.fixture(autouse=True)
def _role_env(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAILS", ADMIN_EMAIL)
    monkeypatch.setenv("INVESTIGATOR_EMAILS", INVESTIGATOR_EMAIL)
    monkeypatch.delenv("DEFAULT_USER_ROLE", raising=False)
    monkeypatch.delenv("DEV_MODE", raising=False)
    monkeypatch.delenv("CASE_NUMBER_MAX_ATTEMPTS", raising=False)
    yield


# Fresh schema per test; StaticPool keeps the in-memory database alive
@pytest.fixture(autouse=True)
def db_session():
    models.Base.metadata.drop_all(bind=db_module.engine)
    models.Base.metadata.create_all(bind=db_module.engine)
    session = db_module.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client():
    return TestClient(app)
