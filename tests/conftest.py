import os
import tempfile

# Configuration is read at import time, so the environment goes first
_DB_DIR = tempfile.mkdtemp(prefix="ideabank-tests-")
_DB_PATH = os.path.join(_DB_DIR, "test.db")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-0123456789"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["APP_TIMEZONE"] = "America/Sao_Paulo"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from ideabank.client.api import ApiClient
from ideabank.main import app


@pytest.fixture
def client():
    if os.path.exists(_DB_PATH):
        os.remove(_DB_PATH)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api(client):
    return ApiClient(http=client)


@pytest.fixture
def registered_user(client):
    payload = {"nome": "Ana", "email": "ana@x.com", "password": "secret"}
    res = client.post("/auth/register", json=payload)
    assert res.status_code == 201
    return {**payload, "id": res.json()["id"]}


@pytest.fixture
def auth_headers(client, registered_user):
    res = client.post(
        "/auth/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    return {"Authorization": f"Bearer {res.json()['token']}"}
