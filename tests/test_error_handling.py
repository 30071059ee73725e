import pytest
from fastapi.testclient import TestClient
from limits import parse
from sqlalchemy.exc import OperationalError, TimeoutError as PoolTimeoutError

from ideabank.config import AUTH_RATE_LIMIT
from ideabank.limiter import limiter
from ideabank.main import app
from ideabank.services import idea_service


@pytest.fixture
def rate_limited(monkeypatch):
    monkeypatch.setattr(limiter, "enabled", True)
    limiter.reset()
    yield
    limiter.reset()


def test_login_is_rate_limited(client, rate_limited):
    allowed = parse(AUTH_RATE_LIMIT).amount
    codes = [
        client.post("/auth/login", json={"email": "ana@x.com", "password": "x"}).status_code
        for _ in range(allowed + 2)
    ]
    assert codes[:allowed] == [401] * allowed
    assert codes[allowed:] == [429, 429]

    res = client.post("/auth/login", json={"email": "ana@x.com", "password": "x"})
    assert res.json() == {"error": "Muitas requisições. Tente novamente em instantes."}


def test_database_error_is_generic_500(client, monkeypatch):
    async def broken(db):
        raise OperationalError("SELECT * FROM ideias", {}, Exception("connection lost"))

    monkeypatch.setattr(idea_service, "list_all", broken)
    res = client.get("/ideias")
    assert res.status_code == 500
    assert res.json() == {"error": "Erro interno do servidor"}


def test_pool_exhaustion_is_503(client, monkeypatch):
    async def exhausted(db):
        raise PoolTimeoutError("QueuePool limit of size 5 overflow 10 reached")

    monkeypatch.setattr(idea_service, "list_all", exhausted)
    res = client.get("/ideias")
    assert res.status_code == 503
    assert res.json() == {"error": "Servidor ocupado"}


def test_unexpected_error_still_answers_json(client, monkeypatch):
    async def misconfigured(db):
        raise RuntimeError("SECRET_KEY is not configured in the backend environment")

    monkeypatch.setattr(idea_service, "list_all", misconfigured)
    # the server error middleware re-raises after responding
    with TestClient(app, raise_server_exceptions=False) as other:
        res = other.get("/ideias")
    assert res.status_code == 500
    assert res.json() == {"error": "Erro interno do servidor"}
