# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.client.api import TodoApiClient
from app.db.models.todos import TodoStatus
from app.db.session import get_session, init_db
from app.features.todos.schemas import TodoOut
from app.main import app

from .fakes import FakeTodoApi


@pytest.fixture()
def engine():
    """SQLite en mémoire, partagé entre threads (StaticPool) pour le TestClient."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def api_client(client) -> TodoApiClient:
    """Vrai client typé, branché sur l'app via le transport du TestClient."""
    return TodoApiClient(TestClient(app, base_url="http://testserver/api/v1"))


@pytest.fixture()
def sample_todos() -> list[TodoOut]:
    return [
        TodoOut(id=1, body="Buy milk", status=TodoStatus.pending),
        TodoOut(id=2, body="Pay rent", status=TodoStatus.completed),
    ]


@pytest.fixture()
def fake_api(sample_todos) -> FakeTodoApi:
    return FakeTodoApi(sample_todos)
