import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from preppy import main
from preppy.services.status import status_board
from preppy.storage import db as db_module


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(autouse=True)
def _reset_status_board():
    status_board.reset()
    yield
    status_board.reset()


@pytest.fixture(name="client")
def client_fixture(monkeypatch, engine):
    monkeypatch.setattr(db_module, "engine", engine)

    client = TestClient(main.app)
    return client
