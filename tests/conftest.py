import os
import random

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pingpong.database import Base, get_db, make_engine
from pingpong.main import app
from pingpong.services import player_service
from pingpong.store import TournamentStore


@pytest.fixture
def engine():
    engine = make_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def store(session_factory):
    db = session_factory()
    yield TournamentStore(db)
    db.close()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_players(store):
    def _make(count, prefix="Player"):
        return [
            player_service.create(store, f"{prefix} {i}", f"p{i}@office.test")
            for i in range(1, count + 1)
        ]
    return _make


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
