# tests/conftest.py
import os

os.environ.setdefault("POSTGRES_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cpu_listings import crud
from cpu_listings.db import Base, get_db
from cpu_listings.main import app


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def add_listing(db):
    def _add(name, supplier, price, shipping_cost=0, url="https://shop.example/cpu"):
        cpu_model = crud.get_or_create_cpu_model(db, name)
        sup = crud.get_or_create_supplier(db, supplier)
        return crud.create_listing(db, cpu_model.id, sup.id, price, shipping_cost, url)
    return _add


@pytest.fixture
def scenario(add_listing):
    add_listing("CPU-A", "S1", 150, 1000, "https://s1.example/cpu-a")
    add_listing("CPU-B", "S2", 50, 500, "https://s2.example/cpu-b")


@pytest.fixture
def client_for():
    """Build a TestClient whose get_db yields the given session."""
    def _client(session):
        def _override():
            yield session
        app.dependency_overrides[get_db] = _override
        return TestClient(app)
    yield _client
    app.dependency_overrides.clear()


@pytest.fixture
def client(db, client_for):
    return client_for(db)


class _Result:
    def __init__(self, rows):
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return self._rows


class StubSession:
    """Stands in for a Session: returns canned rows or raises on execute."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error

    def execute(self, stmt):
        if self.error is not None:
            raise self.error
        return _Result(self.rows)


@pytest.fixture
def stub_session():
    return StubSession
