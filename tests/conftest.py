"""
Shared fixtures: every test gets its own SQLite file database.
"""

import pytest
from fastapi.testclient import TestClient

from namebook.config import Settings
from namebook.database import create_db_engine
from namebook.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'names.db'}", ENV="test")


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings.DATABASE_URL)
    yield engine
    engine.dispose()


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


def list_names(client):
    """Page-load data, keyed by id."""
    response = client.get("/names")
    assert response.status_code == 200
    return {row["id"]: row for row in response.json()["names"]}
