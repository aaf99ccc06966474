import pytest
from fastapi.testclient import TestClient

from observer.database import close_db, init_db
from observer.main import app


@pytest.fixture
def database(tmp_path):
    """Fresh SQLite database per test."""
    init_db(f"sqlite:///{tmp_path / 'observer.db'}")
    yield
    close_db()


@pytest.fixture
def client(database):
    # Not used as a context manager so the startup hook does not re-read the environment.
    return TestClient(app)
