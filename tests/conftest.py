import os

# keep the module-level app in taskzen.main off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from taskzen.main import create_app
from taskzen.store import DocumentStore


@pytest.fixture
def store(tmp_path):
    s = DocumentStore.from_url(f"sqlite:///{tmp_path / 'taskzen.db'}")
    yield s
    s.dispose()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
