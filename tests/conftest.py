import pytest
from fastapi.testclient import TestClient

from backend.app.core.config import Settings
from backend.app.main import create_app


@pytest.fixture
def storage_root(tmp_path):
    return tmp_path / "storage"


@pytest.fixture
def app_settings(storage_root):
    return Settings(STORAGE_DIR=str(storage_root), BASE_URI="http://localhost")


@pytest.fixture
def client(app_settings):
    with TestClient(create_app(app_settings)) as c:
        yield c


@pytest.fixture
def fixed_id(monkeypatch):
    """Make the server hand out a known job ID."""
    monkeypatch.setattr("backend.app.services.storage.generate_id", lambda: "AbCd1234")
    return "AbCd1234"
