import pytest
from fastapi.testclient import TestClient

from backend.api import app
from backend.services import ResumeCheckService, get_check_service
from src.config import get_settings
from src.history import HistoryStore


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the default database at a temp file and reload settings per test."""
    monkeypatch.setenv("RESUME_CHECKER_DATABASE_URL", f"sqlite:///{tmp_path / 'checks.db'}")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store(tmp_path):
    return HistoryStore(database_url=f"sqlite:///{tmp_path / 'history.db'}")


@pytest.fixture
def service(store):
    return ResumeCheckService(store=store)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_check_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
