import pytest
from fastapi.testclient import TestClient #gives you a fake http client that can call your FastAPI routes without running a real server.

from classgrid.core.config import get_settings
from classgrid.main import app
from classgrid.schemas.assignment import Assignment


@pytest.fixture() #test client
def client():
    get_settings.cache_clear() #settings are cached; tests that touch env vars must not leak into each other.
    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture()
def make_assignment():
    counter = {"value": 0}

    def _make(**fields) -> Assignment:
        counter["value"] += 1
        data = {"id": f"as-{counter['value']}", "day": "Monday", "timeRange": "10:00 AM - 11:00 AM"}
        data.update(fields)
        return Assignment.model_validate(data)

    return _make
