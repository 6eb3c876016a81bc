import pytest
from fastapi.testclient import TestClient

from cookbook.main import app
from cookbook.limiter import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture
def client():
    return TestClient(app)
