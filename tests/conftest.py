import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def action_params():
    return {
        "value": "100",
        "privateKey": "test-key",
        "use_full_data_pipeline": "no",
    }
