import pytest
from fastapi.testclient import TestClient

from calcfrete.main import app
from calcfrete.services.freight_service import get_price_table


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def price_table():
    return get_price_table()


@pytest.fixture
def valid_freight_data():
    return {
        "distancia": 100,
        "tipoTransporte": "carro",
    }


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer"
    )
