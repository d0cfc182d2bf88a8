import pytest

from rest_framework.test import APIClient

from modules.core.store import reset_store_handles


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _fresh_store_handles():
    """Each test starts without a cached store handle."""
    reset_store_handles()
    yield
    reset_store_handles()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def chair_payload():
    return {
        "name": "Chair",
        "price": 49.99,
        "description": "Oak chair",
        "mediaUrl": "http://x/chair.png",
    }
