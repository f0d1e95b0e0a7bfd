"""Fixtures for HTTP-level tests."""
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_order_repository, get_order_service
from api.main import app
from core.application.services.order_service import OrderApplicationService


@pytest.fixture
def client(repository):
    """TestClient wired to the per-test repository."""
    service = OrderApplicationService(repository)
    app.dependency_overrides[get_order_repository] = lambda: repository
    app.dependency_overrides[get_order_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
