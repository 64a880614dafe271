import pytest
from fastapi.testclient import TestClient

from posts_api.http_handler import app


@pytest.fixture
def test_client(initialize_posts_table):
    with TestClient(app, raise_server_exceptions=True) as test_client:
        yield test_client


@pytest.fixture
def test_client_without_table(dynamodb_resource):
    with TestClient(app, raise_server_exceptions=True) as test_client:
        yield test_client
