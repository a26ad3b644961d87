# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from reqlab.main import app
from reqlab.deps import get_transport
from reqlab.models import TransportResponse


class FakeTransport:
    """Records every send() and answers with a canned response."""
    def __init__(self, response=None, error=None):
        self.response = response or TransportResponse(status="200 OK", headers={}, body="{}")
        self.error = error
        self.calls = []

    def send(self, url, method, headers, body):
        self.calls.append({"url": url, "method": method, "headers": headers, "body": body})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def fake_transport():
    return FakeTransport()


# --- Override the transport dependency so nothing leaves the process ---
@pytest.fixture(autouse=True)
def override_transport(fake_transport):
    app.dependency_overrides[get_transport] = lambda: fake_transport
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
