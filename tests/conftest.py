"""
Pytest configuration and fixtures
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from greenfarm.api.deps import get_backend_client, get_contact_relay
from greenfarm.core.backend_client import BackendClient
from greenfarm.core.config import Settings
from greenfarm.core.mail_relay import ContactRelay
from greenfarm.main import app

BACKEND_URL = "https://backend.test"


class RecordingTransport:
    """Mail transport that records sends instead of delivering them"""

    def __init__(self, error=None):
        self.sent = []
        self.error = error

    def send(self, html, subject, to):
        self.sent.append({"html": html, "subject": subject, "to": to})
        if self.error is not None:
            raise self.error


@pytest.fixture
def settings():
    return Settings(
        email_user="site@greenfarm.test",
        email_pass="app-password",
        email_to="owner@greenfarm.test",
        api_base_url=BACKEND_URL,
    )


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_transport(settings):
    """Route POST /api/contact through the given transport"""
    def _use(transport):
        app.dependency_overrides[get_contact_relay] = lambda: ContactRelay(settings, transport)
        return transport
    return _use


@pytest.fixture
def use_backend():
    """Route backend calls to a handler; returns the list of requests seen"""
    def _use(handler):
        seen = []

        def recording(request):
            seen.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording))
        app.dependency_overrides[get_backend_client] = lambda: BackendClient(BACKEND_URL, http_client=http_client)
        return seen
    return _use
