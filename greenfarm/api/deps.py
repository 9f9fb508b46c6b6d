"""
FastAPI dependencies that build the relays from settings.

Tests swap these out through app.dependency_overrides.
"""

from fastapi import Depends, Request

from greenfarm.core.backend_client import BackendClient
from greenfarm.core.config import Settings, get_settings
from greenfarm.core.mail_relay import ContactRelay, SmtpMailTransport


def get_contact_relay(settings: Settings = Depends(get_settings)) -> ContactRelay:
    return ContactRelay(settings, SmtpMailTransport(settings))


def get_backend_client(request: Request, settings: Settings = Depends(get_settings)) -> BackendClient:
    # shared client is created in main's lifespan; None falls back to one client per call
    http_client = getattr(request.app.state, "http_client", None)
    return BackendClient(settings.api_base_url, http_client=http_client, timeout=settings.http_timeout)
