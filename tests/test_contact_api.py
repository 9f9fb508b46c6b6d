"""
Tests for the contact form endpoint
"""
import smtplib

import pytest

from conftest import RecordingTransport

VALID = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@x.com",
    "subject": "Hi",
    "message": "Hello",
}


def test_valid_submission_is_sent_once(client, use_transport):
    transport = use_transport(RecordingTransport())

    response = client.post("/api/contact", json=VALID)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Message sent successfully! We'll get back to you soon.",
    }
    assert len(transport.sent) == 1
    sent = transport.sent[0]
    assert sent["subject"] == "New Contact Message: Hi"
    assert sent["to"] == "owner@greenfarm.test"
    for text in ("Ada Lovelace", "ada@x.com", "Hi", "Hello"):
        assert text in sent["html"]


@pytest.mark.parametrize("field", list(VALID))
@pytest.mark.parametrize("blank", ["", "   ", "\n\t"])
def test_blank_field_is_rejected_without_sending(client, use_transport, field, blank):
    transport = use_transport(RecordingTransport())

    response = client.post("/api/contact", json={**VALID, field: blank})

    assert response.status_code == 400
    assert response.json() == {"error": "All fields are required."}
    assert transport.sent == []


def test_missing_and_null_fields_are_rejected(client, use_transport):
    transport = use_transport(RecordingTransport())

    missing = {k: v for k, v in VALID.items() if k != "subject"}
    assert client.post("/api/contact", json=missing).status_code == 400
    assert client.post("/api/contact", json={**VALID, "message": None}).status_code == 400
    assert transport.sent == []


def test_malformed_body_is_rejected(client, use_transport):
    transport = use_transport(RecordingTransport())

    response = client.post(
        "/api/contact", content=b"not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "All fields are required."}
    assert transport.sent == []


def test_email_format_is_not_checked(client, use_transport):
    transport = use_transport(RecordingTransport())

    response = client.post("/api/contact", json={**VALID, "email": "not-an-email"})

    assert response.status_code == 200
    assert len(transport.sent) == 1


@pytest.mark.parametrize(
    "error",
    [
        smtplib.SMTPAuthenticationError(535, b"5.7.8 Username and Password not accepted"),
        ConnectionRefusedError("connection refused"),
        smtplib.SMTPDataError(550, b"Daily sending quota exceeded"),
    ],
)
def test_transport_failure_returns_generic_error(client, use_transport, error):
    transport = use_transport(RecordingTransport(error=error))

    response = client.post("/api/contact", json=VALID)

    assert response.status_code == 500
    body = response.json()
    assert body == {"error": "Something went wrong while sending the message."}
    assert len(transport.sent) == 1


def test_missing_mail_credentials_fail_the_request_only(client):
    from greenfarm.api.deps import get_contact_relay
    from greenfarm.core.config import Settings
    from greenfarm.core.mail_relay import ContactRelay
    from greenfarm.main import app

    app.dependency_overrides[get_contact_relay] = lambda: ContactRelay(
        Settings(email_user=None, email_pass=None, email_to=None)
    )

    response = client.post("/api/contact", json=VALID)

    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong while sending the message."}
    assert client.get("/api/health").status_code == 200
