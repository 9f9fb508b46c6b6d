"""
Domain errors raised by the relays.

Every error carries the HTTP status and the short message that is safe to
show to the visitor. Handlers in main.py render them as {"error": ...}.
"""

from typing import List, Optional


class RelayError(Exception):
    status_code = 500
    default_message = "Something went wrong."

    def __init__(self, public_message: Optional[str] = None, status_code: Optional[int] = None):
        self.public_message = public_message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.public_message)

    def to_response(self) -> dict:
        return {"error": self.public_message}


class ContactValidationError(RelayError):
    """A required contact field is empty. No outbound call was made."""

    status_code = 400
    default_message = "All fields are required."

    def __init__(self, missing_fields: Optional[List[str]] = None):
        super().__init__()
        self.missing_fields = list(missing_fields or [])


class TransportError(RelayError):
    """An outbound send or fetch failed."""

    status_code = 500
    default_message = "Something went wrong while sending the message."


class ConflictError(RelayError):
    """The subscription service reported a duplicate."""

    status_code = 409
    default_message = "You are already subscribed."


class BlogFetchError(TransportError):
    """The blog list could not be loaded. Carries the endpoint for display."""

    status_code = 502
    default_message = "An unknown error occurred"

    def __init__(self, public_message: Optional[str] = None, endpoint: Optional[str] = None):
        super().__init__(public_message)
        self.endpoint = endpoint

    def to_response(self) -> dict:
        return {"error": self.public_message, "endpoint": self.endpoint}
