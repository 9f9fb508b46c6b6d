"""
Contact form endpoint.

Validates the five contact fields and relays them to the site inbox.
Domain errors propagate to the handlers registered in main.py.
"""

from fastapi import APIRouter, Depends, Request, status
import json
import logging

from greenfarm.api.deps import get_contact_relay
from greenfarm.core.exceptions import RelayError, TransportError
from greenfarm.core.mail_relay import ContactRelay
from greenfarm.models.contact import ContactSubmission

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/contact", status_code=status.HTTP_200_OK)
async def submit_contact(request: Request, relay: ContactRelay = Depends(get_contact_relay)):
    """
    Relay a contact form submission by email.

    Returns:
        dict: {"success": true, "message": ...} once the mail transport accepted the message
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        # unreadable body is treated as an empty form
        logger.warning("Contact request body is not valid JSON")
        payload = None

    submission = ContactSubmission.from_payload(payload)

    try:
        response = await relay.relay(submission)
    except RelayError:
        raise
    except Exception as e:
        logger.error(f"❌ Unexpected contact relay failure: {str(e)}")
        raise TransportError() from e

    return response.to_dict()
