"""
Newsletter subscription relay.

Forwards one subscribe request per call to the content backend, which owns
the subscriber list (dedup, storage, unsubscribe).
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
import json
import logging

from greenfarm.api.deps import get_backend_client
from greenfarm.core.backend_client import BackendClient
from greenfarm.models.newsletter import SubscriptionRequest

router = APIRouter()
logger = logging.getLogger(__name__)

EMAIL_REQUIRED_MESSAGE = "Email is required."


@router.post("/newsletter/subscribe", status_code=status.HTTP_200_OK)
async def subscribe(request: Request, backend: BackendClient = Depends(get_backend_client)):
    """
    Subscribe an email address.

    Returns:
        dict: {"message": ...} from the backend, or its default thank-you text
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        # unreadable body is treated as an empty form
        logger.warning("Newsletter request body is not valid JSON")
        payload = None

    subscription = SubscriptionRequest.from_payload(payload)
    if not subscription.email.strip():
        return JSONResponse({"error": EMAIL_REQUIRED_MESSAGE}, status_code=status.HTTP_400_BAD_REQUEST)

    outcome = await backend.subscribe(subscription.email)
    return {"message": outcome.message}
