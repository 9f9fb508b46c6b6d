"""
Contact form widget logic.

Holds the five contact fields and posts them once per submit. Fields are
cleared only after the server accepted the message; on failure they are kept
and the server's error is shown.

Part of the public page-layer API: page code imports it directly, the
server routes do not.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from greenfarm.core.exceptions import RelayError
from greenfarm.models.contact import REQUIRED_FIELDS, ContactResponse

logger = logging.getLogger(__name__)

FAILED_MESSAGE = "Failed to send message."

Poster = Callable[[Dict[str, str]], Awaitable[ContactResponse]]
Listener = Callable[["ContactFormFlow"], None]


def http_contact_poster(http_client: httpx.AsyncClient, url: str = "/api/contact") -> Poster:
    """
    Build a poster that sends the form to POST /api/contact.

    Non-2xx answers raise RelayError carrying the server's "error" text.
    """
    async def post(fields: Dict[str, str]) -> ContactResponse:
        try:
            response = await http_client.post(url, json=fields)
            data: Any = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Contact form post failed: {str(e)}")
            raise RelayError(FAILED_MESSAGE) from e

        if not isinstance(data, dict):
            data = {}
        if not response.is_success:
            raise RelayError(data.get("error") or FAILED_MESSAGE, status_code=response.status_code)
        return ContactResponse(success=True, message=data.get("message") or "")

    return post


class ContactFormFlow:
    """
    Args:
        poster: Coroutine function sending the fields, e.g. http_contact_poster(client)
        on_change: Optional callbacks invoked after every state change
    """

    def __init__(self, poster: Poster, on_change: Optional[List[Listener]] = None):
        self.poster = poster
        self.listeners = list(on_change or [])
        self.fields: Dict[str, str] = {name: "" for name in REQUIRED_FIELDS}
        self.success: Optional[bool] = None
        self.message = ""
        self.is_submitting = False

    @property
    def can_submit(self) -> bool:
        return not self.is_submitting

    def subscribe_listener(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def _notify(self) -> None:
        for listener in self.listeners:
            listener(self)

    def set_field(self, name: str, value: str) -> None:
        if name not in self.fields:
            raise KeyError(f"Unknown contact field: {name}")
        self.fields[name] = value
        self._notify()

    async def submit(self) -> Optional[bool]:
        """
        Post the current fields once.

        Returns True on delivery, False on failure, None when ignored because
        a submission is already in flight.
        """
        if self.is_submitting:
            logger.debug("Contact form already submitting, ignoring repeated submit")
            return None

        self.is_submitting = True
        self.success = None
        self.message = ""
        self._notify()

        try:
            response = await self.poster(dict(self.fields))
            self.success = True
            self.message = response.message
            self.fields = {name: "" for name in REQUIRED_FIELDS}
        except RelayError as e:
            self.success = False
            self.message = e.public_message or FAILED_MESSAGE
        finally:
            self.is_submitting = False

        self._notify()
        return self.success
