"""
Newsletter subscription widget logic.

One flow object backs every subscribe form on the site. The page layer
renders from the flow's state and passes a callback to be told when that
state changes.

Part of the public page-layer API: page code imports it directly, the
server routes do not.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from greenfarm.core.exceptions import ConflictError, TransportError
from greenfarm.models.newsletter import SubscriptionOutcome, SubscriptionStatus

logger = logging.getLogger(__name__)

Subscriber = Callable[[str], Awaitable[SubscriptionOutcome]]
Listener = Callable[["SubscriptionFlow"], None]


class SubscriptionFlow:
    """
    Args:
        subscriber: Coroutine function issuing the outbound request, e.g. BackendClient.subscribe
        on_change: Optional callbacks invoked after every state change
    """

    def __init__(self, subscriber: Subscriber, on_change: Optional[List[Listener]] = None):
        self.subscriber = subscriber
        self.listeners = list(on_change or [])
        self.email = ""
        self.message: Optional[str] = None
        self.status: Optional[SubscriptionStatus] = None
        self.is_submitting = False

    @property
    def can_submit(self) -> bool:
        return bool(self.email.strip()) and not self.is_submitting

    def subscribe_listener(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def _notify(self) -> None:
        for listener in self.listeners:
            listener(self)

    def set_email(self, value: str) -> None:
        self.email = value
        self._notify()

    async def submit(self) -> Optional[SubscriptionOutcome]:
        """
        Send the current email once.

        Returns the outcome, or None when nothing was sent (empty email or a
        submission already in flight).
        """
        if not self.email.strip():
            return None
        if self.is_submitting:
            logger.debug("Subscription already in flight, ignoring repeated submit")
            return None

        self.is_submitting = True
        self.message = None
        self.status = None
        self._notify()

        try:
            outcome = await self.subscriber(self.email)
            self.message = outcome.message
            self.status = SubscriptionStatus.SUCCESS
            self.email = ""
        except (ConflictError, TransportError) as e:
            outcome = SubscriptionOutcome(status=SubscriptionStatus.ERROR, message=e.public_message)
            self.message = outcome.message
            self.status = SubscriptionStatus.ERROR
        finally:
            self.is_submitting = False

        self._notify()
        return outcome
