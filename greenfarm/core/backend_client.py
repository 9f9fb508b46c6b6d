"""
HTTP client for the external GreenFarm content backend.

The backend owns blog posts and the newsletter subscriber list. This module
only forwards requests to it and maps its responses onto domain outcomes.
Every call is a single request: no caching, no dedup, no automatic retry.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

import httpx

from greenfarm.core.exceptions import BlogFetchError, ConflictError, TransportError
from greenfarm.models.blog import BlogEntry
from greenfarm.models.newsletter import SubscriptionOutcome, SubscriptionStatus

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_MESSAGE = "Thank you for subscribing!"
SUBSCRIBE_FAILED_MESSAGE = "Subscription failed. Please try again."
NETWORK_ERROR_MESSAGE = "Network error. Could not connect to the server."
NOT_CONFIGURED_MESSAGE = "Backend URL not configured"


class BackendClient:
    """
    Args:
        base_url: Root of the content backend, e.g. https://backend.example.com
        http_client: Shared httpx.AsyncClient; a short-lived one is opened per call if omitted
        timeout: Per-request timeout in seconds when no shared client is given
    """

    def __init__(
        self,
        base_url: Optional[str],
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.http_client = http_client
        self.timeout = timeout

    @property
    def blogs_url(self) -> Optional[str]:
        return f"{self.base_url}/api/blogs" if self.base_url else None

    @property
    def subscribe_url(self) -> Optional[str]:
        return f"{self.base_url}/api/newsletter/subscribe" if self.base_url else None

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self.http_client is not None:
            yield self.http_client
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client

    async def subscribe(self, email: str) -> SubscriptionOutcome:
        """
        Subscribe an email address to the newsletter.

        Returns:
            SubscriptionOutcome: success with the service's message

        Raises:
            ConflictError: the service answered 409 (already subscribed)
            TransportError: any other non-2xx answer or a network failure
        """
        url = self.subscribe_url
        if not url:
            logger.error("❌ Newsletter subscribe skipped - API_BASE_URL not configured")
            raise TransportError(NETWORK_ERROR_MESSAGE, status_code=502)

        try:
            async with self._client() as client:
                response = await client.post(url, json={"email": email})
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Subscription error: {str(e)}")
            raise TransportError(NETWORK_ERROR_MESSAGE, status_code=502) from e

        if not isinstance(data, dict):
            data = {}

        if response.is_success:
            logger.info("✅ Newsletter subscription accepted")
            return SubscriptionOutcome(
                status=SubscriptionStatus.SUCCESS,
                message=data.get("message") or DEFAULT_SUCCESS_MESSAGE,
            )

        if response.status_code == httpx.codes.CONFLICT:
            logger.info(f"Newsletter subscription conflict - Status: {response.status_code}")
            raise ConflictError(data.get("error"))

        logger.error(f"❌ Newsletter service error - Status: {response.status_code}")
        raise TransportError(SUBSCRIBE_FAILED_MESSAGE, status_code=502)

    async def fetch_blogs(self) -> List[BlogEntry]:
        """
        Fetch the ordered blog list.

        Raises:
            BlogFetchError: non-2xx answer, network failure, or a body that is not a list
        """
        url = self.blogs_url
        if not url:
            raise BlogFetchError(NOT_CONFIGURED_MESSAGE, endpoint=None)

        logger.info(f"Fetching blogs from: {url}")
        try:
            async with self._client() as client:
                response = await client.get(url, headers={"Content-Type": "application/json"})
        except httpx.HTTPError as e:
            logger.error(f"Error fetching blogs: {str(e)}")
            raise BlogFetchError(str(e) or NETWORK_ERROR_MESSAGE, endpoint=url) from e

        if not response.is_success:
            logger.error(f"Error response: {response.text}")
            raise BlogFetchError(
                f"Server responded with {response.status_code}: {response.reason_phrase}",
                endpoint=url,
            )

        try:
            data = response.json()
            if not isinstance(data, list):
                raise ValueError(f"expected a list of blogs, got {type(data).__name__}")
            entries = [BlogEntry.model_validate(item) for item in data]
        except ValueError as e:
            logger.error(f"Error parsing blogs: {str(e)}")
            raise BlogFetchError(f"Invalid response from server: {str(e)}", endpoint=url) from e

        logger.info(f"Fetched {len(entries)} blogs")
        return entries
