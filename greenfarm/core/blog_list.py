"""
Blog list view state.

Tracks one list fetch at a time, the detail view of a selected entry, and
which entry images failed to load.

Part of the public page-layer API: page code imports it directly, the
server routes do not.
"""

import logging
from typing import Awaitable, Callable, List, Optional, Set

from greenfarm.core.exceptions import BlogFetchError
from greenfarm.models.blog import BlogEntry

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No blogs available yet."

VIEW_LOADING = "loading"
VIEW_ERROR = "error"
VIEW_EMPTY = "empty"
VIEW_LIST = "list"


class BlogListView:
    """
    Args:
        fetcher: Coroutine function returning the blog list, e.g. BackendClient.fetch_blogs
        endpoint: Endpoint shown alongside errors when the fetcher does not report one
    """

    def __init__(self, fetcher: Callable[[], Awaitable[List[BlogEntry]]], endpoint: Optional[str] = None):
        self.fetcher = fetcher
        self.endpoint = endpoint
        self.entries: List[BlogEntry] = []
        self.loading = True
        self._pending = False
        self.error: Optional[str] = None
        self.error_endpoint: Optional[str] = None
        self.selected: Optional[BlogEntry] = None
        # failed ids only accumulate; cleared when the view is discarded
        self.failed_images: Set[str] = set()

    async def load(self) -> None:
        if self._pending:
            return
        self._pending = True
        self.loading = True
        self.error = None
        self.error_endpoint = None
        try:
            self.entries = await self.fetcher()
        except BlogFetchError as e:
            logger.error(f"Failed to load blogs: {e.public_message}")
            self.error = e.public_message
            self.error_endpoint = e.endpoint or self.endpoint
        finally:
            self.loading = False
            self._pending = False

    async def retry(self) -> None:
        await self.load()

    @property
    def is_empty(self) -> bool:
        return not self.loading and self.error is None and not self.entries

    def view_state(self) -> str:
        if self.loading:
            return VIEW_LOADING
        if self.error is not None:
            return VIEW_ERROR
        if not self.entries:
            return VIEW_EMPTY
        return VIEW_LIST

    @property
    def status_message(self) -> Optional[str]:
        """Text for the non-list states; None while loading or when entries are shown"""
        state = self.view_state()
        if state == VIEW_ERROR:
            return self.error
        if state == VIEW_EMPTY:
            return EMPTY_MESSAGE
        return None

    def open(self, entry: BlogEntry) -> None:
        self.selected = entry

    def close(self) -> None:
        self.selected = None

    @property
    def is_detail_open(self) -> bool:
        return self.selected is not None

    def mark_image_failed(self, entry_id: str) -> None:
        self.failed_images.add(entry_id)

    def image_for(self, entry: BlogEntry) -> Optional[str]:
        """Image URL to render, or None to show the placeholder"""
        if not entry.media_url or entry.id in self.failed_images:
            return None
        return entry.media_url
