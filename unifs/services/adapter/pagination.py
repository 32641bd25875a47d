"""Sequential list-then-act driver for prefix-wide bulk operations."""

from __future__ import annotations

from typing import AsyncIterator, Awaitable, Callable

from unifs.core.cancellation import CancellationToken
from unifs.services.object_store.interface import ObjectStoreInterface

PageAction = Callable[[list[str]], Awaitable[None]]

DEFAULT_PAGE_SIZE = 1000


class PaginatedBulkOperator:
    """Walks every key under a prefix one listing page at a time.

    Pages are fetched lazily and handed to the action strictly in sequence:
    the next listing is only requested after the action for the previous
    page has finished. Errors from listing or from the action propagate
    immediately and no further pages are fetched. Nothing is retried.
    """

    def __init__(self, store: ObjectStoreInterface, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._store = store
        self._page_size = page_size

    async def pages(
        self, prefix: str, cancellation: CancellationToken
    ) -> AsyncIterator[list[str]]:
        """Yield each non-empty page under *prefix*; single use."""
        token: str | None = None
        while True:
            listing = await cancellation.run(
                self._store.list_objects, prefix, token, self._page_size
            )
            if listing.keys:
                yield listing.keys
            token = listing.continuation_token
            if not token:
                return

    async def run(
        self, prefix: str, action: PageAction, cancellation: CancellationToken
    ) -> int:
        """Apply *action* to every page; returns the number of keys visited."""
        visited = 0
        async for page in self.pages(prefix, cancellation):
            await action(page)
            visited += len(page)
        return visited
