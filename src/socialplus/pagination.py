"""
Cursor pagination over feed operations.

Every feed operation returns a FeedResponse with one page of ``data`` and the
``cursor`` to pass back for the next page. paginate() hides that loop:

    async for user in paginate(client.my_followers.get_followers, auth, limit=50):
        print(user.user_handle)
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from .models import FeedResponse

logger = logging.getLogger(__name__)


async def paginate(
    fetch_page: Callable[..., Awaitable[FeedResponse]],
    *args: Any,
    limit: int | None = None,
    max_items: int | None = None,
    **kwargs: Any,
) -> AsyncIterator[Any]:
    """
    Iterate over every item of a feed, page by page.

    Args:
        fetch_page: Bound feed operation (accepts ``cursor`` and ``limit``)
        *args: Positional arguments for fetch_page (handles, authorization)
        limit: Page size requested from the service
        max_items: Stop after yielding this many items
        **kwargs: Keyword arguments for fetch_page

    Yields:
        Feed items in service order

    Stops when a page is empty, the returned cursor is empty or repeats a
    cursor already used, or max_items items were yielded.
    """
    if max_items is not None and max_items <= 0:
        return

    if limit is not None:
        kwargs["limit"] = limit

    cursor = kwargs.pop("cursor", None)
    seen: set[str] = set()
    yielded = 0
    pages = 0

    while True:
        page = await fetch_page(*args, cursor=cursor, **kwargs)
        pages += 1

        for item in page.data or []:
            yield item
            yielded += 1
            if max_items is not None and yielded >= max_items:
                logger.debug(f"Stopped after {yielded} items ({pages} pages)")
                return

        if not page.data or not page.cursor:
            break
        if page.cursor in seen or page.cursor == cursor:
            logger.warning(f"Feed returned a repeated cursor {page.cursor!r}; stopping")
            break

        if cursor is not None:
            seen.add(cursor)
        cursor = page.cursor

    logger.debug(f"Feed exhausted after {yielded} items ({pages} pages)")
