"""Time-windowed collection over a newest-first, cursor-paged message feed."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence

from memeweek.bot.services.models import ContestMessage, TimeWindow

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class MessageSource(Protocol):
    """Protocol for channel history providers.

    Pages come back newest first. ``before`` is an exclusive cursor:
    only messages strictly older than that message id are returned.
    """

    async def fetch_page(
        self,
        channel_id: int,
        *,
        limit: int = MAX_PAGE_SIZE,
        before: Optional[str] = None,
    ) -> Sequence[ContestMessage]:
        ...


async def collect_messages_in_window(
    source: MessageSource,
    channel_id: int,
    window: TimeWindow,
    page_size: int = MAX_PAGE_SIZE,
) -> List[ContestMessage]:
    """Collect every message in a channel created inside ``window``.

    Walks the feed backwards in time one page at a time, stopping when
    the feed runs out or once a page reaches past the window's start.
    Errors raised by the source propagate unchanged.

    Args:
        source: History provider to page through
        channel_id: Channel to read
        window: Half-open period messages must fall in
        page_size: Messages requested per page (1-100)

    Returns:
        Messages inside the window, newest first
    """
    if not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")

    messages: List[ContestMessage] = []
    cursor: Optional[str] = None
    iteration = 0

    while True:
        logger.debug(f"Fetching messages, iteration {iteration}")
        page = await source.fetch_page(channel_id, limit=page_size, before=cursor)
        logger.debug(f"Fetched {len(page)} messages")

        if not page:
            break

        in_window = [message for message in page if window.contains(message.created_at)]
        logger.debug(f"Filtered {len(in_window)} messages in date range")
        messages.extend(in_window)

        oldest = page[-1]
        cursor = oldest.id
        if oldest.created_at < window.start:
            logger.debug("Oldest message is before window start, stopping")
            break

        iteration += 1

    logger.info(f"Total messages collected: {len(messages)} over {iteration + 1} page(s)")
    return messages
