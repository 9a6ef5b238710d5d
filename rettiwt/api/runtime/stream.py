"""Polling stream of newly posted tweets matching a filter.

Architecture:
    The stream is pulled by its consumer: a search runs only while the
    consumer is waiting for a tweet and the current page is used up. Nothing
    runs between two ``__anext__`` calls, so a stream that is abandoned
    (closed or not) leaves no pending work behind. Cancelling the awaiting
    consumer cancels the sleep or search it is suspended in.

Polling round:
    1. Sleep ``polling_interval`` seconds.
    2. Search with the filter bounded by the stream's start date and the
       ``since_id`` watermark, passing the current cursor.
    3. Hand over every tweet of the page in order.
    4. On the first page of a round, remember its newest tweet as the next
       watermark.
    5. If the page had tweets and a next cursor, fetch the next page
       without sleeping; otherwise advance the watermark and start a new
       round.

The watermark is only taken from the first page of a round. A round whose
first page is empty but whose later pages are not leaves it unchanged.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from ..models import CursoredData, Tweet, TweetFilter

logger = logging.getLogger(__name__)

SearchFn = Callable[[TweetFilter, str | None], Awaitable[CursoredData[Tweet]]]


@dataclass
class StreamState:
    start_date: datetime
    cursor: str | None = None
    since_id: str | None = None
    next_since_id: str | None = None


class TweetStream:
    """Async iterator over new tweets matching a filter.

    Infinite unless a search fails; the failure is raised to the consumer
    and the stream is finished afterwards. Not restartable.

    Example:
        >>> async with service.stream(TweetFilter(from_users=["u1"])) as stream:
        ...     async for tweet in stream:
        ...         print(tweet.full_text)
    """

    def __init__(
        self,
        search: SearchFn,
        search_filter: TweetFilter,
        polling_interval: float = 60.0,
        *,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        now: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        if polling_interval < 0:
            raise ValueError("polling_interval must be >= 0")
        self._search = search
        self._filter = search_filter
        self.polling_interval = polling_interval
        self._sleep = sleep
        self._state = StreamState(start_date=now())
        self._pending: deque[Tweet] = deque()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _round_filter(self) -> TweetFilter:
        return self._filter.model_copy(
            update={"start_date": self._state.start_date, "since_id": self._state.since_id}
        )

    async def _next_page(self) -> list[Tweet]:
        state = self._state
        if state.cursor is None:
            await self._sleep(self.polling_interval)
        page = await self._search(self._round_filter(), state.cursor)

        if state.cursor is None and page.list:
            state.next_since_id = page.list[0].id

        if page.list and page.next is not None:
            state.cursor = page.next.value
        else:
            state.since_id = state.next_since_id
            state.cursor = None
            logger.debug(
                "Stream round complete",
                extra={"since_id": state.since_id, "delivered": len(page.list)},
            )
        return page.list

    def __aiter__(self) -> TweetStream:
        return self

    async def __anext__(self) -> Tweet:
        while not self._pending:
            if self._closed:
                raise StopAsyncIteration
            try:
                self._pending.extend(await self._next_page())
            except Exception as e:
                logger.debug("Stream search failed", extra={"error": str(e)})
                self._closed = True
                raise
        if self._closed:
            raise StopAsyncIteration
        return self._pending.popleft()

    async def aclose(self) -> None:
        """Stop polling; further iteration ends immediately."""
        self._closed = True
        self._pending.clear()

    async def __aenter__(self) -> TweetStream:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
