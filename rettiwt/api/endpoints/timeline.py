"""Shared extraction for timelines and single-result responses."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from typing import Any

from ..core.enums import CursorType, ResultKind
from ..core.exceptions import MalformedResponseError
from ..models import Cursor, CursoredData, Tweet, User
from ..runtime.rest import ResponseAdapter
from .schemas import dig, parse_tweet, parse_user

_OLDEST = datetime.min.replace(tzinfo=UTC)


def ensure_object(response: Any, name: str) -> dict[str, Any]:
    """Return ``response`` if it is a JSON object, else raise."""
    if not isinstance(response, dict):
        raise MalformedResponseError(
            f"Expected a JSON object for {name}, got {type(response).__name__}"
        )
    return response


def walk(node: Any) -> Iterator[dict[str, Any]]:
    """Yield every object in a JSON tree, depth first, in document order."""
    if isinstance(node, dict):
        yield node
        for value in node.values():
            yield from walk(value)
    elif isinstance(node, list):
        for value in node:
            yield from walk(value)


def timeline_items(response: dict[str, Any], item_type: str) -> Iterator[dict[str, Any]]:
    """Raw results of every ``itemContent`` of the given ``itemType``."""
    key = "tweet_results" if item_type == "TimelineTweet" else "user_results"
    for node in walk(response):
        if node.get("itemType") == item_type:
            result = dig(node, key, "result")
            if isinstance(result, dict):
                yield result


def bottom_cursor(response: dict[str, Any]) -> Cursor | None:
    for node in walk(response):
        if node.get("cursorType") == CursorType.BOTTOM.value and node.get("value"):
            return Cursor(value=str(node["value"]), type=CursorType.BOTTOM)
    return None


def newest_first(tweets: list[Tweet]) -> list[Tweet]:
    return sorted(tweets, key=lambda t: t.created_at or _OLDEST, reverse=True)


class TweetTimelineAdapter(ResponseAdapter):
    """Cursored list of tweets in upstream order."""

    kind = ResultKind.CURSORED
    sort_newest_first = False

    def parse(self, response: Any, params: dict[str, Any]) -> CursoredData[Tweet]:
        data = ensure_object(response, type(self).__name__)
        tweets = [t for t in map(parse_tweet, timeline_items(data, "TimelineTweet")) if t]
        if self.sort_newest_first:
            tweets = newest_first(tweets)
        return CursoredData[Tweet](list=tweets, next=bottom_cursor(data))


class RecentTweetTimelineAdapter(TweetTimelineAdapter):
    """Cursored list of tweets, most recent first."""

    sort_newest_first = True


class UserTimelineAdapter(ResponseAdapter):
    """Cursored list of users in upstream order."""

    kind = ResultKind.CURSORED

    def parse(self, response: Any, params: dict[str, Any]) -> CursoredData[User]:
        data = ensure_object(response, type(self).__name__)
        users = [u for u in map(parse_user, timeline_items(data, "TimelineUser")) if u]
        return CursoredData[User](list=users, next=bottom_cursor(data))


class MarkerAdapter(ResponseAdapter):
    """True iff the success marker at ``path`` is a non-empty value."""

    kind = ResultKind.BOOLEAN
    path: tuple[str, ...] = ()

    def parse(self, response: Any, params: dict[str, Any]) -> bool:
        data = ensure_object(response, type(self).__name__)
        return bool(dig(data, *self.path))
