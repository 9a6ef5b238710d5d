"""Shared fixtures: raw upstream payload builders and a mocked transport."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from rettiwt.api.auth import AuthCredential
from rettiwt.api.runtime.rest import RESTTransport


def make_raw_user(id: str = "100", screen_name: str = "alice", **legacy: Any) -> dict[str, Any]:
    return {
        "__typename": "User",
        "rest_id": id,
        "is_blue_verified": False,
        "legacy": {
            "screen_name": screen_name,
            "name": screen_name.title(),
            "created_at": "Wed Oct 10 20:19:24 +0000 2018",
            "description": "hi",
            "favourites_count": 1,
            "followers_count": 10,
            "friends_count": 5,
            "statuses_count": 3,
            "pinned_tweet_ids_str": [],
            **legacy,
        },
    }


def make_raw_tweet(
    id: str,
    created_at: str = "Mon Jan 01 00:00:05 +0000 2024",
    text: str = "hello",
    user: dict[str, Any] | None = None,
    **legacy: Any,
) -> dict[str, Any]:
    return {
        "__typename": "Tweet",
        "rest_id": id,
        "core": {"user_results": {"result": user or make_raw_user()}},
        "legacy": {
            "created_at": created_at,
            "full_text": text,
            "lang": "en",
            "favorite_count": 2,
            "retweet_count": 1,
            "reply_count": 0,
            "quote_count": 0,
            "bookmark_count": 0,
            **legacy,
        },
        "views": {"count": "42"},
    }


def make_timeline(
    results: list[dict[str, Any]],
    *,
    cursor: str | None = None,
    item_type: str = "TimelineTweet",
) -> dict[str, Any]:
    """Wrap raw results into a GraphQL timeline envelope."""
    key = "tweet_results" if item_type == "TimelineTweet" else "user_results"
    entries: list[dict[str, Any]] = [
        {
            "entryId": "cursor-top-0",
            "content": {"entryType": "TimelineTimelineCursor", "value": "top", "cursorType": "Top"},
        }
    ]
    entries += [
        {
            "entryId": f"item-{i}",
            "content": {
                "entryType": "TimelineTimelineItem",
                "itemContent": {"itemType": item_type, key: {"result": result}},
            },
        }
        for i, result in enumerate(results)
    ]
    if cursor is not None:
        entries.append(
            {
                "entryId": "cursor-bottom-0",
                "content": {
                    "entryType": "TimelineTimelineCursor",
                    "value": cursor,
                    "cursorType": "Bottom",
                },
            }
        )
    return {
        "data": {
            "timeline": {
                "timeline": {"instructions": [{"type": "TimelineAddEntries", "entries": entries}]}
            }
        }
    }


@pytest.fixture
def mock_transport():
    """REST transport whose ``send`` is an AsyncMock."""
    transport = MagicMock(spec=RESTTransport)
    transport.send = AsyncMock(return_value={"data": {}})
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def user_credential():
    return AuthCredential.user("auth_token=abc; ct0=csrf123")


@pytest.fixture
def guest_credential():
    return AuthCredential.guest("gt-1")


@pytest.fixture
def raw_user():
    return make_raw_user


@pytest.fixture
def raw_tweet():
    return make_raw_tweet


@pytest.fixture
def timeline():
    return make_timeline
