"""Pydantic schemas for raw GraphQL entity payloads.

These mirror only the parts of the upstream tweet and user results that
extraction reads. Every field is optional; unknown fields are ignored.
``parse_tweet`` and ``parse_user`` turn a raw result into the domain model,
returning None when the result carries no id.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..models import Tweet, TweetEntities, TweetMedia, User

logger = logging.getLogger(__name__)

UPSTREAM_DATE_FORMAT = "%a %b %d %H:%M:%S %z %Y"


class _Raw(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class RawUserLegacy(_Raw):
    screen_name: str | None = None
    name: str | None = None
    created_at: str | None = None
    description: str | None = None
    favourites_count: int = 0
    followers_count: int = 0
    friends_count: int = 0
    statuses_count: int = 0
    location: str | None = None
    pinned_tweet_ids_str: list[str] = Field(default_factory=list)
    profile_banner_url: str | None = None
    profile_image_url_https: str | None = None
    verified: bool = False


class RawUserCore(_Raw):
    """Newer layout moves names and creation date out of ``legacy``."""

    screen_name: str | None = None
    name: str | None = None
    created_at: str | None = None


class RawUser(_Raw):
    typename: str | None = Field(None, alias="__typename")
    rest_id: str | None = None
    is_blue_verified: bool = False
    core: RawUserCore | None = None
    legacy: RawUserLegacy = Field(default_factory=RawUserLegacy)


# ---------------------------------------------------------------------------
# Tweets
# ---------------------------------------------------------------------------


class RawHashtag(_Raw):
    text: str | None = None


class RawMention(_Raw):
    screen_name: str | None = None


class RawUrl(_Raw):
    expanded_url: str | None = None


class RawEntities(_Raw):
    hashtags: list[RawHashtag] = Field(default_factory=list)
    user_mentions: list[RawMention] = Field(default_factory=list)
    urls: list[RawUrl] = Field(default_factory=list)


class RawMedia(_Raw):
    media_url_https: str | None = None
    type: str | None = None


class RawExtendedEntities(_Raw):
    media: list[RawMedia] = Field(default_factory=list)


class RawTweetLegacy(_Raw):
    created_at: str | None = None
    full_text: str = ""
    lang: str | None = None
    entities: RawEntities = Field(default_factory=RawEntities)
    extended_entities: RawExtendedEntities | None = None
    quoted_status_id_str: str | None = None
    in_reply_to_status_id_str: str | None = None
    favorite_count: int = 0
    retweet_count: int = 0
    reply_count: int = 0
    quote_count: int = 0
    bookmark_count: int = 0
    retweeted_status_result: dict[str, Any] | None = None


class RawViews(_Raw):
    count: str | None = None


class RawTweet(_Raw):
    typename: str | None = Field(None, alias="__typename")
    rest_id: str | None = None
    legacy: RawTweetLegacy | None = None
    views: RawViews | None = None
    note_tweet: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def dig(obj: Any, *path: str) -> Any:
    """Follow ``path`` through nested dicts; None as soon as a step is missing."""
    for key in path:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def parse_date(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.strptime(value, UPSTREAM_DATE_FORMAT)
    except ValueError:
        return None


def _int_or_none(value: str | None) -> int | None:
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None


def parse_user(result: Any) -> User | None:
    """Build a ``User`` from a raw ``user_results.result``."""
    if not isinstance(result, dict):
        return None
    try:
        raw = RawUser.model_validate(result)
    except ValidationError as e:
        logger.debug("Skipping unparseable user", extra={"error": str(e)})
        return None
    if not raw.rest_id:
        return None

    legacy = raw.legacy
    core = raw.core or RawUserCore()
    pinned = legacy.pinned_tweet_ids_str
    return User(
        id=raw.rest_id,
        user_name=core.screen_name or legacy.screen_name or "",
        full_name=core.name or legacy.name or "",
        created_at=parse_date(core.created_at or legacy.created_at),
        description=legacy.description,
        is_verified=raw.is_blue_verified or legacy.verified,
        favourites_count=legacy.favourites_count,
        followers_count=legacy.followers_count,
        followings_count=legacy.friends_count,
        statuses_count=legacy.statuses_count,
        location=legacy.location,
        pinned_tweet=pinned[0] if pinned else None,
        profile_banner=legacy.profile_banner_url,
        profile_image=legacy.profile_image_url_https,
    )


def parse_tweet(result: Any) -> Tweet | None:
    """Build a ``Tweet`` from a raw ``tweet_results.result``.

    Unwraps ``TweetWithVisibilityResults`` and follows retweets one level
    deep into ``retweeted_tweet``.
    """
    if not isinstance(result, dict):
        return None
    if result.get("__typename") == "TweetWithVisibilityResults":
        return parse_tweet(result.get("tweet"))
    try:
        raw = RawTweet.model_validate(result)
    except ValidationError as e:
        logger.debug("Skipping unparseable tweet", extra={"error": str(e)})
        return None
    if not raw.rest_id or raw.legacy is None:
        return None

    legacy = raw.legacy
    note_text = dig(raw.note_tweet, "note_tweet_results", "result", "text")
    media = legacy.extended_entities.media if legacy.extended_entities else []
    return Tweet(
        id=raw.rest_id,
        full_text=note_text or legacy.full_text,
        author=parse_user(dig(result, "core", "user_results", "result")),
        created_at=parse_date(legacy.created_at),
        lang=legacy.lang,
        entities=TweetEntities(
            hashtags=[h.text for h in legacy.entities.hashtags if h.text],
            mentioned_users=[
                m.screen_name for m in legacy.entities.user_mentions if m.screen_name
            ],
            urls=[u.expanded_url for u in legacy.entities.urls if u.expanded_url],
        ),
        media=[
            TweetMedia(url=m.media_url_https, type=m.type)
            for m in media
            if m.media_url_https and m.type
        ],
        quoted=legacy.quoted_status_id_str,
        reply_to=legacy.in_reply_to_status_id_str,
        retweeted_tweet=parse_tweet(dig(legacy.retweeted_status_result, "result")),
        like_count=legacy.favorite_count,
        retweet_count=legacy.retweet_count,
        reply_count=legacy.reply_count,
        quote_count=legacy.quote_count,
        bookmark_count=legacy.bookmark_count,
        view_count=_int_or_none(raw.views.count if raw.views else None),
    )
