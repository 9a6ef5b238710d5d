"""Argument models for searching and posting.

These models validate caller input before any request is built. Services
convert pydantic's ``ValidationError`` into ``InvalidArgumentError`` so that
callers only ever deal with the library's own exception hierarchy.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import MAX_TWEET_LENGTH, MAX_TWEET_MEDIA


def _format_date(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y-%m-%d_%H:%M:%S_UTC")


def _any_of(values: list[str], prefix: str = "") -> str:
    return "(" + " OR ".join(f"{prefix}{v}" for v in values) + ")"


class TweetFilter(BaseModel):
    """Filter for searching tweets.

    Rendered into the upstream advanced-search query string by ``to_query``.
    Every field is optional; an empty filter matches everything the upstream
    search allows.
    """

    words: list[str] = Field(default_factory=list)
    phrase: str | None = None
    optional_words: list[str] = Field(default_factory=list)
    exclude_words: list[str] = Field(default_factory=list)
    hashtags: list[str] = Field(default_factory=list)
    from_users: list[str] = Field(default_factory=list)
    to_users: list[str] = Field(default_factory=list)
    mentions: list[str] = Field(default_factory=list)
    min_replies: int | None = Field(None, ge=0)
    min_likes: int | None = Field(None, ge=0)
    min_retweets: int | None = Field(None, ge=0)
    language: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    since_id: str | None = None
    max_id: str | None = None
    quoted: str | None = None
    links: bool | None = None
    replies: bool | None = None
    top: bool = False

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("hashtags", mode="after")
    @classmethod
    def strip_hash(cls, v: list[str]) -> list[str]:
        return [tag.lstrip("#") for tag in v]

    @field_validator("from_users", "to_users", "mentions", mode="after")
    @classmethod
    def strip_at(cls, v: list[str]) -> list[str]:
        return [name.lstrip("@") for name in v]

    @property
    def product(self) -> str:
        """Search tab to query."""
        return "Top" if self.top else "Latest"

    def to_query(self) -> str:
        """Render the filter as an advanced-search query string."""
        parts: list[str] = []
        if self.words:
            parts.append(" ".join(self.words))
        if self.phrase:
            parts.append(f'"{self.phrase}"')
        if self.optional_words:
            parts.append(_any_of(self.optional_words))
        if self.exclude_words:
            parts.append(" ".join(f"-{w}" for w in self.exclude_words))
        if self.hashtags:
            parts.append(_any_of(self.hashtags, "#"))
        if self.from_users:
            parts.append(_any_of(self.from_users, "from:"))
        if self.to_users:
            parts.append(_any_of(self.to_users, "to:"))
        if self.mentions:
            parts.append(_any_of(self.mentions, "@"))
        if self.min_replies is not None:
            parts.append(f"min_replies:{self.min_replies}")
        if self.min_likes is not None:
            parts.append(f"min_faves:{self.min_likes}")
        if self.min_retweets is not None:
            parts.append(f"min_retweets:{self.min_retweets}")
        if self.language:
            parts.append(f"lang:{self.language}")
        if self.start_date:
            parts.append(f"since:{_format_date(self.start_date)}")
        if self.end_date:
            parts.append(f"until:{_format_date(self.end_date)}")
        if self.since_id:
            parts.append(f"since_id:{self.since_id}")
        if self.max_id:
            parts.append(f"max_id:{self.max_id}")
        if self.quoted:
            parts.append(f"quoted_tweet_id:{self.quoted}")
        if self.links is False:
            parts.append("-filter:links")
        if self.replies is False:
            parts.append("-filter:replies")
        return " ".join(parts)


class TweetMediaArgs(BaseModel):
    """Media to attach to a tweet.

    ``path`` is either a file path or the raw bytes of the media.
    """

    path: Path | str | bytes
    tags: list[str] = Field(default_factory=list, max_length=10)

    model_config = ConfigDict(frozen=True)


class UploadedMedia(BaseModel):
    """Media already uploaded and ready to be attached to a tweet."""

    id: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class TweetArgs(BaseModel):
    """Tweet to post."""

    text: str = Field(..., min_length=1, max_length=MAX_TWEET_LENGTH)
    media: list[TweetMediaArgs] = Field(default_factory=list, max_length=MAX_TWEET_MEDIA)
    quote: str | None = None
    reply_to: str | None = None

    model_config = ConfigDict(frozen=True)
