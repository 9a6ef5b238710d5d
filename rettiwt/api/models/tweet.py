"""Tweet data model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import User


class TweetEntities(BaseModel):
    """Hashtags, mentions and links found in a tweet's text."""

    hashtags: list[str] = Field(default_factory=list)
    mentioned_users: list[str] = Field(default_factory=list)
    urls: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class TweetMedia(BaseModel):
    """Media item attached to a tweet."""

    url: str
    type: str  # "photo" | "video" | "animated_gif"

    model_config = ConfigDict(frozen=True)


class Tweet(BaseModel):
    """Normalized tweet.

    Built only by the extraction layer from a raw GraphQL tweet result.
    """

    id: str = Field(..., min_length=1)
    full_text: str = ""
    author: User | None = None
    created_at: datetime | None = None
    lang: str | None = None
    entities: TweetEntities = Field(default_factory=TweetEntities)
    media: list[TweetMedia] = Field(default_factory=list)
    quoted: str | None = None
    reply_to: str | None = None
    retweeted_tweet: Tweet | None = None
    like_count: int = Field(0, ge=0)
    retweet_count: int = Field(0, ge=0)
    reply_count: int = Field(0, ge=0)
    quote_count: int = Field(0, ge=0)
    bookmark_count: int = Field(0, ge=0)
    view_count: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def url(self) -> str:
        """Permalink to the tweet."""
        user_name = self.author.user_name if self.author else "i"
        return f"https://x.com/{user_name}/status/{self.id}"

    @property
    def is_retweet(self) -> bool:
        return self.retweeted_tweet is not None


Tweet.model_rebuild()
