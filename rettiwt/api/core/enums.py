"""Core enumerations shared by the registry, extraction layer and services.

Architecture:
    These enums name the closed set of upstream operations the library knows
    how to call and the shapes their responses are reduced to. Every other
    component keys off them instead of hard-coding resource-specific logic.

Key Types:
    - ResourceType: One upstream operation (GraphQL query/mutation or REST call)
    - ResultKind: The shape an extracted response is reduced to
    - CursorType: Position a cursor points at within a timeline
"""

from enum import Enum


class ResourceType(str, Enum):
    """Closed set of upstream resources.

    String enum so identifiers serialize cleanly into logs and can be
    constructed from plain strings (``ResourceType("TWEET_SEARCH")``).
    """

    # Lists
    LIST_TWEETS = "LIST_TWEETS"

    # Media
    MEDIA_UPLOAD_INITIALIZE = "MEDIA_UPLOAD_INITIALIZE"
    MEDIA_UPLOAD_APPEND = "MEDIA_UPLOAD_APPEND"
    MEDIA_UPLOAD_FINALIZE = "MEDIA_UPLOAD_FINALIZE"

    # Tweets
    TWEET_DETAILS = "TWEET_DETAILS"
    TWEET_CREATE = "TWEET_CREATE"
    TWEET_LIKE = "TWEET_LIKE"
    TWEET_LIKERS = "TWEET_LIKERS"
    TWEET_RETWEET = "TWEET_RETWEET"
    TWEET_RETWEETERS = "TWEET_RETWEETERS"
    TWEET_SEARCH = "TWEET_SEARCH"

    # Users
    USER_DETAILS_BY_USERNAME = "USER_DETAILS_BY_USERNAME"
    USER_DETAILS_BY_ID = "USER_DETAILS_BY_ID"
    USER_FOLLOWING = "USER_FOLLOWING"
    USER_FOLLOWERS = "USER_FOLLOWERS"
    USER_HIGHLIGHTS = "USER_HIGHLIGHTS"
    USER_LIKES = "USER_LIKES"
    USER_MEDIA = "USER_MEDIA"
    USER_SUBSCRIPTIONS = "USER_SUBSCRIPTIONS"
    USER_TWEETS = "USER_TWEETS"
    USER_TWEETS_AND_REPLIES = "USER_TWEETS_AND_REPLIES"

    @classmethod
    def from_str(cls, value: str) -> "ResourceType":
        """Resolve a resource from its identifier, case-insensitively."""
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Unknown resource: {value}") from None


class ResultKind(str, Enum):
    """Shape of an extracted response."""

    ABSENT = "absent"
    BOOLEAN = "boolean"
    SCALAR_ID = "scalar_id"
    ENTITY = "entity"
    CURSORED = "cursored"


class CursorType(str, Enum):
    """Timeline position a cursor points at."""

    BOTTOM = "Bottom"
    TOP = "Top"
