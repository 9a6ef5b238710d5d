"""User endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from ..constants import (
    OP_FOLLOWERS,
    OP_FOLLOWING,
    OP_LIKES,
    OP_USER_BY_REST_ID,
    OP_USER_BY_SCREEN_NAME,
    OP_USER_HIGHLIGHTS,
    OP_USER_MEDIA,
    OP_USER_SUBSCRIPTIONS,
    OP_USER_TWEETS,
    OP_USER_TWEETS_AND_REPLIES,
)
from ..core.enums import ResourceType, ResultKind
from ..models import User
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .graphql import encode_query, graphql_url, timeline_spec
from .schemas import dig, parse_user
from .timeline import TweetTimelineAdapter, UserTimelineAdapter, ensure_object

_TIMELINE_VARIABLES = {
    "includePromotedContent": False,
    "withVoice": True,
    "withV2Timeline": True,
}

# ---------------------------------------------------------------------------
# USER_DETAILS_BY_USERNAME / USER_DETAILS_BY_ID
# ---------------------------------------------------------------------------

DETAILS_BY_USERNAME_SPEC = RestEndpointSpec(
    id=ResourceType.USER_DETAILS_BY_USERNAME,
    method="GET",
    build_url=lambda p: graphql_url(OP_USER_BY_SCREEN_NAME),
    build_query=lambda p: encode_query(
        {"screen_name": p["id"], "withSafetyModeUserFields": True}
    ),
    required=("id",),
    requires_auth=False,
)

DETAILS_BY_ID_SPEC = RestEndpointSpec(
    id=ResourceType.USER_DETAILS_BY_ID,
    method="GET",
    build_url=lambda p: graphql_url(OP_USER_BY_REST_ID),
    build_query=lambda p: encode_query({"userId": p["id"], "withSafetyModeUserFields": True}),
    required=("id",),
    requires_auth=False,
)


class DetailsAdapter(ResponseAdapter):
    """Single user from ``data.user.result``; shared by both lookups."""

    kind = ResultKind.ENTITY

    def parse(self, response: Any, params: dict[str, Any]) -> User | None:
        data = ensure_object(response, "USER_DETAILS")
        return parse_user(dig(data, "data", "user", "result"))


# ---------------------------------------------------------------------------
# USER_FOLLOWING / USER_FOLLOWERS / USER_SUBSCRIPTIONS
# ---------------------------------------------------------------------------

FOLLOWING_SPEC = timeline_spec(
    ResourceType.USER_FOLLOWING,
    OP_FOLLOWING,
    id_variable="userId",
    extra_variables={"includePromotedContent": False},
)

FOLLOWERS_SPEC = timeline_spec(
    ResourceType.USER_FOLLOWERS,
    OP_FOLLOWERS,
    id_variable="userId",
    extra_variables={"includePromotedContent": False},
)

SUBSCRIPTIONS_SPEC = timeline_spec(
    ResourceType.USER_SUBSCRIPTIONS,
    OP_USER_SUBSCRIPTIONS,
    id_variable="userId",
    extra_variables={"includePromotedContent": False},
)


class FollowingAdapter(UserTimelineAdapter):
    pass


class FollowersAdapter(UserTimelineAdapter):
    pass


class SubscriptionsAdapter(UserTimelineAdapter):
    pass


# ---------------------------------------------------------------------------
# Tweet timelines of a user
# ---------------------------------------------------------------------------

HIGHLIGHTS_SPEC = timeline_spec(
    ResourceType.USER_HIGHLIGHTS,
    OP_USER_HIGHLIGHTS,
    id_variable="userId",
    extra_variables={"includePromotedContent": True, "withVoice": True},
)

LIKES_SPEC = timeline_spec(
    ResourceType.USER_LIKES,
    OP_LIKES,
    id_variable="userId",
    extra_variables={
        **_TIMELINE_VARIABLES,
        "withClientEventToken": False,
        "withBirdwatchNotes": False,
    },
)

MEDIA_SPEC = timeline_spec(
    ResourceType.USER_MEDIA,
    OP_USER_MEDIA,
    id_variable="userId",
    extra_variables={
        "includePromotedContent": False,
        "withClientEventToken": False,
        "withBirdwatchNotes": False,
        "withVoice": True,
    },
)

TWEETS_SPEC = timeline_spec(
    ResourceType.USER_TWEETS,
    OP_USER_TWEETS,
    id_variable="userId",
    requires_auth=False,
    extra_variables={**_TIMELINE_VARIABLES, "withQuickPromoteEligibilityTweetFields": True},
)

TWEETS_AND_REPLIES_SPEC = timeline_spec(
    ResourceType.USER_TWEETS_AND_REPLIES,
    OP_USER_TWEETS_AND_REPLIES,
    id_variable="userId",
    extra_variables={**_TIMELINE_VARIABLES, "withCommunity": True},
)


class HighlightsAdapter(TweetTimelineAdapter):
    pass


class LikesAdapter(TweetTimelineAdapter):
    pass


class MediaAdapter(TweetTimelineAdapter):
    pass


class TweetsAdapter(TweetTimelineAdapter):
    pass


class TweetsAndRepliesAdapter(TweetTimelineAdapter):
    pass
