"""Tweet endpoint definitions and adapters.

Covers tweet details, creation, likes, retweets and search.
"""

from __future__ import annotations

from typing import Any

from ..constants import (
    DEFAULT_COUNT,
    GRAPHQL_FEATURES,
    MAX_SEARCH_COUNT,
    OP_CREATE_RETWEET,
    OP_CREATE_TWEET,
    OP_FAVORITE_TWEET,
    OP_FAVORITERS,
    OP_RETWEETERS,
    OP_SEARCH_TIMELINE,
    OP_TWEET_RESULT_BY_REST_ID,
)
from ..core.enums import ResourceType, ResultKind
from ..models import Tweet, TweetFilter
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .graphql import compact, encode_query, graphql_url, mutation_body, timeline_spec
from .schemas import dig, parse_tweet
from .timeline import (
    MarkerAdapter,
    RecentTweetTimelineAdapter,
    UserTimelineAdapter,
    ensure_object,
)

# ---------------------------------------------------------------------------
# TWEET_DETAILS
# ---------------------------------------------------------------------------


def _details_query(params: dict[str, Any]) -> dict[str, str]:
    return encode_query(
        {
            "tweetId": params["id"],
            "withCommunity": False,
            "includePromotedContent": False,
            "withVoice": False,
        }
    )


DETAILS_SPEC = RestEndpointSpec(
    id=ResourceType.TWEET_DETAILS,
    method="GET",
    build_url=lambda p: graphql_url(OP_TWEET_RESULT_BY_REST_ID),
    build_query=_details_query,
    required=("id",),
    requires_auth=False,
)


class DetailsAdapter(ResponseAdapter):
    kind = ResultKind.ENTITY

    def parse(self, response: Any, params: dict[str, Any]) -> Tweet | None:
        data = ensure_object(response, "TWEET_DETAILS")
        return parse_tweet(dig(data, "data", "tweetResult", "result"))


# ---------------------------------------------------------------------------
# TWEET_CREATE
# ---------------------------------------------------------------------------


def _create_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build the CreateTweet mutation.

    ``media`` is a list of ``UploadedMedia`` (already uploaded ids plus tags).
    """
    variables: dict[str, Any] = {
        "tweet_text": params["text"],
        "dark_request": False,
        "media": {
            "media_entities": [
                {"media_id": m.id, "tagged_users": list(m.tags)}
                for m in params.get("media") or []
            ],
            "possibly_sensitive": False,
        },
        "semantic_annotation_ids": [],
    }
    if params.get("reply_to"):
        variables["reply"] = {
            "in_reply_to_tweet_id": params["reply_to"],
            "exclude_reply_user_ids": [],
        }
    if params.get("quote"):
        variables["quote_tweet_id"] = params["quote"]
    return mutation_body(OP_CREATE_TWEET, variables, features=GRAPHQL_FEATURES)


CREATE_SPEC = RestEndpointSpec(
    id=ResourceType.TWEET_CREATE,
    method="POST",
    build_url=lambda p: graphql_url(OP_CREATE_TWEET),
    build_body=_create_body,
    required=("text",),
)


class CreateAdapter(ResponseAdapter):
    kind = ResultKind.SCALAR_ID

    def parse(self, response: Any, params: dict[str, Any]) -> str | None:
        data = ensure_object(response, "TWEET_CREATE")
        rest_id = dig(data, "data", "create_tweet", "tweet_results", "result", "rest_id")
        return str(rest_id) if rest_id else None


# ---------------------------------------------------------------------------
# TWEET_LIKE / TWEET_RETWEET
# ---------------------------------------------------------------------------

LIKE_SPEC = RestEndpointSpec(
    id=ResourceType.TWEET_LIKE,
    method="POST",
    build_url=lambda p: graphql_url(OP_FAVORITE_TWEET),
    build_body=lambda p: mutation_body(OP_FAVORITE_TWEET, {"tweet_id": p["id"]}),
    required=("id",),
)


class LikeAdapter(MarkerAdapter):
    path = ("data", "favorite_tweet")


RETWEET_SPEC = RestEndpointSpec(
    id=ResourceType.TWEET_RETWEET,
    method="POST",
    build_url=lambda p: graphql_url(OP_CREATE_RETWEET),
    build_body=lambda p: mutation_body(
        OP_CREATE_RETWEET, {"tweet_id": p["id"], "dark_request": False}
    ),
    required=("id",),
)


class RetweetAdapter(MarkerAdapter):
    path = ("data", "create_retweet")


# ---------------------------------------------------------------------------
# TWEET_LIKERS / TWEET_RETWEETERS
# ---------------------------------------------------------------------------

LIKERS_SPEC = timeline_spec(
    ResourceType.TWEET_LIKERS,
    OP_FAVORITERS,
    id_variable="tweetId",
    extra_variables={"includePromotedContent": False},
)

RETWEETERS_SPEC = timeline_spec(
    ResourceType.TWEET_RETWEETERS,
    OP_RETWEETERS,
    id_variable="tweetId",
    extra_variables={"includePromotedContent": False},
)


class LikersAdapter(UserTimelineAdapter):
    pass


class RetweetersAdapter(UserTimelineAdapter):
    pass


# ---------------------------------------------------------------------------
# TWEET_SEARCH
# ---------------------------------------------------------------------------


def _search_query(params: dict[str, Any]) -> dict[str, str]:
    search_filter: TweetFilter = params["filter"]
    variables = compact(
        {
            "rawQuery": search_filter.to_query(),
            "count": params.get("count") or DEFAULT_COUNT,
            "cursor": params.get("cursor"),
            "querySource": "typed_query",
            "product": search_filter.product,
        }
    )
    return encode_query(variables)


SEARCH_SPEC = RestEndpointSpec(
    id=ResourceType.TWEET_SEARCH,
    method="GET",
    build_url=lambda p: graphql_url(OP_SEARCH_TIMELINE),
    build_query=_search_query,
    required=("filter",),
    max_count=MAX_SEARCH_COUNT,
)


class SearchAdapter(RecentTweetTimelineAdapter):
    pass
