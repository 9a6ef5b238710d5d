"""Resource registry.

Maps every ``ResourceType`` to the spec that builds its request and the
adapter that interprets its response. The mapping is built once at import
time and checked for exhaustiveness, so adding a ``ResourceType`` without an
entry fails on import rather than at call time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.enums import ResourceType, ResultKind
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from . import lists, media, tweets, users

# Registry mapping resources to specs and adapters
_ENDPOINT_REGISTRY: dict[ResourceType, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    ResourceType.LIST_TWEETS: (lists.SPEC, lists.Adapter),
    ResourceType.MEDIA_UPLOAD_INITIALIZE: (media.INITIALIZE_SPEC, media.InitializeAdapter),
    ResourceType.MEDIA_UPLOAD_APPEND: (media.APPEND_SPEC, media.AppendAdapter),
    ResourceType.MEDIA_UPLOAD_FINALIZE: (media.FINALIZE_SPEC, media.FinalizeAdapter),
    ResourceType.TWEET_DETAILS: (tweets.DETAILS_SPEC, tweets.DetailsAdapter),
    ResourceType.TWEET_CREATE: (tweets.CREATE_SPEC, tweets.CreateAdapter),
    ResourceType.TWEET_LIKE: (tweets.LIKE_SPEC, tweets.LikeAdapter),
    ResourceType.TWEET_LIKERS: (tweets.LIKERS_SPEC, tweets.LikersAdapter),
    ResourceType.TWEET_RETWEET: (tweets.RETWEET_SPEC, tweets.RetweetAdapter),
    ResourceType.TWEET_RETWEETERS: (tweets.RETWEETERS_SPEC, tweets.RetweetersAdapter),
    ResourceType.TWEET_SEARCH: (tweets.SEARCH_SPEC, tweets.SearchAdapter),
    ResourceType.USER_DETAILS_BY_USERNAME: (users.DETAILS_BY_USERNAME_SPEC, users.DetailsAdapter),
    ResourceType.USER_DETAILS_BY_ID: (users.DETAILS_BY_ID_SPEC, users.DetailsAdapter),
    ResourceType.USER_FOLLOWING: (users.FOLLOWING_SPEC, users.FollowingAdapter),
    ResourceType.USER_FOLLOWERS: (users.FOLLOWERS_SPEC, users.FollowersAdapter),
    ResourceType.USER_HIGHLIGHTS: (users.HIGHLIGHTS_SPEC, users.HighlightsAdapter),
    ResourceType.USER_LIKES: (users.LIKES_SPEC, users.LikesAdapter),
    ResourceType.USER_MEDIA: (users.MEDIA_SPEC, users.MediaAdapter),
    ResourceType.USER_SUBSCRIPTIONS: (users.SUBSCRIPTIONS_SPEC, users.SubscriptionsAdapter),
    ResourceType.USER_TWEETS: (users.TWEETS_SPEC, users.TweetsAdapter),
    ResourceType.USER_TWEETS_AND_REPLIES: (
        users.TWEETS_AND_REPLIES_SPEC,
        users.TweetsAndRepliesAdapter,
    ),
}

_missing = set(ResourceType) - set(_ENDPOINT_REGISTRY)
if _missing:
    raise RuntimeError(f"Resources without an endpoint: {sorted(r.value for r in _missing)}")


@dataclass(frozen=True)
class ResourceDescriptor:
    """Everything the pipeline needs to know about one resource."""

    spec: RestEndpointSpec
    adapter: type[ResponseAdapter]

    @property
    def id(self) -> ResourceType:
        return self.spec.id

    @property
    def required(self) -> tuple[str, ...]:
        return self.spec.required

    @property
    def requires_auth(self) -> bool:
        return self.spec.requires_auth

    @property
    def kind(self) -> ResultKind:
        return self.adapter.kind


def _resolve(resource: ResourceType | str) -> ResourceType:
    if isinstance(resource, ResourceType):
        return resource
    return ResourceType.from_str(resource)


def describe(resource: ResourceType | str) -> ResourceDescriptor:
    """Get the descriptor of a resource.

    Args:
        resource: Resource or its identifier (e.g. "TWEET_SEARCH")

    Returns:
        ResourceDescriptor for the resource

    Raises:
        ValueError: If the identifier names no resource
    """
    spec, adapter = _ENDPOINT_REGISTRY[_resolve(resource)]
    return ResourceDescriptor(spec=spec, adapter=adapter)


def get_endpoint_spec(resource: ResourceType | str) -> RestEndpointSpec | None:
    """Get endpoint specification by resource.

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    try:
        entry = _ENDPOINT_REGISTRY.get(_resolve(resource))
    except ValueError:
        return None
    return entry[0] if entry else None


def get_endpoint_adapter(resource: ResourceType | str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by resource.

    Returns:
        Adapter class if found, None otherwise
    """
    try:
        entry = _ENDPOINT_REGISTRY.get(_resolve(resource))
    except ValueError:
        return None
    return entry[1] if entry else None


def list_endpoints() -> list[ResourceType]:
    """List all registered resources."""
    return list(_ENDPOINT_REGISTRY.keys())


def extract(
    resource: ResourceType | str,
    response: Any,
    params: dict[str, Any] | None = None,
) -> Any:
    """Interpret a raw response of ``resource``.

    Pure: no I/O. The result shape is ``describe(resource).kind``.

    Raises:
        MalformedResponseError: If the envelope is not a JSON object and the
            resource expects a payload
    """
    adapter = describe(resource).adapter()
    return adapter.parse(response, params or {})


__all__ = [
    "ResourceDescriptor",
    "describe",
    "extract",
    "get_endpoint_adapter",
    "get_endpoint_spec",
    "list_endpoints",
]
