"""GraphQL request encoding shared by the endpoint specs."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from ..constants import DEFAULT_COUNT, GRAPHQL_FEATURES, GRAPHQL_URL, MAX_LIST_COUNT
from ..core.enums import ResourceType
from ..runtime.rest import RestEndpointSpec


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in values.items() if v is not None}


def graphql_url(operation: str) -> str:
    return f"{GRAPHQL_URL}/{operation}"


def encode_query(
    variables: dict[str, Any],
    *,
    features: dict[str, bool] | None = None,
    field_toggles: dict[str, bool] | None = None,
) -> dict[str, str]:
    """Encode a GraphQL query as query-string parameters."""
    q = {
        "variables": _dumps(variables),
        "features": _dumps(GRAPHQL_FEATURES if features is None else features),
    }
    if field_toggles:
        q["fieldToggles"] = _dumps(field_toggles)
    return q


def mutation_body(
    operation: str,
    variables: dict[str, Any],
    *,
    features: dict[str, bool] | None = None,
) -> dict[str, Any]:
    """Encode a GraphQL mutation as a JSON body."""
    body: dict[str, Any] = {"variables": variables, "queryId": operation.split("/")[0]}
    if features is not None:
        body["features"] = features
    return body


def timeline_spec(
    resource: ResourceType,
    operation: str,
    *,
    id_variable: str,
    requires_auth: bool = True,
    max_count: int = MAX_LIST_COUNT,
    extra_variables: dict[str, Any] | None = None,
) -> RestEndpointSpec:
    """Spec for a paginated GraphQL timeline keyed by one id.

    Args:
        resource: Resource the spec serves
        operation: GraphQL "<query id>/<name>"
        id_variable: Variable name the ``id`` parameter is sent as
        requires_auth: Whether a user credential is mandatory
        max_count: Largest accepted ``count``
        extra_variables: Fixed variables the operation expects
    """

    def build_query(params: dict[str, Any]) -> dict[str, str]:
        variables = compact(
            {
                id_variable: params["id"],
                "count": params.get("count") or DEFAULT_COUNT,
                "cursor": params.get("cursor"),
                **(extra_variables or {}),
            }
        )
        return encode_query(variables)

    url = graphql_url(operation)
    build_url: Callable[[dict[str, Any]], str] = lambda _: url  # noqa: E731

    return RestEndpointSpec(
        id=resource,
        method="GET",
        build_url=build_url,
        build_query=build_query,
        required=("id",),
        requires_auth=requires_auth,
        max_count=max_count,
    )
