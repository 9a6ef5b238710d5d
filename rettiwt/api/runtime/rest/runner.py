"""REST request runner using endpoint specs and response adapters.

The runner is the fetch dispatcher: it validates a parameter bag against an
endpoint spec, attaches the credential, and performs exactly one transport
call. Interpreting the response is the adapter's job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ...core.enums import ResourceType, ResultKind
from ...core.exceptions import AuthenticationRequiredError, InvalidArgumentError
from .transport import RESTTransport

if TYPE_CHECKING:
    from ...auth import AuthCredential

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: ResourceType
    method: str  # "GET" | "POST"
    build_url: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_form: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    required: tuple[str, ...] = ()
    requires_auth: bool = True
    max_count: int | None = None


class ResponseAdapter:
    kind: ResultKind = ResultKind.ABSENT

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    def validate(
        self, spec: RestEndpointSpec, params: dict[str, Any], credential: AuthCredential
    ) -> None:
        """Check parameters and authentication without touching the network."""
        for name in spec.required:
            if params.get(name) in (None, ""):
                raise InvalidArgumentError(
                    f"Missing required parameter '{name}' for {spec.id.value}", spec.id
                )

        count = params.get("count")
        if count is not None:
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise InvalidArgumentError(
                    f"count must be a positive integer, got {count!r}", spec.id
                )
            if spec.max_count is not None and count > spec.max_count:
                raise InvalidArgumentError(
                    f"count must be <= {spec.max_count} for {spec.id.value}, got {count}",
                    spec.id,
                )

        if spec.requires_auth and not credential.is_authenticated:
            raise AuthenticationRequiredError(
                f"{spec.id.value} requires user authentication", spec.id
            )

    async def fetch(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        credential: AuthCredential,
    ) -> Any:
        self.validate(spec, params, credential)

        url = spec.build_url(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None
        form = spec.build_form(params) if spec.build_form else None

        logger.debug(
            "Dispatching request",
            extra={"resource": spec.id.value, "method": spec.method, "url": url},
        )
        return await self._t.send(
            spec.method,
            url,
            headers=credential.headers(),
            params=query,
            json_body=body,
            form=form,
        )

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        credential: AuthCredential,
    ) -> Any:
        data = await self.fetch(spec=spec, params=params, credential=credential)
        return adapter.parse(data, params)
