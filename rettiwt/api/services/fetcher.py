"""Base service: the fetch-extract pipeline over the resource registry.

Every public service derives from ``FetcherService``. It resolves a resource
through the registry, dispatches it once through ``RestRunner`` and hands
the raw response to the resource's adapter.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ..auth import AuthCredential
from ..core.enums import ResourceType, ResultKind
from ..core.exceptions import InvalidArgumentError
from ..endpoints import describe, extract
from ..models import Cursor, CursoredData
from ..runtime.rest import RestRunner, RESTTransport

logger = logging.getLogger(__name__)


def invalid_argument(
    error: ValidationError, resource: ResourceType | None = None
) -> InvalidArgumentError:
    """Convert a pydantic validation failure into ``InvalidArgumentError``."""
    first = error.errors()[0] if error.errors() else {}
    field = ".".join(str(p) for p in first.get("loc", ()))
    message = first.get("msg", str(error))
    return InvalidArgumentError(f"{field}: {message}" if field else message, resource)


class FetcherService:
    """Fetches and extracts resources under one credential."""

    def __init__(self, credential: AuthCredential, transport: RESTTransport) -> None:
        self.credential = credential
        self._transport = transport
        self._runner = RestRunner(transport)

    async def request(self, resource: ResourceType, params: dict[str, Any]) -> Any:
        """Dispatch ``resource`` and return the raw response unmodified."""
        descriptor = describe(resource)
        return await self._runner.fetch(
            spec=descriptor.spec, params=params, credential=self.credential
        )

    def extract(
        self, resource: ResourceType, response: Any, params: dict[str, Any] | None = None
    ) -> Any:
        return extract(resource, response, params)

    async def fetch(self, resource: ResourceType, params: dict[str, Any]) -> Any:
        response = await self.request(resource, params)
        result = self.extract(resource, response, params)
        logger.debug(
            "Resource fetched",
            extra={"resource": resource.value, "kind": describe(resource).kind.value},
        )
        return result

    @staticmethod
    def _expect(resource: ResourceType, *kinds: ResultKind) -> None:
        kind = describe(resource).kind
        if kind not in kinds:
            expected = "/".join(k.value for k in kinds)
            raise ValueError(f"{resource.value} returns {kind.value}, not {expected}")

    async def fetch_details(self, resource: ResourceType, id: str) -> Any:
        """Fetch a single entity (``Tweet`` or ``User``), or None if not found."""
        self._expect(resource, ResultKind.ENTITY)
        return await self.fetch(resource, {"id": id})

    async def fetch_list(
        self,
        resource: ResourceType,
        id: str | None = None,
        *,
        count: int | None = None,
        cursor: str | Cursor | None = None,
        **params: Any,
    ) -> CursoredData[Any]:
        """Fetch one page of a cursored resource.

        Args:
            resource: Cursored resource
            id: Id of the tweet, user or list the page belongs to
            count: Page size, capped per resource
            cursor: ``next`` of the previous page (or its value)
            **params: Extra resource parameters (e.g. ``filter``)
        """
        self._expect(resource, ResultKind.CURSORED)
        if isinstance(cursor, Cursor):
            cursor = cursor.value
        return await self.fetch(resource, {"id": id, "count": count, "cursor": cursor, **params})

    async def mutate(self, resource: ResourceType, id: str) -> bool:
        """Run a boolean mutation (like, retweet) on ``id``."""
        self._expect(resource, ResultKind.BOOLEAN)
        return await self.fetch(resource, {"id": id})

    async def post_resource(
        self, resource: ResourceType, params: dict[str, Any]
    ) -> str | None:
        """Run a mutation that returns an id or nothing (tweet creation, upload phases)."""
        self._expect(resource, ResultKind.SCALAR_ID, ResultKind.ABSENT)
        return await self.fetch(resource, params)
