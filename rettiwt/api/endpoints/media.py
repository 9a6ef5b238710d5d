"""Media upload endpoint definitions and adapters.

Upload is a three-command protocol against the same URL: INIT announces the
total size and returns a media id, APPEND sends the bytes, FINALIZE seals the
upload. Uploaded media must be attached to a tweet within 24 hours.
"""

from __future__ import annotations

from typing import Any

from ..constants import UPLOAD_URL
from ..core.enums import ResourceType, ResultKind
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .timeline import ensure_object

INITIALIZE_SPEC = RestEndpointSpec(
    id=ResourceType.MEDIA_UPLOAD_INITIALIZE,
    method="POST",
    build_url=lambda p: UPLOAD_URL,
    build_form=lambda p: {"command": "INIT", "total_bytes": p["size"]},
    required=("size",),
)


class InitializeAdapter(ResponseAdapter):
    kind = ResultKind.SCALAR_ID

    def parse(self, response: Any, params: dict[str, Any]) -> str | None:
        data = ensure_object(response, "MEDIA_UPLOAD_INITIALIZE")
        media_id = data.get("media_id_string")
        return str(media_id) if media_id else None


def _append_form(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "command": "APPEND",
        "media_id": params["id"],
        "segment_index": 0,
        "media": params["media"],
    }


APPEND_SPEC = RestEndpointSpec(
    id=ResourceType.MEDIA_UPLOAD_APPEND,
    method="POST",
    build_url=lambda p: UPLOAD_URL,
    build_form=_append_form,
    required=("id", "media"),
)

FINALIZE_SPEC = RestEndpointSpec(
    id=ResourceType.MEDIA_UPLOAD_FINALIZE,
    method="POST",
    build_url=lambda p: UPLOAD_URL,
    build_form=lambda p: {"command": "FINALIZE", "media_id": p["id"]},
    required=("id",),
)


class AppendAdapter(ResponseAdapter):
    """Upstream acknowledges APPEND with an empty body."""

    kind = ResultKind.ABSENT

    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None


class FinalizeAdapter(ResponseAdapter):
    kind = ResultKind.ABSENT

    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None
