"""Tweet operations."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..core.enums import ResourceType
from ..core.exceptions import (
    InvalidArgumentError,
    MalformedResponseError,
    TransportError,
    UploadInitError,
    UploadPhaseError,
)
from ..models import (
    Cursor,
    CursoredData,
    Tweet,
    TweetArgs,
    TweetFilter,
    TweetMediaArgs,
    UploadedMedia,
    User,
)
from ..runtime.stream import TweetStream
from .fetcher import FetcherService, invalid_argument

logger = logging.getLogger(__name__)

MediaSource = str | os.PathLike[str] | bytes


def _as_filter(search_filter: TweetFilter | dict[str, Any]) -> TweetFilter:
    if isinstance(search_filter, TweetFilter):
        return search_filter
    try:
        return TweetFilter.model_validate(search_filter)
    except ValidationError as e:
        raise invalid_argument(e, ResourceType.TWEET_SEARCH) from e


def _as_media_args(item: Any) -> Any:
    if isinstance(item, (str, bytes, os.PathLike)):
        return {"path": item}
    return item


class TweetService(FetcherService):
    """Read, search, stream and post tweets."""

    async def details(self, id: str) -> Tweet | None:
        """Get a tweet by id; None if it does not exist."""
        return await self.fetch_details(ResourceType.TWEET_DETAILS, id)

    async def like(self, id: str) -> bool:
        return await self.mutate(ResourceType.TWEET_LIKE, id)

    async def likers(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[User]:
        return await self.fetch_list(ResourceType.TWEET_LIKERS, id, count=count, cursor=cursor)

    async def list(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[Tweet]:
        """Latest tweets of a list, most recent first."""
        return await self.fetch_list(ResourceType.LIST_TWEETS, id, count=count, cursor=cursor)

    async def retweet(self, id: str) -> bool:
        return await self.mutate(ResourceType.TWEET_RETWEET, id)

    async def retweeters(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[User]:
        return await self.fetch_list(
            ResourceType.TWEET_RETWEETERS, id, count=count, cursor=cursor
        )

    async def search(
        self,
        search_filter: TweetFilter | dict[str, Any],
        count: int | None = None,
        cursor: str | Cursor | None = None,
    ) -> CursoredData[Tweet]:
        """Search tweets, most recent first.

        Args:
            search_filter: Filter (or its fields as a dict)
            count: Page size, at most 20
            cursor: Cursor of the previous page
        """
        return await self.fetch_list(
            ResourceType.TWEET_SEARCH,
            count=count,
            cursor=cursor,
            filter=_as_filter(search_filter),
        )

    def stream(
        self,
        search_filter: TweetFilter | dict[str, Any],
        polling_interval: float = 60.0,
    ) -> TweetStream:
        """Stream new tweets matching a filter by polling the search.

        Args:
            search_filter: Filter (or its fields as a dict)
            polling_interval: Seconds (float, not milliseconds) to wait between
                polling rounds
        """

        async def search(round_filter: TweetFilter, cursor: str | None) -> CursoredData[Tweet]:
            return await self.search(round_filter, cursor=cursor)

        return TweetStream(search, _as_filter(search_filter), polling_interval)

    async def post(
        self,
        text: str,
        *,
        media: list[Any] | None = None,
        quote: str | None = None,
        reply_to: str | None = None,
    ) -> str | None:
        """Post a tweet; attached media is uploaded first.

        Args:
            text: Tweet text (1..280 characters)
            media: Up to 4 items, each a ``TweetMediaArgs``, a path or raw bytes
            quote: Id of the tweet to quote
            reply_to: Id of the tweet to reply to

        Returns:
            Id of the new tweet, or None if upstream returned none
        """
        try:
            args = TweetArgs(
                text=text,
                media=[_as_media_args(m) for m in media or []],
                quote=quote,
                reply_to=reply_to,
            )
        except ValidationError as e:
            raise invalid_argument(e, ResourceType.TWEET_CREATE) from e

        uploaded = [
            UploadedMedia(id=await self.upload(m.path), tags=m.tags) for m in args.media
        ]
        return await self.post_resource(
            ResourceType.TWEET_CREATE,
            {
                "text": args.text,
                "media": uploaded,
                "quote": args.quote,
                "reply_to": args.reply_to,
            },
        )

    async def _upload_phase(
        self, phase: str, resource: ResourceType, params: dict[str, Any]
    ) -> str | None:
        try:
            return await self.post_resource(resource, params)
        except (TransportError, MalformedResponseError) as e:
            raise UploadPhaseError(f"Media upload {phase} failed: {e}", phase=phase) from e

    async def upload(self, media: MediaSource | TweetMediaArgs) -> str:
        """Upload media for a later tweet.

        Runs INITIALIZE, APPEND and FINALIZE strictly in order; a failing
        phase aborts the upload. The returned id must be used within 24 hours.

        Args:
            media: File path or raw bytes

        Returns:
            Uploaded media id

        Raises:
            InvalidArgumentError: If the media cannot be read or is empty
            UploadInitError: If initialization returned no media id
            UploadPhaseError: If a phase failed
        """
        if isinstance(media, TweetMediaArgs):
            media = media.path
        if isinstance(media, (bytes, bytearray)):
            payload = bytes(media)
        else:
            try:
                payload = await asyncio.to_thread(Path(media).read_bytes)
            except OSError as e:
                raise InvalidArgumentError(
                    f"Cannot read media {media}: {e}", ResourceType.MEDIA_UPLOAD_INITIALIZE
                ) from e
        if not payload:
            raise InvalidArgumentError(
                "Media must not be empty", ResourceType.MEDIA_UPLOAD_INITIALIZE
            )

        media_id = await self._upload_phase(
            "initialize", ResourceType.MEDIA_UPLOAD_INITIALIZE, {"size": len(payload)}
        )
        if not media_id:
            raise UploadInitError("Media upload initialization returned no media id")

        await self._upload_phase(
            "append", ResourceType.MEDIA_UPLOAD_APPEND, {"id": media_id, "media": payload}
        )
        await self._upload_phase("finalize", ResourceType.MEDIA_UPLOAD_FINALIZE, {"id": media_id})

        logger.debug("Media uploaded", extra={"media_id": media_id, "size": len(payload)})
        return media_id
