"""User operations."""

from __future__ import annotations

from ..core.enums import ResourceType
from ..models import Cursor, CursoredData, Tweet, User
from .fetcher import FetcherService


class UserService(FetcherService):
    """Read user profiles and user timelines.

    All list methods take the numeric id of the user.
    """

    async def details(self, id_or_username: str) -> User | None:
        """Get a user by numeric id or by username (with or without "@")."""
        if id_or_username.isdigit():
            return await self.fetch_details(ResourceType.USER_DETAILS_BY_ID, id_or_username)
        return await self.fetch_details(
            ResourceType.USER_DETAILS_BY_USERNAME, id_or_username.lstrip("@")
        )

    async def following(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[User]:
        return await self.fetch_list(ResourceType.USER_FOLLOWING, id, count=count, cursor=cursor)

    async def followers(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[User]:
        return await self.fetch_list(ResourceType.USER_FOLLOWERS, id, count=count, cursor=cursor)

    async def highlights(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[Tweet]:
        return await self.fetch_list(ResourceType.USER_HIGHLIGHTS, id, count=count, cursor=cursor)

    async def likes(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[Tweet]:
        """Tweets liked by the user. Upstream only allows this for the logged-in user."""
        return await self.fetch_list(ResourceType.USER_LIKES, id, count=count, cursor=cursor)

    async def media(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[Tweet]:
        return await self.fetch_list(ResourceType.USER_MEDIA, id, count=count, cursor=cursor)

    async def subscriptions(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[User]:
        return await self.fetch_list(
            ResourceType.USER_SUBSCRIPTIONS, id, count=count, cursor=cursor
        )

    async def timeline(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[Tweet]:
        """Tweets posted by the user. Available to guests."""
        return await self.fetch_list(ResourceType.USER_TWEETS, id, count=count, cursor=cursor)

    async def replies(
        self, id: str, count: int | None = None, cursor: str | Cursor | None = None
    ) -> CursoredData[Tweet]:
        return await self.fetch_list(
            ResourceType.USER_TWEETS_AND_REPLIES, id, count=count, cursor=cursor
        )
