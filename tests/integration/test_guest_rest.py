"""Integration tests against the live upstream API."""

import os

import pytest

from rettiwt.api import Rettiwt, RettiwtConfig, TweetFilter

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_RETTIWT_NETWORK_TESTS") != "1",
    reason="Requires network access to the upstream API",
)


class TestGuestIntegration:
    """Guest-accessible resources."""

    @pytest.mark.asyncio
    async def test_guest_token_then_user_details(self):
        async with Rettiwt() as bootstrap:
            token = await bootstrap.auth.guest()
        assert token

        async with Rettiwt(RettiwtConfig(guest_key=token)) as rettiwt:
            user = await rettiwt.user.details("X")
            assert user is not None
            assert user.user_name.lower() == "x"

            page = await rettiwt.user.timeline(user.id, count=5)
            assert all(t.id for t in page.list)


class TestUserIntegration:
    """Resources that need a logged-in session."""

    @pytest.mark.asyncio
    async def test_search_pages_are_newest_first(self, api_key):
        async with Rettiwt(RettiwtConfig(api_key=api_key)) as rettiwt:
            page = await rettiwt.tweet.search(TweetFilter(words=["python"]), count=10)

        dates = [t.created_at for t in page.list if t.created_at]
        assert dates == sorted(dates, reverse=True)
