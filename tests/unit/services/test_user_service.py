"""Unit tests for UserService."""

from __future__ import annotations

import json

import pytest

from rettiwt.api.constants import OP_USER_BY_REST_ID, OP_USER_BY_SCREEN_NAME
from rettiwt.api.core import AuthenticationRequiredError
from rettiwt.api.services import UserService


@pytest.fixture
def service(mock_transport, user_credential):
    return UserService(user_credential, mock_transport)


def _variables(mock_transport) -> dict:
    return json.loads(mock_transport.send.call_args.kwargs["params"]["variables"])


class TestUserDetails:
    """Test id / username dispatch."""

    @pytest.mark.asyncio
    async def test_numeric_input_looks_up_by_id(self, service, mock_transport, raw_user):
        mock_transport.send.return_value = {"data": {"user": {"result": raw_user("12")}}}

        user = await service.details("12")

        assert user.id == "12"
        assert mock_transport.send.call_args.args[1].endswith(OP_USER_BY_REST_ID)
        assert _variables(mock_transport)["userId"] == "12"

    @pytest.mark.asyncio
    async def test_username_lookup_strips_at(self, service, mock_transport, raw_user):
        mock_transport.send.return_value = {"data": {"user": {"result": raw_user("12", "jack")}}}

        user = await service.details("@jack")

        assert user.user_name == "jack"
        assert mock_transport.send.call_args.args[1].endswith(OP_USER_BY_SCREEN_NAME)
        assert _variables(mock_transport)["screen_name"] == "jack"

    @pytest.mark.asyncio
    async def test_unknown_user_is_none(self, service, mock_transport):
        mock_transport.send.return_value = {"data": {}}
        assert await service.details("nobody") is None

    @pytest.mark.asyncio
    async def test_guest_may_read_profile_and_timeline(
        self, mock_transport, guest_credential, raw_tweet, timeline
    ):
        service = UserService(guest_credential, mock_transport)
        mock_transport.send.side_effect = [{"data": {}}, timeline([raw_tweet("1")])]

        await service.details("jack")
        page = await service.timeline("12")

        assert [t.id for t in page.list] == ["1"]

    @pytest.mark.asyncio
    async def test_guest_cannot_list_followers(self, mock_transport, guest_credential):
        service = UserService(guest_credential, mock_transport)
        with pytest.raises(AuthenticationRequiredError):
            await service.followers("12")
        mock_transport.send.assert_not_called()


class TestUserLists:
    """Test that each list method hits its own operation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "operation", "item_type"),
        [
            ("following", "Following", "TimelineUser"),
            ("followers", "Followers", "TimelineUser"),
            ("subscriptions", "UserCreatorSubscriptions", "TimelineUser"),
            ("highlights", "UserHighlightsTweets", "TimelineTweet"),
            ("likes", "Likes", "TimelineTweet"),
            ("media", "UserMedia", "TimelineTweet"),
            ("timeline", "UserTweets", "TimelineTweet"),
            ("replies", "UserTweetsAndReplies", "TimelineTweet"),
        ],
    )
    async def test_list_methods(
        self, service, mock_transport, raw_tweet, raw_user, timeline, method, operation, item_type
    ):
        item = raw_user("5") if item_type == "TimelineUser" else raw_tweet("5")
        mock_transport.send.return_value = timeline([item], cursor="n", item_type=item_type)

        page = await getattr(service, method)("12", count=40, cursor="c")

        assert page.list[0].id == "5"
        assert page.next.value == "n"
        assert mock_transport.send.call_args.args[1].endswith(f"/{operation}")
        variables = _variables(mock_transport)
        assert variables["userId"] == "12"
        assert variables["count"] == 40
        assert variables["cursor"] == "c"
