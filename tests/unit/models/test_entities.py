"""Unit tests for entity and pagination models."""

import pytest
from pydantic import ValidationError

from rettiwt.api.core import CursorType
from rettiwt.api.models import Cursor, CursoredData, Tweet, User


def test_entities_require_non_empty_id():
    with pytest.raises(ValidationError):
        Tweet(id="")
    with pytest.raises(ValidationError):
        User(id="")


def test_tweet_url_and_retweet_flag():
    author = User(id="1", user_name="alice")
    original = Tweet(id="5", author=author)
    retweet = Tweet(id="6", author=author, retweeted_tweet=original)
    assert original.url == "https://x.com/alice/status/5"
    assert not original.is_retweet
    assert retweet.is_retweet
    assert author.profile_url == "https://x.com/alice"


def test_entities_are_immutable():
    user = User(id="1")
    with pytest.raises(ValidationError):
        user.user_name = "bob"


def test_cursored_data_terminal_page():
    page = CursoredData[Tweet](list=[Tweet(id="1")])
    assert page.next is None
    assert not page.has_more


def test_cursored_data_with_next_cursor():
    page = CursoredData[User](list=[], next=Cursor(value="abc"))
    assert page.has_more
    assert page.next.type is CursorType.BOTTOM


def test_cursor_value_must_be_non_empty():
    with pytest.raises(ValidationError):
        Cursor(value="")
