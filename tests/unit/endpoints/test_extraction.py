"""Unit tests for response extraction."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from rettiwt.api.core import CursorType, MalformedResponseError, ResourceType
from rettiwt.api.endpoints import extract
from rettiwt.api.models import CursoredData, Tweet, User


class TestCursoredExtraction:
    """Test timeline extraction."""

    def test_tweets_in_document_order_with_bottom_cursor(self, raw_tweet, timeline):
        response = timeline(
            [raw_tweet("1", "Mon Jan 01 00:00:01 +0000 2024"), raw_tweet("2")], cursor="next-1"
        )

        page = extract(ResourceType.USER_TWEETS, response)

        assert isinstance(page, CursoredData)
        assert [t.id for t in page.list] == ["1", "2"]
        assert page.next.value == "next-1"
        assert page.next.type is CursorType.BOTTOM

    def test_no_bottom_cursor_is_terminal(self, raw_tweet, timeline):
        page = extract(ResourceType.USER_MEDIA, timeline([raw_tweet("1")]))
        assert page.next is None

    @pytest.mark.parametrize("resource", [ResourceType.TWEET_SEARCH, ResourceType.LIST_TWEETS])
    def test_search_and_lists_sorted_newest_first(self, resource, raw_tweet, timeline):
        response = timeline(
            [
                raw_tweet("a", "Mon Jan 01 00:00:09 +0000 2024"),
                raw_tweet("c", "Mon Jan 01 00:00:07 +0000 2024"),
                raw_tweet("b", "Mon Jan 01 00:00:08 +0000 2024"),
            ]
        )

        page = extract(resource, response)

        assert [t.id for t in page.list] == ["a", "b", "c"]

    def test_other_timelines_keep_upstream_order(self, raw_tweet, timeline):
        response = timeline(
            [
                raw_tweet("c", "Mon Jan 01 00:00:07 +0000 2024"),
                raw_tweet("a", "Mon Jan 01 00:00:09 +0000 2024"),
            ]
        )
        assert [t.id for t in extract(ResourceType.USER_LIKES, response).list] == ["c", "a"]

    def test_entries_without_id_are_skipped(self, raw_tweet, timeline):
        broken = raw_tweet("x")
        del broken["rest_id"]
        tombstone = {"__typename": "TweetTombstone"}

        page = extract(ResourceType.USER_TWEETS, timeline([broken, tombstone, raw_tweet("ok")]))

        assert [t.id for t in page.list] == ["ok"]

    def test_user_timeline(self, raw_user, timeline):
        response = timeline(
            [raw_user("1", "a"), raw_user("2", "b")], cursor="c", item_type="TimelineUser"
        )

        page = extract(ResourceType.USER_FOLLOWERS, response)

        assert all(isinstance(u, User) for u in page.list)
        assert [u.user_name for u in page.list] == ["a", "b"]
        assert page.next.value == "c"

    def test_empty_object_gives_empty_page(self):
        page = extract(ResourceType.TWEET_LIKERS, {})
        assert page.list == []
        assert page.next is None

    @pytest.mark.parametrize("response", [None, [], "text", 3])
    def test_non_object_envelope_is_malformed(self, response):
        with pytest.raises(MalformedResponseError):
            extract(ResourceType.TWEET_SEARCH, response)


class TestEntityExtraction:
    """Test single tweet and user extraction."""

    def test_tweet_details(self, raw_tweet, raw_user):
        raw = raw_tweet(
            "10",
            text="hello #py @bob",
            user=raw_user("7", "alice"),
            entities={
                "hashtags": [{"text": "py"}],
                "user_mentions": [{"screen_name": "bob"}],
                "urls": [{"expanded_url": "https://example.com"}],
            },
            extended_entities={
                "media": [{"media_url_https": "https://img/1.jpg", "type": "photo"}]
            },
            quoted_status_id_str="3",
            in_reply_to_status_id_str="4",
        )

        tweet = extract(ResourceType.TWEET_DETAILS, {"data": {"tweetResult": {"result": raw}}})

        assert isinstance(tweet, Tweet)
        assert tweet.id == "10"
        assert tweet.full_text == "hello #py @bob"
        assert tweet.created_at == datetime(2024, 1, 1, 0, 0, 5, tzinfo=UTC)
        assert tweet.author.id == "7"
        assert tweet.entities.hashtags == ["py"]
        assert tweet.entities.mentioned_users == ["bob"]
        assert tweet.entities.urls == ["https://example.com"]
        assert tweet.media[0].type == "photo"
        assert tweet.quoted == "3"
        assert tweet.reply_to == "4"
        assert tweet.like_count == 2
        assert tweet.view_count == 42

    def test_visibility_wrapper_and_retweet(self, raw_tweet):
        original = raw_tweet("1", text="original")
        wrapped = {
            "__typename": "TweetWithVisibilityResults",
            "tweet": raw_tweet("2", text="RT", retweeted_status_result={"result": original}),
        }

        tweet = extract(ResourceType.TWEET_DETAILS, {"data": {"tweetResult": {"result": wrapped}}})

        assert tweet.id == "2"
        assert tweet.is_retweet
        assert tweet.retweeted_tweet.full_text == "original"

    def test_long_tweet_text_from_note(self, raw_tweet):
        raw = raw_tweet("1", text="short…")
        raw["note_tweet"] = {"note_tweet_results": {"result": {"text": "the long text"}}}

        tweet = extract(ResourceType.TWEET_DETAILS, {"data": {"tweetResult": {"result": raw}}})

        assert tweet.full_text == "the long text"

    def test_incomplete_media_is_dropped_not_the_tweet(self, raw_tweet):
        raw = raw_tweet(
            "1",
            extended_entities={
                "media": [
                    {"media_url_https": "https://x/y.jpg"},
                    {"media_url_https": "https://x/z.jpg", "type": "photo"},
                ]
            },
        )

        tweet = extract(ResourceType.TWEET_DETAILS, {"data": {"tweetResult": {"result": raw}}})

        assert tweet.id == "1"
        assert [m.url for m in tweet.media] == ["https://x/z.jpg"]

    def test_incomplete_entities_are_dropped_not_the_tweet(self, raw_tweet):
        raw = raw_tweet(
            "1",
            entities={
                "hashtags": [{"indices": [0, 3]}, {"text": "py"}],
                "user_mentions": [{"id_str": "5"}],
            },
        )

        tweet = extract(ResourceType.TWEET_DETAILS, {"data": {"tweetResult": {"result": raw}}})

        assert tweet.id == "1"
        assert tweet.entities.hashtags == ["py"]
        assert tweet.entities.mentioned_users == []

    def test_incomplete_nested_field_keeps_timeline_entry(self, raw_tweet, timeline):
        broken = raw_tweet("2", entities={"hashtags": [{}]})
        page = extract(ResourceType.USER_TWEETS, timeline([raw_tweet("1"), broken]))

        assert [t.id for t in page.list] == ["1", "2"]

    def test_missing_tweet_is_none(self):
        assert extract(ResourceType.TWEET_DETAILS, {"data": {"tweetResult": {}}}) is None

    def test_user_details(self, raw_user):
        raw = raw_user("7", "alice", pinned_tweet_ids_str=["99"], friends_count=8)
        raw["is_blue_verified"] = True

        user = extract(ResourceType.USER_DETAILS_BY_USERNAME, {"data": {"user": {"result": raw}}})

        assert user.id == "7"
        assert user.user_name == "alice"
        assert user.full_name == "Alice"
        assert user.is_verified
        assert user.followings_count == 8
        assert user.pinned_tweet == "99"

    def test_user_core_layout_takes_precedence(self, raw_user):
        raw = raw_user("7", "old")
        raw["core"] = {"screen_name": "new", "name": "New Name"}

        user = extract(ResourceType.USER_DETAILS_BY_ID, {"data": {"user": {"result": raw}}})

        assert user.user_name == "new"
        assert user.full_name == "New Name"

    def test_details_are_deterministic(self, raw_tweet):
        response = {"data": {"tweetResult": {"result": raw_tweet("1")}}}
        assert extract(ResourceType.TWEET_DETAILS, response) == extract(
            ResourceType.TWEET_DETAILS, response
        )


class TestMutationExtraction:
    """Test boolean and id results."""

    @pytest.mark.parametrize(
        ("resource", "marker"),
        [
            (ResourceType.TWEET_LIKE, "favorite_tweet"),
            (ResourceType.TWEET_RETWEET, "create_retweet"),
        ],
    )
    def test_boolean_markers(self, resource, marker):
        assert extract(resource, {"data": {marker: "Done"}}) is True
        assert extract(resource, {"data": {marker: {"retweet_results": {"result": {}}}}}) is True
        assert extract(resource, {"data": {marker: ""}}) is False
        assert extract(resource, {"data": {marker: {}}}) is False
        assert extract(resource, {"data": {}}) is False

    def test_boolean_non_object_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            extract(ResourceType.TWEET_LIKE, None)

    def test_tweet_create_returns_rest_id(self):
        response = {"data": {"create_tweet": {"tweet_results": {"result": {"rest_id": "555"}}}}}
        assert extract(ResourceType.TWEET_CREATE, response) == "555"
        assert extract(ResourceType.TWEET_CREATE, {"data": {}}) is None

    def test_upload_initialize_returns_media_id(self):
        response = {"media_id": 123, "media_id_string": "123", "expires_after_secs": 86400}
        assert extract(ResourceType.MEDIA_UPLOAD_INITIALIZE, response) == "123"

    @pytest.mark.parametrize(
        "resource", [ResourceType.MEDIA_UPLOAD_APPEND, ResourceType.MEDIA_UPLOAD_FINALIZE]
    )
    def test_absent_results_accept_empty_body(self, resource):
        assert extract(resource, None) is None
        assert extract(resource, {"media_id_string": "1"}) is None
