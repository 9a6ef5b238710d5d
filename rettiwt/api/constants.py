"""Shared upstream constants.

This module centralizes URLs, GraphQL operation ids and feature flags used by
the endpoint specs so each endpoint module can stay small and focused.
"""

from __future__ import annotations

# Public web-client bearer token (same for every client)
BEARER_TOKEN = (
    "AAAAAAAAAAAAAAAAAAAAANRILgAAAAAAnNwIzUejRCOuH5E6I8xnZz4puTs"
    "%3D1Zv7ttfk8LF81IUq16cHjhLTvJu4FA33AGWWjCpTnA"
)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)

GRAPHQL_URL = "https://x.com/i/api/graphql"
UPLOAD_URL = "https://upload.twitter.com/1.1/media/upload.json"
GUEST_ACTIVATE_URL = "https://api.twitter.com/1.1/guest/activate.json"

# GraphQL operations, "<query id>/<operation name>"
OP_LIST_LATEST_TWEETS = "BkauSnPUDQTeeJsxq17opA/ListLatestTweetsTimeline"
OP_TWEET_RESULT_BY_REST_ID = "Xl5pC_lBk_gcO2ItU39DQw/TweetResultByRestId"
OP_CREATE_TWEET = "Uf3io9zVp1DsYxrmL5FJ7g/CreateTweet"
OP_FAVORITE_TWEET = "lI07N6Otwv1PhnEgXILM7A/FavoriteTweet"
OP_FAVORITERS = "LLkw5EcVutJL6y-2gkz22A/Favoriters"
OP_CREATE_RETWEET = "ojPdsZsimiJrUGLR1sjUtA/CreateRetweet"
OP_RETWEETERS = "IQ43ps3iEcdrGV_OL1QaRw/Retweeters"
OP_SEARCH_TIMELINE = "bshMIjqDk8LTXTq4w91WKw/SearchTimeline"
OP_USER_BY_SCREEN_NAME = "-oaLodhGbbnzJBACb1kk2Q/UserByScreenName"
OP_USER_BY_REST_ID = "WJ7rCtezBVT6nk6VM5R8Bw/UserByRestId"
OP_FOLLOWING = "S5xUN9s2v4xk50KWGGvyvQ/Following"
OP_FOLLOWERS = "SCu9fVIlCUm-BM8-tL5pkQ/Followers"
OP_USER_HIGHLIGHTS = "Tqc024Ekm_5Bq8eR7BvAKA/UserHighlightsTweets"
OP_LIKES = "eSSNbhECHHWWALkkQq-YTA/Likes"
OP_USER_MEDIA = "vFPc2LVIu7so2uA_gHQAdg/UserMedia"
OP_USER_SUBSCRIPTIONS = "7qcGrVKpcooih_VvJLA1ng/UserCreatorSubscriptions"
OP_USER_TWEETS = "lZRf8IC-GTuGxDwcsHW8aw/UserTweets"
OP_USER_TWEETS_AND_REPLIES = "gXCeOBFsTOuimuCl1qXimg/UserTweetsAndReplies"

# Upstream page-size caps
MAX_SEARCH_COUNT = 20
MAX_LIST_COUNT = 100
DEFAULT_COUNT = 20

# Feature flags expected by the GraphQL endpoints
GRAPHQL_FEATURES: dict[str, bool] = {
    "articles_preview_enabled": True,
    "c9s_tweet_anatomy_moderator_badge_enabled": True,
    "communities_web_enable_tweet_community_results_fetch": True,
    "creator_subscriptions_quote_tweet_preview_enabled": False,
    "creator_subscriptions_tweet_preview_api_enabled": True,
    "freedom_of_speech_not_reach_fetch_enabled": True,
    "graphql_is_translatable_rweb_tweet_is_translatable_enabled": True,
    "longform_notetweets_consumption_enabled": True,
    "longform_notetweets_inline_media_enabled": True,
    "longform_notetweets_rich_text_read_enabled": True,
    "responsive_web_edit_tweet_api_enabled": True,
    "responsive_web_enhance_cards_enabled": False,
    "responsive_web_graphql_exclude_directive_enabled": True,
    "responsive_web_graphql_skip_user_profile_image_extensions_enabled": False,
    "responsive_web_graphql_timeline_navigation_enabled": True,
    "responsive_web_twitter_article_tweet_consumption_enabled": True,
    "rweb_tipjar_consumption_enabled": True,
    "standardized_nudges_misinfo": True,
    "tweet_awards_web_tipping_enabled": False,
    "tweet_with_visibility_results_prefer_gql_limited_actions_policy_enabled": True,
    "verified_phone_label_enabled": False,
    "view_counts_everywhere_api_enabled": True,
}

# Max length of a tweet's text and attached media per tweet
MAX_TWEET_LENGTH = 280
MAX_TWEET_MEDIA = 4
