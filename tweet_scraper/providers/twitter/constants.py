"""Twitter API constants.

Endpoint URLs, the public web-client bearer token and the fixed search
parameters live here so the encoder, decoder and credential bootstrap
share one copy.
"""

from __future__ import annotations

import re

SEARCH_URL = "https://api.twitter.com/2/search/adaptive.json"
EXPLORE_URL = "https://twitter.com/explore"

# Bearer token shipped with the public web client
BEARER_TOKEN = (
    "AAAAAAAAAAAAAAAAAAAAANRILgAAAAAAnNwIzUejRCOuH5E6I8xnZz4puTs%3D"
    "1Zv7ttfk8LF81IUq16cHjhLTvJu4FA33AGWWjCpTnA"
)

GUEST_TOKEN_COOKIE = "gt"
AUTHORIZATION_HEADER = "authorization"
GUEST_TOKEN_HEADER = "x-guest-token"

# Static query parameters; they tune payload richness server-side.
# Order is kept so generated URLs are stable.
STATIC_SEARCH_PARAMS: tuple[tuple[str, str], ...] = (
    ("include_profile_interstitial_type", "1"),
    ("include_blocking", "1"),
    ("include_blocked_by", "1"),
    ("include_followed_by", "1"),
    ("include_want_retweets", "1"),
    ("include_mute_edge", "1"),
    ("include_can_dm", "1"),
    ("include_can_media_tag", "1"),
    ("skip_status", "1"),
    ("cards_platform", "Web-12"),
    ("include_cards", "1"),
    ("include_ext_alt_text", "true"),
    ("include_quote_count", "true"),
    ("include_reply_count", "1"),
    ("tweet_mode", "extended"),
    ("include_entities", "true"),
    ("include_user_entities", "true"),
    ("include_ext_media_color", "true"),
    ("include_ext_media_availability", "true"),
    ("send_error_codes", "true"),
    ("simple_quoted_tweet", "true"),
    ("query_source", "typed_query"),
    ("pc", "1"),
    ("spelling_corrections", "1"),
    ("ext", "mediaStats,highlightedLabel"),
    ("count", "20"),
    ("tweet_search_mode", "live"),
)

# First scroll-continuation token in the serialized timeline
CURSOR_PATTERN = re.compile(r'"(scroll:[^"]+)"')

# Field names inside a tweet object
USER_ID_FIELD = "user_id_str"
EMBEDDED_USER_FIELD = "user"
