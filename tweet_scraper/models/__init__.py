"""Data models for search requests and results.

All models are Pydantic v2 and immutable (frozen=True). Tweets keep the raw
API payload as extra fields, so nothing returned by the API is lost.
"""

from .page import SearchPage
from .request import PageRequest, SearchRequest
from .tweet import Tweet

__all__ = [
    "PageRequest",
    "SearchPage",
    "SearchRequest",
    "Tweet",
]
