"""Data models.

Architecture:
    All domain models are immutable Pydantic v2 models (frozen=True). They are
    built only by the extraction layer from raw upstream responses, or by the
    caller as request arguments.

Model Categories:
    - Entities: Tweet, User (with TweetEntities, TweetMedia)
    - Pagination: Cursor, CursoredData
    - Arguments: TweetFilter, TweetArgs, TweetMediaArgs, UploadedMedia
"""

from .args import TweetArgs, TweetFilter, TweetMediaArgs, UploadedMedia
from .cursored_data import Cursor, CursoredData
from .tweet import Tweet, TweetEntities, TweetMedia
from .user import User

__all__ = [
    "Cursor",
    "CursoredData",
    "Tweet",
    "TweetArgs",
    "TweetEntities",
    "TweetFilter",
    "TweetMedia",
    "TweetMediaArgs",
    "UploadedMedia",
    "User",
]
