"""Public services built on the fetch-extract pipeline."""

from .auth import AuthService
from .fetcher import FetcherService
from .tweet import TweetService
from .user import UserService

__all__ = [
    "AuthService",
    "FetcherService",
    "TweetService",
    "UserService",
]
