"""Rettiwt: async client for the web API of X (formerly Twitter).

Works as a guest or with the cookies of a logged-in session. Every resource
goes through one pipeline: the registry describes the request, the runner
sends it once, and the resource's adapter turns the raw JSON into a boolean,
an id, an entity or a cursored page.
"""

from .auth import AuthCredential
from .client import Rettiwt
from .config import RettiwtConfig, configure_logging
from .core.enums import CursorType, ResourceType, ResultKind
from .core.exceptions import (
    AuthenticationRequiredError,
    InvalidArgumentError,
    MalformedResponseError,
    RateLimitError,
    RettiwtError,
    TransportError,
    UploadInitError,
    UploadPhaseError,
)
from .endpoints import ResourceDescriptor, describe, extract
from .models import (
    Cursor,
    CursoredData,
    Tweet,
    TweetArgs,
    TweetEntities,
    TweetFilter,
    TweetMedia,
    TweetMediaArgs,
    UploadedMedia,
    User,
)
from .runtime import TweetStream
from .services import AuthService, FetcherService, TweetService, UserService

__version__ = "0.1.0"

__all__ = [
    # Client
    "Rettiwt",
    "RettiwtConfig",
    "configure_logging",
    "AuthCredential",
    # Services
    "AuthService",
    "FetcherService",
    "TweetService",
    "UserService",
    "TweetStream",
    # Registry
    "ResourceDescriptor",
    "describe",
    "extract",
    # Enums
    "CursorType",
    "ResourceType",
    "ResultKind",
    # Models
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
    # Exceptions
    "RettiwtError",
    "InvalidArgumentError",
    "AuthenticationRequiredError",
    "TransportError",
    "RateLimitError",
    "MalformedResponseError",
    "UploadPhaseError",
    "UploadInitError",
]
