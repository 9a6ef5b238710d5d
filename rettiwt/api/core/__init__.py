"""Core components."""

from .enums import CursorType, ResourceType, ResultKind
from .exceptions import (
    AuthenticationRequiredError,
    InvalidArgumentError,
    MalformedResponseError,
    RateLimitError,
    RettiwtError,
    TransportError,
    UploadInitError,
    UploadPhaseError,
)

__all__ = [
    "CursorType",
    "ResourceType",
    "ResultKind",
    "RettiwtError",
    "InvalidArgumentError",
    "AuthenticationRequiredError",
    "TransportError",
    "RateLimitError",
    "MalformedResponseError",
    "UploadPhaseError",
    "UploadInitError",
]
