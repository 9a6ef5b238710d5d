"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import ResourceType


class RettiwtError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidArgumentError(RettiwtError):
    """A request parameter is missing or malformed.

    Always raised before any network call is made.
    """

    def __init__(self, message: str, resource: ResourceType | None = None) -> None:
        super().__init__(message)
        self.resource = resource


class AuthenticationRequiredError(RettiwtError):
    """Resource needs a user credential but the client runs as guest."""

    def __init__(self, message: str, resource: ResourceType | None = None) -> None:
        super().__init__(message)
        self.resource = resource


class TransportError(RettiwtError):
    """Network or HTTP-layer failure talking to the upstream API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class RateLimitError(TransportError):
    """Upstream rate limit exceeded."""

    def __init__(self, message: str, retry_after: int | None = None) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class MalformedResponseError(RettiwtError):
    """Response envelope does not have the shape extraction expects."""

    pass


class UploadPhaseError(RettiwtError):
    """One of the three media upload phases failed.

    The remaining phases are not attempted.
    """

    def __init__(self, message: str, phase: str) -> None:
        super().__init__(message)
        self.phase = phase


class UploadInitError(UploadPhaseError):
    """Upload initialization returned no media id."""

    def __init__(self, message: str) -> None:
        super().__init__(message, phase="initialize")
