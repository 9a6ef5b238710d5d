"""Authentication context attached to every request.

The library never produces or decodes a user credential: the api key handed
to it is forwarded verbatim as the cookie header. The only thing read from it
is the ``ct0`` cookie, which upstream also expects echoed back as the CSRF
header.
"""

from __future__ import annotations

from dataclasses import dataclass
from http.cookies import CookieError, SimpleCookie

from .constants import BEARER_TOKEN


def _csrf_token(cookie: str) -> str | None:
    jar = SimpleCookie()
    try:
        jar.load(cookie)
    except CookieError:
        return None
    morsel = jar.get("ct0")
    return morsel.value if morsel else None


@dataclass(frozen=True)
class AuthCredential:
    """Guest or user credential.

    Build with ``AuthCredential.guest()`` or ``AuthCredential.user(api_key)``.
    """

    api_key: str | None = None
    guest_token: str | None = None

    @classmethod
    def guest(cls, guest_token: str | None = None) -> AuthCredential:
        return cls(guest_token=guest_token)

    @classmethod
    def user(cls, api_key: str) -> AuthCredential:
        if not api_key:
            raise ValueError("api_key must be a non-empty string")
        return cls(api_key=api_key)

    @property
    def is_authenticated(self) -> bool:
        return self.api_key is not None

    def headers(self) -> dict[str, str]:
        """Headers identifying this credential to upstream."""
        headers = {
            "authorization": f"Bearer {BEARER_TOKEN}",
            "x-twitter-active-user": "yes",
            "x-twitter-client-language": "en",
        }
        if self.api_key is not None:
            headers["cookie"] = self.api_key
            headers["x-twitter-auth-type"] = "OAuth2Session"
            csrf = _csrf_token(self.api_key)
            if csrf:
                headers["x-csrf-token"] = csrf
        elif self.guest_token:
            headers["x-guest-token"] = self.guest_token
        return headers
