"""Rettiwt client facade.

Architecture:
    ``Rettiwt`` wires one transport and one credential into the services and
    owns the HTTP session they share. Services can also be built directly
    from a credential and a transport, which is what the tests do.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import RettiwtConfig, configure_logging
from .runtime.rest import RESTTransport
from .services import AuthService, TweetService, UserService

logger = logging.getLogger(__name__)


class Rettiwt:
    """Entry point of the library.

    Example:
        >>> async with Rettiwt(RettiwtConfig(api_key=cookies)) as rettiwt:
        ...     page = await rettiwt.tweet.search({"from_users": ["jack"]})
        ...     for tweet in page.list:
        ...         print(tweet.full_text)
    """

    def __init__(
        self,
        config: RettiwtConfig | None = None,
        *,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client options (guest mode when omitted)
            transport: Optional transport (one is built from the config if not provided)
        """
        self.config = config or RettiwtConfig()
        configure_logging(self.config)
        self._owns_transport = transport is None
        self._transport = transport or RESTTransport(
            timeout=self.config.timeout, proxy=self.config.proxy_url
        )
        credential = self.config.credential
        self.tweet = TweetService(credential, self._transport)
        self.user = UserService(credential, self._transport)
        self.auth = AuthService(self._transport)
        self._closed = False
        logger.debug(
            "Client created",
            extra={
                "authenticated": credential.is_authenticated,
                "proxy": bool(self.config.proxy_url),
            },
        )

    @property
    def is_authenticated(self) -> bool:
        return self.tweet.credential.is_authenticated

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._closed:
            return
        self._closed = True
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> Rettiwt:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
