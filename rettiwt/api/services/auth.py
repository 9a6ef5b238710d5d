"""Guest authentication."""

from __future__ import annotations

import logging

from ..auth import AuthCredential
from ..constants import GUEST_ACTIVATE_URL
from ..core.exceptions import MalformedResponseError
from ..runtime.rest import RESTTransport

logger = logging.getLogger(__name__)


class AuthService:
    """Obtains guest tokens.

    Logging in as a user is not handled here; a user credential is the
    cookie string of an existing session, passed as ``api_key``.
    """

    def __init__(self, transport: RESTTransport) -> None:
        self._transport = transport

    async def guest(self) -> str:
        """Activate and return a new guest token.

        Raises:
            TransportError: If the activation request failed
            MalformedResponseError: If the response carries no token
        """
        data = await self._transport.send(
            "POST", GUEST_ACTIVATE_URL, headers=AuthCredential.guest().headers()
        )
        token = data.get("guest_token") if isinstance(data, dict) else None
        if not token:
            raise MalformedResponseError("Guest activation returned no guest_token")
        logger.debug("Guest token activated")
        return str(token)
