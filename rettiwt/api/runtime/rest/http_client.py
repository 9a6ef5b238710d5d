"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from ...core.exceptions import RateLimitError, TransportError

logger = logging.getLogger(__name__)


def _retry_after(headers: Any) -> int | None:
    value = headers.get("Retry-After") if headers else None
    try:
        return int(float(value)) if value is not None else None
    except (TypeError, ValueError):
        return None


class HTTPClient:
    """Async HTTP client wrapper.

    Owns one lazily-created ``aiohttp.ClientSession``. Every call performs
    exactly one request; failures are mapped onto ``TransportError`` and
    never retried here.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        proxy: str | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.proxy = proxy
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Perform one request and decode its JSON body.

        Returns:
            Decoded JSON, or None when the response body is empty.

        Raises:
            RateLimitError: On HTTP 429.
            TransportError: On any other network, status or decoding failure.
        """
        try:
            async with self.session.request(
                method,
                url,
                params=params,
                json=json_body,
                data=data,
                headers=headers,
                proxy=self.proxy,
            ) as response:
                status = response.status
                text = await response.text()
                if status == 429:
                    raise RateLimitError(
                        f"Rate limit exceeded for {url}",
                        retry_after=_retry_after(response.headers),
                    )
                if status >= 400:
                    raise TransportError(
                        f"HTTP {status} from {url}: {text[:200]}",
                        status_code=status,
                    )
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {url} timed out") from e

        logger.debug("HTTP response", extra={"url": url, "status": status})

        if not text or not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise TransportError(
                f"Malformed JSON from {url}", status_code=status
            ) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()
