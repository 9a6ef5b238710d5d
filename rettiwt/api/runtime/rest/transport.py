"""REST transport: the single network boundary of the library."""

from __future__ import annotations

from typing import Any

import aiohttp

from ...constants import USER_AGENT
from ...core.exceptions import TransportError
from .http_client import HTTPClient


def _form_data(form: dict[str, Any]) -> aiohttp.FormData | dict[str, str]:
    """Encode a form; switches to multipart when any value is binary."""
    if not any(isinstance(v, (bytes, bytearray)) for v in form.values()):
        return {k: str(v) for k, v in form.items()}

    data = aiohttp.FormData()
    for key, value in form.items():
        if isinstance(value, (bytes, bytearray)):
            data.add_field(
                key,
                bytes(value),
                filename="blob",
                content_type="application/octet-stream",
            )
        else:
            data.add_field(key, str(value))
    return data


def _raise_for_error_envelope(data: Any) -> None:
    """Raise on an upstream ``{"errors": [...]}`` envelope that carries no data."""
    if not isinstance(data, dict) or "errors" not in data or data.get("data"):
        return
    errors = data.get("errors") or []
    first = errors[0] if isinstance(errors, list) and errors else {}
    if not isinstance(first, dict):
        first = {"message": str(first)}
    raise TransportError(
        f"Upstream error: {first.get('message', 'unknown error')}",
        code=first.get("code"),
    )


class RESTTransport:
    """Sends fully-built requests and returns the raw decoded response."""

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        proxy: str | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        self._http = http or HTTPClient(timeout=timeout, proxy=proxy)

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        form: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request.

        Args:
            method: HTTP method ("GET" | "POST")
            url: Absolute URL
            headers: Request headers (auth headers included)
            params: Query string parameters
            json_body: JSON body
            form: Form fields; bytes values make it multipart

        Returns:
            Decoded JSON, or None for an empty body
        """
        merged = {"user-agent": USER_AGENT, **(headers or {})}
        data = _form_data(form) if form is not None else None
        response = await self._http.request(
            method.upper(),
            url,
            params=params,
            json_body=json_body,
            data=data,
            headers=merged,
        )
        _raise_for_error_envelope(response)
        return response

    async def close(self) -> None:
        await self._http.close()
