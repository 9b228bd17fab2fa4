"""Music Assistant API client.

Every Music Assistant operation is a named command posted to a single
endpoint::

    POST {base_url}/api
    Authorization: Bearer <token>
    {"command": "players/cmd/power", "args": {"player_id": "...", "powered": true}}

The response body is the command's JSON result, returned as-is.  No schema
validation happens here; callers trust the backend's shape.

Failures surface as typed errors and are never retried:

- ``BackendError``   - the server answered with a non-2xx status.
- ``TransportError`` - no response at all (connection refused, DNS, timeout).

The token value is never written to logs.
"""
from __future__ import annotations

import logging
from typing import TypeVar, cast

import httpx

from music_assistant_mcp.contracts.json_types import JSONObject, JSONValue

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MusicAssistantError(Exception):
    """Base exception for Music Assistant communication errors."""


class BackendError(MusicAssistantError):
    """Music Assistant answered a command with a non-success HTTP status."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"API error ({status_code}): {detail}")
        self.status_code = status_code
        self.detail = detail


class TransportError(MusicAssistantError):
    """The request never produced an HTTP response."""


class MusicAssistantClient:
    """Async client for the Music Assistant command API.

    Holds only immutable configuration; each call opens its own
    ``httpx.AsyncClient`` so concurrent invocations share nothing.

    Args:
        base_url: Music Assistant server URL (e.g. ``"http://localhost:8095"``).
                  A trailing slash is stripped.
        token: Long-lived access token sent as a Bearer credential.
        timeout: Request timeout in seconds.  ``None`` disables the timeout.
    """

    def __init__(self, base_url: str, token: str, timeout: float | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._token = token
        self.timeout = timeout

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/api"

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._token}",
        }

    async def execute_command(self, command: str, args: JSONObject | None = None) -> T:
        """Execute a Music Assistant API command and return its decoded result.

        ``None``-valued arguments are omitted so the backend applies its own
        defaults for them.

        Raises:
            BackendError: non-2xx response; carries status code and body text
                (or the reason phrase when the body is empty).
            TransportError: the request could not be completed.
        """
        payload: dict[str, JSONValue] = {
            "command": command,
            "args": {k: v for k, v in (args or {}).items() if v is not None},
        }
        logger.debug("MA command %s args=%s (Bearer ***)", command, payload["args"])

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(self.api_url, json=payload, headers=self._headers())
        except httpx.RequestError as e:
            logger.warning("MA command %s failed: %s", command, e)
            raise TransportError(
                f"Could not reach Music Assistant at {self.base_url}: {e!s}"
            ) from e

        if not resp.is_success:
            detail = resp.text or resp.reason_phrase
            logger.warning("MA command %s returned %s: %s", command, resp.status_code, detail)
            raise BackendError(resp.status_code, detail)

        if not resp.content:
            return cast(T, None)
        return cast(T, resp.json())
