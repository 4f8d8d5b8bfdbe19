"""HTTP client helper."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import aiohttp
from yarl import URL

from ...core.exceptions import MalformedResponseError, TransportError, service_error_for
from ...query.encoder import to_query_string


@dataclass(frozen=True)
class RESTResponse:
    """Decoded response: status, headers and JSON body (None when empty)."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    data: Any = None

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def build_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    def request_url(self, url: str, params: Sequence[tuple[str, str]] | None = None) -> URL:
        """Full request URL with ``params`` appended exactly as the encoder renders them.

        The result is marked as already encoded so aiohttp sends it byte for byte.
        """
        target = self.build_url(url)
        if params:
            separator = "&" if "?" in target else "?"
            target = f"{target}{separator}{to_query_string(tuple(params))}"
        return URL(target, encoded=True)

    def is_same_origin(self, url: URL) -> bool:
        """True when ``url`` points at the configured API host."""
        if not self.base_url:
            return True
        return URL(self.base_url).origin() == url.origin()

    async def request(
        self,
        method: str,
        url: str,
        params: Sequence[tuple[str, str]] | None = None,
        json_body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> RESTResponse:
        """Send one request and decode the response.

        Default headers (the access token) are only attached to requests for
        the configured host; absolute URLs elsewhere get per-call headers only.

        Raises:
            TransportError: Connection, DNS, TLS or timeout failure
            ServiceError: Non-2xx status (with decoded error payload)
            MalformedResponseError: 2xx status with a non-JSON body
        """
        target = self.request_url(url, params)
        defaults = self.headers if self.is_same_origin(target) else {}
        merged = {**defaults, **(headers or {})}
        try:
            async with self.session.request(
                method,
                target,
                json=json_body,
                headers=merged or None,
            ) as response:
                text = await response.text()
                status = response.status
                response_headers = dict(response.headers)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not 200 <= status < 300:
            raise service_error_for(status, _decode_error(text))
        return RESTResponse(status=status, headers=response_headers, data=_decode(text))

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _decode(text: str) -> Any:
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError as e:
        raise MalformedResponseError(f"Response body is not valid JSON: {e}") from e


def _decode_error(text: str) -> Any:
    try:
        return json.loads(text) if text.strip() else None
    except ValueError:
        return text
