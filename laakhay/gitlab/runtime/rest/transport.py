"""REST transport wrapping HTTPClient."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ...core.config import GitLabConfig
from .http_client import HTTPClient, RESTResponse


class RESTTransport:
    """Thin transport used by runners and pagination.

    ``send`` returns status, headers and body so pagination can read
    header-based metadata.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    @classmethod
    def from_config(cls, config: GitLabConfig) -> RESTTransport:
        return cls(base_url=config.base_url, timeout=config.timeout, headers=config.headers)

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Sequence[tuple[str, str]] | None = None,
        json_body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> RESTResponse:
        return await self._http.request(
            method.upper(), path, params=params, json_body=json_body, headers=headers
        )

    async def close(self) -> None:
        await self._http.close()
