"""Client configuration.

Centralizes the base URL, token and transport defaults so the transport and
façades do not read the environment themselves.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://gitlab.com/api/v4"
DEFAULT_TIMEOUT = 30.0
DEFAULT_PER_PAGE = 100
# GitLab rejects per_page above 100
MAX_PER_PAGE = 100

TOKEN_HEADER = "PRIVATE-TOKEN"


@dataclass(frozen=True)
class GitLabConfig:
    """Connection settings for a GitLab instance.

    Attributes:
        base_url: API root including the version prefix (e.g. ``.../api/v4``)
        private_token: Personal/project access token, sent as ``PRIVATE-TOKEN``
        timeout: Total request timeout in seconds
        per_page: Page size requested by listing calls
    """

    base_url: str = DEFAULT_BASE_URL
    private_token: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    per_page: int = DEFAULT_PER_PAGE

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if not 1 <= self.per_page <= MAX_PER_PAGE:
            raise ValueError(f"per_page must be between 1 and {MAX_PER_PAGE}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        if not self.private_token:
            return {}
        return {TOKEN_HEADER: self.private_token}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GitLabConfig:
        """Build configuration from ``GITLAB_*`` environment variables.

        Examples:
            >>> GitLabConfig.from_env({"GITLAB_URL": "https://git.example.com/api/v4"}).base_url
            'https://git.example.com/api/v4'
        """
        env = os.environ if environ is None else environ
        return cls(
            base_url=env.get("GITLAB_URL", DEFAULT_BASE_URL),
            private_token=env.get("GITLAB_TOKEN") or None,
            timeout=float(env.get("GITLAB_TIMEOUT", DEFAULT_TIMEOUT)),
            per_page=int(env.get("GITLAB_PER_PAGE", DEFAULT_PER_PAGE)),
        )
