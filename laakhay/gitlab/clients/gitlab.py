"""Top-level GitLab client.

Owns the transport (and its aiohttp session) and exposes one façade per
resource:

    async with GitLabClient(GitLabConfig.from_env()) as gl:
        issues = await gl.issues.list_project("group/project", configure=lambda q: ...)
        releases = await gl.releases.list("group/project")
"""

from __future__ import annotations

from ..core.config import GitLabConfig
from ..runtime.rest import RESTTransport, RestRunner
from .issues import IssuesClient
from .releases import ReleasesClient


class GitLabClient:
    """Async GitLab REST API client."""

    def __init__(
        self,
        config: GitLabConfig | None = None,
        *,
        transport: RESTTransport | None = None,
    ) -> None:
        self.config = config or GitLabConfig()
        self._transport = transport or RESTTransport.from_config(self.config)
        self._runner = RestRunner(self._transport, per_page=self.config.per_page)
        self.issues = IssuesClient(self._runner)
        self.releases = ReleasesClient(self._runner)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> GitLabClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
