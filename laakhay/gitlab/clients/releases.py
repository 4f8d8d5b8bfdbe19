"""Releases façade."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..endpoints import releases as release_endpoints
from ..endpoints.releases import ReleasesQuery
from ..models import CreateReleaseRequest, Release, UpdateReleaseRequest
from ..query import build_query
from ..runtime.pagination import Paginated
from ..runtime.rest import RestRunner

ReleasesConfigure = Callable[[ReleasesQuery], Any]


class ReleasesClient:
    """Project release operations, keyed by tag name."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    def iter(
        self,
        project_id: int | str,
        query: ReleasesQuery | None = None,
        configure: ReleasesConfigure | None = None,
    ) -> Paginated[Release]:
        return self._runner.paginate(
            spec=release_endpoints.LIST_RELEASES_SPEC,
            adapter=release_endpoints.ReleaseListAdapter,
            params={
                "project_id": project_id,
                "query": build_query(ReleasesQuery, query, configure),
            },
        )

    async def list(
        self,
        project_id: int | str,
        query: ReleasesQuery | None = None,
        configure: ReleasesConfigure | None = None,
    ) -> list[Release]:
        """List every release of a project (newest first by default)."""
        return await self.iter(project_id, query, configure).collect()

    async def get(self, project_id: int | str, tag_name: str) -> Release:
        return await self._runner.run(
            spec=release_endpoints.GET_RELEASE_SPEC,
            adapter=release_endpoints.ReleaseAdapter,
            params={"project_id": project_id, "tag_name": tag_name},
        )

    async def create(self, request: CreateReleaseRequest) -> Release:
        return await self._runner.run(
            spec=release_endpoints.CREATE_RELEASE_SPEC,
            adapter=release_endpoints.ReleaseAdapter,
            params={"request": request},
        )

    async def update(self, request: UpdateReleaseRequest) -> Release:
        return await self._runner.run(
            spec=release_endpoints.UPDATE_RELEASE_SPEC,
            adapter=release_endpoints.ReleaseAdapter,
            params={"request": request},
        )

    async def delete(self, project_id: int | str, tag_name: str) -> Release:
        """Delete a release (the tag itself is kept) and return it."""
        return await self._runner.run(
            spec=release_endpoints.DELETE_RELEASE_SPEC,
            adapter=release_endpoints.ReleaseAdapter,
            params={"project_id": project_id, "tag_name": tag_name},
        )
