"""Issues and issue notes façade."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..endpoints import issues as issue_endpoints
from ..endpoints import notes as note_endpoints
from ..endpoints.issues import IssuesQuery
from ..endpoints.notes import IssueNotesQuery
from ..models import (
    CreateIssueNoteRequest,
    CreateIssueRequest,
    Issue,
    Note,
    UpdateIssueNoteRequest,
    UpdateIssueRequest,
)
from ..query import build_query
from ..runtime.pagination import Paginated
from ..runtime.rest import RestRunner

IssuesConfigure = Callable[[IssuesQuery], Any]
NotesConfigure = Callable[[IssueNotesQuery], Any]


class IssuesClient:
    """Issue and issue-note operations.

    Listing methods accept a pre-built descriptor, a configure callback
    applied to an empty descriptor, or both:

        def only_mine(q: IssuesQuery) -> None:
            q.scope = IssueScope.CREATED_BY_ME
            q.state = IssueStateFilter.OPENED

        issues = await client.issues.list(configure=only_mine)
    """

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    # ----------------------
    # Issues
    # ----------------------
    def iter(
        self, query: IssuesQuery | None = None, configure: IssuesConfigure | None = None
    ) -> Paginated[Issue]:
        """Lazily list issues visible to the authenticated user."""
        return self._runner.paginate(
            spec=issue_endpoints.LIST_ISSUES_SPEC,
            adapter=issue_endpoints.IssueListAdapter,
            params={"query": build_query(IssuesQuery, query, configure)},
        )

    async def list(
        self, query: IssuesQuery | None = None, configure: IssuesConfigure | None = None
    ) -> list[Issue]:
        """List every issue visible to the authenticated user."""
        return await self.iter(query, configure).collect()

    def iter_project(
        self,
        project_id: int | str,
        query: IssuesQuery | None = None,
        configure: IssuesConfigure | None = None,
    ) -> Paginated[Issue]:
        """Lazily list a project's issues."""
        return self._runner.paginate(
            spec=issue_endpoints.LIST_PROJECT_ISSUES_SPEC,
            adapter=issue_endpoints.IssueListAdapter,
            params={
                "project_id": project_id,
                "query": build_query(IssuesQuery, query, configure),
            },
        )

    async def list_project(
        self,
        project_id: int | str,
        query: IssuesQuery | None = None,
        configure: IssuesConfigure | None = None,
    ) -> list[Issue]:
        """List every issue of a project."""
        return await self.iter_project(project_id, query, configure).collect()

    async def get(self, project_id: int | str, issue_iid: int) -> Issue:
        return await self._runner.run(
            spec=issue_endpoints.GET_ISSUE_SPEC,
            adapter=issue_endpoints.IssueAdapter,
            params={"project_id": project_id, "issue_iid": issue_iid},
        )

    async def create(self, request: CreateIssueRequest) -> Issue:
        return await self._runner.run(
            spec=issue_endpoints.CREATE_ISSUE_SPEC,
            adapter=issue_endpoints.IssueAdapter,
            params={"request": request},
        )

    async def update(self, request: UpdateIssueRequest) -> Issue:
        return await self._runner.run(
            spec=issue_endpoints.UPDATE_ISSUE_SPEC,
            adapter=issue_endpoints.IssueAdapter,
            params={"request": request},
        )

    async def delete(self, project_id: int | str, issue_iid: int) -> None:
        await self._runner.run(
            spec=issue_endpoints.DELETE_ISSUE_SPEC,
            adapter=issue_endpoints.DeleteAdapter,
            params={"project_id": project_id, "issue_iid": issue_iid},
        )

    # ----------------------
    # Notes
    # ----------------------
    def iter_notes(
        self,
        project_id: int | str,
        issue_iid: int,
        query: IssueNotesQuery | None = None,
        configure: NotesConfigure | None = None,
    ) -> Paginated[Note]:
        return self._runner.paginate(
            spec=note_endpoints.LIST_ISSUE_NOTES_SPEC,
            adapter=note_endpoints.NoteListAdapter,
            params={
                "project_id": project_id,
                "issue_iid": issue_iid,
                "query": build_query(IssueNotesQuery, query, configure),
            },
        )

    async def list_notes(
        self,
        project_id: int | str,
        issue_iid: int,
        query: IssueNotesQuery | None = None,
        configure: NotesConfigure | None = None,
    ) -> list[Note]:
        """List every note of an issue."""
        return await self.iter_notes(project_id, issue_iid, query, configure).collect()

    async def get_note(self, project_id: int | str, issue_iid: int, note_id: int) -> Note:
        return await self._runner.run(
            spec=note_endpoints.GET_ISSUE_NOTE_SPEC,
            adapter=note_endpoints.NoteAdapter,
            params={"project_id": project_id, "issue_iid": issue_iid, "note_id": note_id},
        )

    async def create_note(self, request: CreateIssueNoteRequest) -> Note:
        return await self._runner.run(
            spec=note_endpoints.CREATE_ISSUE_NOTE_SPEC,
            adapter=note_endpoints.NoteAdapter,
            params={"request": request},
        )

    async def update_note(self, request: UpdateIssueNoteRequest) -> Note:
        return await self._runner.run(
            spec=note_endpoints.UPDATE_ISSUE_NOTE_SPEC,
            adapter=note_endpoints.NoteAdapter,
            params={"request": request},
        )

    async def delete_note(self, project_id: int | str, issue_iid: int, note_id: int) -> None:
        await self._runner.run(
            spec=note_endpoints.DELETE_ISSUE_NOTE_SPEC,
            adapter=note_endpoints.DeleteAdapter,
            params={"project_id": project_id, "issue_iid": issue_iid, "note_id": note_id},
        )
