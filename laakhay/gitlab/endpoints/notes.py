"""GitLab issue note endpoint definitions.

Endpoints:
    - GET    /projects/:id/issues/:issue_iid/notes            (paginated)
    - GET    /projects/:id/issues/:issue_iid/notes/:note_id
    - POST   /projects/:id/issues/:issue_iid/notes
    - PUT    /projects/:id/issues/:issue_iid/notes/:note_id
    - DELETE /projects/:id/issues/:issue_iid/notes/:note_id
"""

from __future__ import annotations

from typing import Any

from laakhay.gitlab.core import NoteOrderBy, SortOrder
from laakhay.gitlab.models import Note
from laakhay.gitlab.query import QueryDescriptor
from laakhay.gitlab.runtime.rest import RestEndpointSpec

from .common import (
    OFFSET_PAGINATION,
    EmptyAdapter,
    ModelAdapter,
    ModelListAdapter,
    encode_descriptor,
    encode_path_segment,
    request_body,
)
from .issues import issue_path


class IssueNotesQuery(QueryDescriptor):
    """Ordering for issue note listings."""

    order_by: NoteOrderBy | None = None
    sort: SortOrder | None = None


def notes_path(params: dict[str, Any]) -> str:
    return f"{issue_path(params)}/notes"


def note_path(params: dict[str, Any]) -> str:
    return f"{notes_path(params)}/{int(params['note_id'])}"


def _request_notes_path(params: dict[str, Any]) -> str:
    request = params["request"]
    return f"/projects/{encode_path_segment(request.project_id)}/issues/{request.issue_iid}/notes"


LIST_ISSUE_NOTES_SPEC = RestEndpointSpec(
    id="list_issue_notes",
    method="GET",
    build_path=notes_path,
    build_query=encode_descriptor,
    pagination=OFFSET_PAGINATION,
)

GET_ISSUE_NOTE_SPEC = RestEndpointSpec(
    id="get_issue_note",
    method="GET",
    build_path=note_path,
)

CREATE_ISSUE_NOTE_SPEC = RestEndpointSpec(
    id="create_issue_note",
    method="POST",
    build_path=_request_notes_path,
    build_body=request_body,
)

UPDATE_ISSUE_NOTE_SPEC = RestEndpointSpec(
    id="update_issue_note",
    method="PUT",
    build_path=lambda params: f"{_request_notes_path(params)}/{params['request'].note_id}",
    build_body=request_body,
)

DELETE_ISSUE_NOTE_SPEC = RestEndpointSpec(
    id="delete_issue_note",
    method="DELETE",
    build_path=note_path,
)

NoteAdapter = ModelAdapter(Note)
NoteListAdapter = ModelListAdapter(Note)
DeleteAdapter = EmptyAdapter()
