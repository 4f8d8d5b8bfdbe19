"""GitLab issue endpoint definitions.

Endpoints:
    - GET    /issues                                 (paginated)
    - GET    /projects/:id/issues                    (paginated)
    - GET    /projects/:id/issues/:issue_iid
    - POST   /projects/:id/issues
    - PUT    /projects/:id/issues/:issue_iid
    - DELETE /projects/:id/issues/:issue_iid
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import Field

from laakhay.gitlab.core import IssueOrderBy, IssueScope, IssueStateFilter, SortOrder
from laakhay.gitlab.models import Issue
from laakhay.gitlab.query import DateFormat, ListStyle, QueryDescriptor, QueryParam
from laakhay.gitlab.runtime.rest import RestEndpointSpec

from .common import (
    OFFSET_PAGINATION,
    EmptyAdapter,
    ModelAdapter,
    ModelListAdapter,
    encode_descriptor,
    encode_path_segment,
    project_path,
    request_body,
)


class IssuesQuery(QueryDescriptor):
    """Filters for issue listings (global and per project).

    Field order is the wire order of the encoded query.
    """

    state: IssueStateFilter | None = None
    labels: Annotated[list[str] | None, QueryParam(style=ListStyle.JOIN)] = None
    milestone: str | None = None
    scope: IssueScope | None = None
    author_id: Annotated[int | None, Field(ge=1)] = None
    assignee_id: Annotated[int | None, Field(ge=0)] = None
    my_reaction_emoji: str | None = None
    iids: Annotated[list[Annotated[int, Field(ge=1)]] | None, QueryParam(key="iids[]")] = None
    search: str | None = None
    search_in: Annotated[
        list[str] | None, QueryParam(key="in", style=ListStyle.JOIN)
    ] = None
    order_by: IssueOrderBy | None = None
    sort: SortOrder | None = None
    created_after: Annotated[datetime | None, QueryParam(date_format=DateFormat.DATETIME)] = None
    created_before: Annotated[datetime | None, QueryParam(date_format=DateFormat.DATETIME)] = None
    updated_after: Annotated[datetime | None, QueryParam(date_format=DateFormat.DATETIME)] = None
    updated_before: Annotated[datetime | None, QueryParam(date_format=DateFormat.DATETIME)] = None
    # free-form: "0", "any", "today", "overdue", "week", "month", ...
    due_date: str | None = None
    confidential: bool | None = None
    weight: Annotated[int | None, Field(ge=0)] = None
    with_labels_details: bool | None = None


def issue_path(params: dict[str, Any]) -> str:
    return f"{project_path(params)}/issues/{int(params['issue_iid'])}"


def _request_issue_path(params: dict[str, Any]) -> str:
    request = params["request"]
    return f"/projects/{encode_path_segment(request.project_id)}/issues/{request.issue_iid}"


LIST_ISSUES_SPEC = RestEndpointSpec(
    id="list_issues",
    method="GET",
    build_path=lambda params: "/issues",
    build_query=encode_descriptor,
    pagination=OFFSET_PAGINATION,
)

LIST_PROJECT_ISSUES_SPEC = RestEndpointSpec(
    id="list_project_issues",
    method="GET",
    build_path=lambda params: f"{project_path(params)}/issues",
    build_query=encode_descriptor,
    pagination=OFFSET_PAGINATION,
)

GET_ISSUE_SPEC = RestEndpointSpec(
    id="get_issue",
    method="GET",
    build_path=issue_path,
)

CREATE_ISSUE_SPEC = RestEndpointSpec(
    id="create_issue",
    method="POST",
    build_path=lambda params: f"/projects/{encode_path_segment(params['request'].project_id)}/issues",
    build_body=request_body,
)

UPDATE_ISSUE_SPEC = RestEndpointSpec(
    id="update_issue",
    method="PUT",
    build_path=_request_issue_path,
    build_body=request_body,
)

DELETE_ISSUE_SPEC = RestEndpointSpec(
    id="delete_issue",
    method="DELETE",
    build_path=issue_path,
)

IssueAdapter = ModelAdapter(Issue)
IssueListAdapter = ModelListAdapter(Issue)
DeleteAdapter = EmptyAdapter()
