"""GitLab release endpoint definitions.

Endpoints:
    - GET    /projects/:id/releases               (paginated)
    - GET    /projects/:id/releases/:tag_name
    - POST   /projects/:id/releases
    - PUT    /projects/:id/releases/:tag_name
    - DELETE /projects/:id/releases/:tag_name     (returns the deleted release)
"""

from __future__ import annotations

from typing import Any

from laakhay.gitlab.core import ReleaseOrderBy, SortOrder
from laakhay.gitlab.models import Release
from laakhay.gitlab.query import QueryDescriptor
from laakhay.gitlab.runtime.rest import RestEndpointSpec

from .common import (
    OFFSET_PAGINATION,
    ModelAdapter,
    ModelListAdapter,
    encode_descriptor,
    encode_path_segment,
    project_path,
    request_body,
)


class ReleasesQuery(QueryDescriptor):
    """Ordering and rendering options for release listings."""

    order_by: ReleaseOrderBy | None = None
    sort: SortOrder | None = None
    include_html_description: bool | None = None


def release_path(params: dict[str, Any]) -> str:
    return f"{project_path(params)}/releases/{encode_path_segment(params['tag_name'])}"


def _request_releases_path(params: dict[str, Any]) -> str:
    return f"/projects/{encode_path_segment(params['request'].project_id)}/releases"


LIST_RELEASES_SPEC = RestEndpointSpec(
    id="list_releases",
    method="GET",
    build_path=lambda params: f"{project_path(params)}/releases",
    build_query=encode_descriptor,
    pagination=OFFSET_PAGINATION,
)

GET_RELEASE_SPEC = RestEndpointSpec(
    id="get_release",
    method="GET",
    build_path=release_path,
)

CREATE_RELEASE_SPEC = RestEndpointSpec(
    id="create_release",
    method="POST",
    build_path=_request_releases_path,
    build_body=request_body,
)

UPDATE_RELEASE_SPEC = RestEndpointSpec(
    id="update_release",
    method="PUT",
    build_path=lambda params: (
        f"{_request_releases_path(params)}/{encode_path_segment(params['request'].tag_name)}"
    ),
    build_body=request_body,
)

DELETE_RELEASE_SPEC = RestEndpointSpec(
    id="delete_release",
    method="DELETE",
    build_path=release_path,
)

ReleaseAdapter = ModelAdapter(Release)
ReleaseListAdapter = ModelListAdapter(Release)
