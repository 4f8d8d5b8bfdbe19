"""Request body models for create/update calls.

Each request carries the identifiers that go into the URL path (project id,
issue iid, note id, tag name) alongside the JSON body fields. ``to_body()``
drops the path fields and every unset (None) field.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..core.enums import IssueStateEvent


class RequestBody(BaseModel):
    """Base for JSON request bodies."""

    path_fields: ClassVar[frozenset[str]] = frozenset({"project_id"})

    project_id: int | str

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def to_body(self) -> dict[str, Any]:
        """JSON body without path identifiers and unset fields."""
        return self.model_dump(mode="json", exclude_none=True, exclude=set(self.path_fields))


def _join_labels(labels: list[str] | None) -> str | None:
    # GitLab takes labels as a single comma-separated string in bodies
    return ",".join(labels) if labels is not None else None


class CreateIssueRequest(RequestBody):
    """Create an issue in a project."""

    title: str = Field(..., min_length=1)
    description: str | None = None
    confidential: bool | None = None
    assignee_ids: list[int] | None = None
    milestone_id: int | None = None
    labels: list[str] | None = None
    created_at: datetime | None = None
    due_date: date | None = None
    merge_request_to_resolve_discussions_of: int | None = None
    discussion_to_resolve: str | None = None
    weight: int | None = Field(default=None, ge=0)

    @field_serializer("labels")
    def _serialize_labels(self, labels: list[str] | None) -> str | None:
        return _join_labels(labels)


class UpdateIssueRequest(RequestBody):
    """Update an existing issue; only set fields are sent."""

    path_fields: ClassVar[frozenset[str]] = frozenset({"project_id", "issue_iid"})

    issue_iid: int
    title: str | None = None
    description: str | None = None
    confidential: bool | None = None
    assignee_ids: list[int] | None = None
    milestone_id: int | None = None
    labels: list[str] | None = None
    state_event: IssueStateEvent | None = None
    updated_at: datetime | None = None
    due_date: date | None = None
    discussion_locked: bool | None = None
    weight: int | None = Field(default=None, ge=0)

    @field_serializer("labels")
    def _serialize_labels(self, labels: list[str] | None) -> str | None:
        return _join_labels(labels)


class CreateIssueNoteRequest(RequestBody):
    """Add a note to an issue."""

    path_fields: ClassVar[frozenset[str]] = frozenset({"project_id", "issue_iid"})

    issue_iid: int
    body: str = Field(..., min_length=1)
    created_at: datetime | None = None
    internal: bool | None = None


class UpdateIssueNoteRequest(RequestBody):
    """Edit the body of an issue note."""

    path_fields: ClassVar[frozenset[str]] = frozenset({"project_id", "issue_iid", "note_id"})

    issue_iid: int
    note_id: int
    body: str = Field(..., min_length=1)


class CreateReleaseRequest(RequestBody):
    """Create a release from an existing tag, or from ``ref`` if the tag is new."""

    tag_name: str = Field(..., min_length=1)
    name: str | None = None
    description: str | None = None
    ref: str | None = None
    released_at: datetime | None = None
    milestones: list[str] | None = None


class UpdateReleaseRequest(RequestBody):
    """Update a release's name, notes, date or milestones."""

    path_fields: ClassVar[frozenset[str]] = frozenset({"project_id", "tag_name"})

    tag_name: str = Field(..., min_length=1)
    name: str | None = None
    description: str | None = None
    released_at: datetime | None = None
    milestones: list[str] | None = None
