"""Data models for GitLab resources.

Architecture:
    This module exports all Pydantic v2 data models used throughout the library.
    Response models are immutable (frozen=True); request models validate on
    assignment so invalid bodies are rejected before they are sent.

Model Categories:
    - Resources: Issue, Note, Release
    - Embedded: User, Milestone, TimeStats, ReleaseCommit
    - Requests: Create*/Update* bodies for issues, notes and releases

See Also:
    - Pydantic documentation: https://docs.pydantic.dev/
    - Core enums: IssueState, IssueStateEvent
"""

from .issue import Issue, TimeStats
from .milestone import Milestone
from .note import Note
from .release import Release, ReleaseCommit
from .requests import (
    CreateIssueNoteRequest,
    CreateIssueRequest,
    CreateReleaseRequest,
    RequestBody,
    UpdateIssueNoteRequest,
    UpdateIssueRequest,
    UpdateReleaseRequest,
)
from .user import User

__all__ = [
    "Issue",
    "TimeStats",
    "Milestone",
    "Note",
    "Release",
    "ReleaseCommit",
    "User",
    "RequestBody",
    "CreateIssueRequest",
    "UpdateIssueRequest",
    "CreateIssueNoteRequest",
    "UpdateIssueNoteRequest",
    "CreateReleaseRequest",
    "UpdateReleaseRequest",
]
