"""Laakhay GitLab - Typed async client for the GitLab REST API."""

from .clients import GitLabClient, IssuesClient, ReleasesClient
from .core import (
    AuthenticationError,
    EncodingError,
    GitLabConfig,
    GitLabError,
    IssueOrderBy,
    IssueScope,
    IssueState,
    IssueStateEvent,
    IssueStateFilter,
    MalformedPageError,
    MalformedResponseError,
    NoteOrderBy,
    NotFoundError,
    ReleaseOrderBy,
    ServiceError,
    SortOrder,
    TransportError,
)
from .endpoints import IssueNotesQuery, IssuesQuery, ReleasesQuery
from .models import (
    CreateIssueNoteRequest,
    CreateIssueRequest,
    CreateReleaseRequest,
    Issue,
    Milestone,
    Note,
    Release,
    ReleaseCommit,
    TimeStats,
    UpdateIssueNoteRequest,
    UpdateIssueRequest,
    UpdateReleaseRequest,
    User,
)
from .runtime import Page, Paginated

__version__ = "0.1.0"

__all__ = [
    # Clients
    "GitLabClient",
    "IssuesClient",
    "ReleasesClient",
    "GitLabConfig",
    # Enums
    "IssueState",
    "IssueStateFilter",
    "IssueStateEvent",
    "IssueScope",
    "SortOrder",
    "IssueOrderBy",
    "NoteOrderBy",
    "ReleaseOrderBy",
    # Queries
    "IssuesQuery",
    "IssueNotesQuery",
    "ReleasesQuery",
    # Models
    "Issue",
    "Note",
    "Release",
    "ReleaseCommit",
    "Milestone",
    "TimeStats",
    "User",
    "CreateIssueRequest",
    "UpdateIssueRequest",
    "CreateIssueNoteRequest",
    "UpdateIssueNoteRequest",
    "CreateReleaseRequest",
    "UpdateReleaseRequest",
    # Pagination
    "Page",
    "Paginated",
    # Exceptions
    "GitLabError",
    "EncodingError",
    "TransportError",
    "ServiceError",
    "AuthenticationError",
    "NotFoundError",
    "MalformedResponseError",
    "MalformedPageError",
]
