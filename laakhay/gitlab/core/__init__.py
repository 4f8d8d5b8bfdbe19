"""Core components."""

from .config import GitLabConfig
from .enums import (
    IssueOrderBy,
    IssueScope,
    IssueState,
    IssueStateEvent,
    IssueStateFilter,
    NoteOrderBy,
    ReleaseOrderBy,
    SortOrder,
    WireEnum,
)
from .exceptions import (
    AuthenticationError,
    EncodingError,
    GitLabError,
    MalformedPageError,
    MalformedResponseError,
    NotFoundError,
    ServiceError,
    TransportError,
)

__all__ = [
    "GitLabConfig",
    # Enums
    "WireEnum",
    "IssueState",
    "IssueStateFilter",
    "IssueStateEvent",
    "IssueScope",
    "SortOrder",
    "IssueOrderBy",
    "NoteOrderBy",
    "ReleaseOrderBy",
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
