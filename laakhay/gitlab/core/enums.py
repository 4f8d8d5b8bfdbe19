"""Core enumerations for GitLab wire values.

Architecture:
    Every enum here is a string enum whose value is the exact, case-sensitive
    string the GitLab REST API sends and expects. The same enum is used when
    encoding query descriptors and when parsing responses that echo the value
    back, so ``from_wire(to_wire(x)) == x`` holds for every member.

Key Types:
    - IssueState: State reported on an issue resource
    - IssueStateFilter: State filter accepted by issue listings
    - IssueStateEvent: State transition sent on issue update
    - IssueScope: Ownership scope for issue listings
    - SortOrder: Ascending or descending ordering
    - IssueOrderBy / NoteOrderBy / ReleaseOrderBy: Ordering keys per resource
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from .exceptions import EncodingError

_E = TypeVar("_E", bound="WireEnum")


class WireEnum(str, Enum):
    """String enum mapped one-to-one onto GitLab wire strings."""

    def __str__(self) -> str:
        """String representation returns the wire value."""
        return self.value

    def to_wire(self) -> str:
        """Wire string for this member."""
        return self.value

    @classmethod
    def from_wire(cls: type[_E], value: str) -> _E:
        """Parse a wire string into a member.

        Raises:
            EncodingError: If the string has no matching member
        """
        try:
            return cls(value)
        except ValueError:
            raise EncodingError(
                f"{value!r} is not a valid {cls.__name__} wire value",
                field=cls.__name__,
            ) from None


class IssueState(WireEnum):
    """State of an issue as reported by the service."""

    OPENED = "opened"
    CLOSED = "closed"


class IssueStateFilter(WireEnum):
    """State filter for issue listings."""

    OPENED = "opened"
    CLOSED = "closed"
    ALL = "all"


class IssueStateEvent(WireEnum):
    """State transition applied by an issue update."""

    CLOSE = "close"
    REOPEN = "reopen"


class IssueScope(WireEnum):
    """Which issues a listing returns relative to the authenticated user."""

    CREATED_BY_ME = "created_by_me"
    ASSIGNED_TO_ME = "assigned_to_me"
    ALL = "all"


class SortOrder(WireEnum):
    ASC = "asc"
    DESC = "desc"


class IssueOrderBy(WireEnum):
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    PRIORITY = "priority"
    DUE_DATE = "due_date"
    RELATIVE_POSITION = "relative_position"
    LABEL_PRIORITY = "label_priority"
    MILESTONE_DUE = "milestone_due"
    POPULARITY = "popularity"
    WEIGHT = "weight"


class NoteOrderBy(WireEnum):
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class ReleaseOrderBy(WireEnum):
    RELEASED_AT = "released_at"
    CREATED_AT = "created_at"
