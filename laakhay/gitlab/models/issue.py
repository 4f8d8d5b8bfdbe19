"""Issue data model."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import IssueState
from .milestone import Milestone
from .user import User


class TimeStats(BaseModel):
    """Time tracking figures, in seconds."""

    time_estimate: int = 0
    total_time_spent: int = 0
    human_time_estimate: str | None = None
    human_total_time_spent: str | None = None

    model_config = ConfigDict(frozen=True)


class Issue(BaseModel):
    """Project issue.

    ``iid`` is the project-scoped number used in URLs; ``id`` is the
    instance-wide identifier.
    """

    id: int
    iid: int
    project_id: int
    title: str
    description: str | None = None
    state: IssueState
    created_at: datetime
    updated_at: datetime
    closed_at: datetime | None = None
    closed_by: User | None = None
    labels: list[str] = Field(default_factory=list)
    milestone: Milestone | None = None
    author: User | None = None
    assignee: User | None = None
    assignees: list[User] = Field(default_factory=list)
    user_notes_count: int = 0
    upvotes: int = 0
    downvotes: int = 0
    due_date: date | None = None
    confidential: bool = False
    discussion_locked: bool | None = None
    weight: int | None = None
    web_url: str | None = None
    time_stats: TimeStats | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_open(self) -> bool:
        return self.state == IssueState.OPENED
