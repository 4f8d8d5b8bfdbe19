"""Release data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .milestone import Milestone
from .user import User


class ReleaseCommit(BaseModel):
    """Commit a release tag points at."""

    id: str
    short_id: str | None = None
    title: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(frozen=True)


class Release(BaseModel):
    """Project release, identified by its tag name."""

    tag_name: str = Field(..., min_length=1)
    name: str | None = None
    description: str | None = None
    created_at: datetime | None = None
    released_at: datetime | None = None
    upcoming_release: bool = False
    author: User | None = None
    commit: ReleaseCommit | None = None
    milestones: list[Milestone] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
