"""GitLab user data model."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User as embedded in issues, notes and releases (author, assignee)."""

    id: int
    username: str = Field(..., min_length=1)
    name: str = ""
    state: str | None = None
    avatar_url: str | None = None
    web_url: str | None = None

    model_config = ConfigDict(frozen=True)
