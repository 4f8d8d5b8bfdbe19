"""Milestone data model."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class Milestone(BaseModel):
    """Milestone summary embedded in issues and releases."""

    id: int
    iid: int
    project_id: int | None = None
    group_id: int | None = None
    title: str
    description: str | None = None
    state: str | None = None
    due_date: date | None = None
    start_date: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    web_url: str | None = None

    model_config = ConfigDict(frozen=True)
