"""Note (comment) data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .user import User


class Note(BaseModel):
    """Comment attached to a noteable (issue, merge request, snippet)."""

    id: int
    body: str
    author: User | None = None
    created_at: datetime
    updated_at: datetime | None = None
    system: bool = False
    noteable_id: int | None = None
    noteable_type: str | None = None
    noteable_iid: int | None = None
    resolvable: bool = False
    confidential: bool | None = None
    internal: bool | None = None

    model_config = ConfigDict(frozen=True)
