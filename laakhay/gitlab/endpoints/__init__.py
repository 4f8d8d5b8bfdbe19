"""GitLab REST endpoint specifications, query descriptors and adapters."""

from .issues import IssuesQuery
from .notes import IssueNotesQuery
from .releases import ReleasesQuery

__all__ = [
    "IssuesQuery",
    "IssueNotesQuery",
    "ReleasesQuery",
]
