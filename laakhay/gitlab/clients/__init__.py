"""Resource façades and the top-level client."""

from .gitlab import GitLabClient
from .issues import IssuesClient
from .releases import ReleasesClient

__all__ = [
    "GitLabClient",
    "IssuesClient",
    "ReleasesClient",
]
