"""Source Control Management Domain

Key Components:
- GitOperations: Git command operations on the local formula repository
- ScmOperations: Abstract interface for pull request providers (such as GitHubApiClient in `src/github`)
"""

from .git_operations import GitOperations
from .scm_operations import ScmOperations

__all__ = [
    "GitOperations",
    "ScmOperations",
]
