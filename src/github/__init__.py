"""GitHub Provider Implementation

Key Components:
- GitHubApiClient: GitHub REST implementation of the ScmOperations interface
"""

from .github_api_client import GitHubApiClient

__all__ = [
    "GitHubApiClient",
]
