"""Shared Utilities and Common Functionality

Key Components:
- NothingToCommitError: raised when a formula rewrite changes nothing
"""

from .exceptions import NothingToCommitError

__all__ = [
    "NothingToCommitError",
]
