"""Homebrew Updater Library

Rewrites a formula's url and checksum for a new release, commits the change on
a release branch and opens a pull request against the upstream tap.

The library is organized into domain-driven modules:
- domains.formula: The formula value and the file rewrite
- domains.scm: Git operations and the pull-request interface
- shared: Exceptions shared across domains
"""

__version__ = "1.0.0"
__description__ = "Formula update and pull request automation"

__all__ = [
    "__version__",
    "__description__",
]
