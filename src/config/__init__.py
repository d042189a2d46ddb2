"""Configuration

Environment-driven settings for the updater and the one-time git binary
resolution that the pipeline is wired with at startup.
"""

from .updater_config import UpdaterConfig, get_config, reset_config, resolve_git_binary

__all__ = [
    "UpdaterConfig",
    "get_config",
    "reset_config",
    "resolve_git_binary",
]
