# -
# #%L
# Homebrew Updater
# %%
# Copyright (C) 2026 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

import os
import sys
from typing import Optional, Any
from src.utils import debug_log, log, set_debug_mode
from src.homebrew_updater import __version__

PREFERRED_GIT_BINARY = "/usr/local/bin/git"
SYSTEM_GIT_BINARY = "/usr/bin/git"


def resolve_git_binary(override: Optional[str] = None) -> str:
    """
    Resolves the git executable once for the whole process.

    Args:
        override: Explicit binary path, used as-is when set

    Returns:
        str: Path of the git binary to invoke
    """
    if override:
        return override
    if os.path.isfile(PREFERRED_GIT_BINARY):
        return PREFERRED_GIT_BINARY
    return SYSTEM_GIT_BINARY


class UpdaterConfig:
    """
    Configuration manager for the Homebrew updater.
    Handles loading, validating, and accessing configuration values.
    """

    # Preset values
    VERSION = f"v{__version__}"
    USER_AGENT = f"homebrew-updater {VERSION}"
    DEFAULT_GITHUB_API_URL = "https://api.github.com"

    def __init__(self, env_vars=None):
        """
        Initialize the configuration manager.

        Args:
            env_vars: Optional dictionary of environment variables (for testing)
        """
        self.env_vars = env_vars if env_vars is not None else os.environ
        self._load_config()

    def _get_env_var(self, var_name: str, required: bool = True, default: Optional[Any] = None) -> Optional[str]:
        """Gets an environment variable or exits if required and not found."""
        value = self.env_vars.get(var_name)
        if required and not value:
            log(f"Error: Required environment variable {var_name} is not set.", is_error=True)
            sys.exit(1)
        return value if value else default

    def _load_config(self):
        """Loads all configuration from environment variables."""

        # --- Core Settings ---
        self.debug_mode = self._get_env_var("DEBUG_MODE", required=False, default="false").lower() == "true"
        set_debug_mode(self.debug_mode)
        self.base_branch = self._get_env_var("BASE_BRANCH", required=False, default="master")
        self.git_remote = self._get_env_var("GIT_REMOTE", required=False, default="origin")
        self.formula_extension = self._normalize_extension(
            self._get_env_var("FORMULA_EXTENSION", required=False, default=".rb")
        )

        # --- Git executable ---
        self.git_binary = resolve_git_binary(self._get_env_var("GIT_BINARY", required=False))

        # --- GitHub Configuration ---
        self.github_token = self._get_env_var("GITHUB_TOKEN", required=True)
        self.github_api_url = self._get_env_var(
            "GITHUB_API_URL", required=False, default=self.DEFAULT_GITHUB_API_URL
        ).rstrip("/")

        debug_log(f"Debug Mode: {self.debug_mode}")
        debug_log(f"Base Branch: {self.base_branch}")
        debug_log(f"Git Remote: {self.git_remote}")
        debug_log(f"Git Binary: {self.git_binary}")
        debug_log(f"Formula Extension: {self.formula_extension}")
        debug_log(f"GitHub API URL: {self.github_api_url}")

    def _normalize_extension(self, extension: str) -> str:
        """Ensures the formula extension starts with a dot."""
        extension = extension.strip()
        if not extension.startswith("."):
            log(f"FORMULA_EXTENSION '{extension}' has no leading dot. Using '.{extension}'.", is_warning=True)
            extension = f".{extension}"
        return extension


_config_instance: Optional[UpdaterConfig] = None


def get_config() -> UpdaterConfig:
    """Returns the process-wide configuration, loading it on first use."""
    global _config_instance
    if _config_instance is None:
        _config_instance = UpdaterConfig()
    return _config_instance


def reset_config():
    """Drops the cached configuration (used by tests)."""
    global _config_instance
    _config_instance = None
