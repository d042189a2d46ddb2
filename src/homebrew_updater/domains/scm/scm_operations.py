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

from abc import ABC, abstractmethod
from typing import Any, Dict


class ScmOperations(ABC):
    """
    Abstract interface for the hosting provider that receives pull requests.
    """

    @abstractmethod
    def create_pull_request(self, owner: str, repo: str, title: str, head: str, base: str, body: str) -> Dict[str, Any]:
        """
        Opens a pull request.

        Args:
            owner (str): Owner of the target repository
            repo (str): Name of the target repository
            title (str): Pull request title
            head (str): Source reference, `<fork owner>:<branch>`
            base (str): Branch the change is merged into
            body (str): Pull request description

        Returns:
            Dict[str, Any]: The created pull request as returned by the provider
        """
        pass
