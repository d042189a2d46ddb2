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

"""
GitHub-specific constants for the Homebrew updater.
"""

GITHUB_API_VERSION = "2022-11-28"

# Seconds to wait for the GitHub API before giving up
GITHUB_REQUEST_TIMEOUT = 30

PULL_REQUEST_BODY = """---

Pull request opened by [homebrew-updater](https://github.com/BePsvPT/homebrew-updater) project."""
