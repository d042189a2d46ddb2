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

from typing import List
from src.utils import run_command, debug_log


class GitOperations:
    """
    Git operations wrapper for the formula repository.

    Every command runs inside the repository working copy with the git
    binary resolved at startup.
    """

    def __init__(self, repository_path: str, git_binary: str = "git"):
        self.repository_path = repository_path
        self.git_binary = git_binary

    def run_git(self, arguments: List[str]) -> str:
        """Runs a git subcommand in the working copy; raises CommandExecutionError on failure."""
        return run_command([self.git_binary, *arguments], cwd=self.repository_path)

    def checkout(self, branch_name: str) -> None:
        """Switches the working copy to an existing branch."""
        debug_log(f"Checking out branch: {branch_name}")
        self.run_git(["checkout", branch_name])

    def create_branch(self, branch_name: str) -> None:
        """Creates a branch from the current HEAD and switches to it."""
        debug_log(f"Creating and checking out new branch: {branch_name}")
        self.run_git(["checkout", "-b", branch_name])

    def stage_all(self) -> None:
        """Stages every change in the working copy."""
        debug_log("Staging formula changes...")
        self.run_git(["add", "--all"])

    def commit(self, message: str) -> None:
        """Commits staged changes."""
        debug_log(f"Committing changes with message: '{message}'")
        self.run_git(["commit", "-m", message])

    def push(self, remote: str, branch_name: str) -> None:
        """Pushes a branch to the given remote."""
        debug_log(f"Pushing branch {branch_name} to {remote}...")
        self.run_git(["push", remote, branch_name])

    def delete_branch(self, branch_name: str) -> None:
        """Force-deletes a local branch."""
        debug_log(f"Deleting branch: {branch_name}")
        self.run_git(["branch", "-D", branch_name])
