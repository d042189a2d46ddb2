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

from typing import Callable, Optional
from src.utils import debug_log, log
from src.github.constants import PULL_REQUEST_BODY
from src.homebrew_updater.domains.formula.formula import Formula
from src.homebrew_updater.domains.formula.formula_rewriter import FormulaRewriter
from src.homebrew_updater.domains.scm.git_operations import GitOperations
from src.homebrew_updater.domains.scm.scm_operations import ScmOperations
from src.homebrew_updater.shared.exceptions import NothingToCommitError


class FormulaUpdateOrchestrator:
    """
    Publishes a formula release: rewrites the formula on a new branch, commits,
    pushes and opens a pull request upstream.

    The steps run strictly in order. The only handled failure is
    NothingToCommitError from the rewrite, which reverts to the base branch
    and deletes the release branch. Every other error propagates.
    """

    def __init__(
        self,
        config,
        scm_operations: ScmOperations,
        git_operations_factory: Optional[Callable[[str], GitOperations]] = None,
        rewriter: Optional[FormulaRewriter] = None
    ):
        """
        Initialize the orchestrator with its collaborators.

        Args:
            config: Configuration manager (base branch, remote, git binary, extension)
            scm_operations: Pull request provider
            git_operations_factory: Builds GitOperations for a repository path
            rewriter: Formula file rewriter
        """
        self.config = config
        self.scm_operations = scm_operations
        self.git_operations_factory = git_operations_factory or (
            lambda path: GitOperations(path, config.git_binary)
        )
        self.rewriter = rewriter or FormulaRewriter(config.formula_extension)

    def handle(self, formula: Formula) -> None:
        """Runs the update pipeline for one formula release."""
        git = self.git_operations_factory(formula.git.repository_path)
        branch_name = formula.branch_name()
        debug_log(f"Updating {formula.name} to {formula.version} on branch {branch_name}")

        try:
            self.checkout_main(git)
            self.create_branch(git, branch_name)
            self.rewrite_formula_file(formula)
            self.commit(git, formula)
            self.push_commit(git, branch_name)
            self.open_pull_request(formula)
            self.checkout_main(git)
        except NothingToCommitError:
            log(f"nothing-to-commit formula={formula.name} version={formula.version}", is_error=True)
            self.revert(git, branch_name)

    def checkout_main(self, git: GitOperations) -> None:
        git.checkout(self.config.base_branch)

    def create_branch(self, git: GitOperations, branch_name: str) -> None:
        git.create_branch(branch_name)

    def rewrite_formula_file(self, formula: Formula) -> None:
        self.rewriter.rewrite(formula)

    def commit(self, git: GitOperations, formula: Formula) -> None:
        git.stage_all()
        git.commit(formula.title())

    def push_commit(self, git: GitOperations, branch_name: str) -> None:
        git.push(self.config.git_remote, branch_name)

    def open_pull_request(self, formula: Formula) -> dict:
        """Opens the pull request from the fork's release branch into upstream's base branch."""
        upstream = formula.git.upstream
        return self.scm_operations.create_pull_request(
            owner=upstream.owner,
            repo=upstream.repo,
            title=formula.title(),
            head=f"{formula.git.fork.owner}:{formula.branch_name()}",
            base=self.config.base_branch,
            body=PULL_REQUEST_BODY,
        )

    def revert(self, git: GitOperations, branch_name: str) -> None:
        """Returns to the base branch and deletes the release branch."""
        self.checkout_main(git)
        git.delete_branch(branch_name)
        debug_log(f"Reverted: deleted branch {branch_name}")
