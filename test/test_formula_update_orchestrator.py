#!/usr/bin/env python3

import io
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch, MagicMock, call
from src.orchestrator.formula_update_orchestrator import FormulaUpdateOrchestrator
from src.github.constants import PULL_REQUEST_BODY
from src.utils import CommandExecutionError
from test_helpers import FORMULA_TEXT, make_formula

GIT = "/usr/bin/git"


class TestFormulaUpdateOrchestrator(unittest.TestCase):
    """Test cases for the formula update pipeline."""

    def setUp(self):
        self.repo_dir = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, self.repo_dir, ignore_errors=True)
        self.repo = str(self.repo_dir)

        patcher = patch('src.homebrew_updater.domains.scm.git_operations.run_command')
        self.mock_run_command = patcher.start()
        self.mock_run_command.return_value = ""
        self.addCleanup(patcher.stop)

        debug_patcher = patch('src.utils.DEBUG_MODE', False)
        debug_patcher.start()
        self.addCleanup(debug_patcher.stop)

        self.config = MagicMock(
            base_branch="main",
            git_remote="origin",
            git_binary=GIT,
            formula_extension=".rb",
        )
        self.scm = MagicMock()
        self.scm.create_pull_request.return_value = {"number": 1, "html_url": "https://github.test/pull/1"}
        self.orchestrator = FormulaUpdateOrchestrator(self.config, self.scm)
        self.formula = make_formula(repository_path=self.repo)

    def _git(self, *args):
        return call([GIT, *args], cwd=self.repo)

    def test_success_path(self):
        formula_file = self.repo_dir / "foo.rb"
        formula_file.write_text(FORMULA_TEXT, encoding="utf-8")

        self.orchestrator.handle(self.formula)

        content = formula_file.read_text(encoding="utf-8")
        self.assertIn('url "https://example.com/acme/foo/2.0.0.tar.gz"\n', content)
        self.assertIn('sha256 "cafef00d"\n', content)

        self.assertEqual(self.mock_run_command.call_args_list, [
            self._git('checkout', 'main'),
            self._git('checkout', '-b', 'foo-2.0.0'),
            self._git('add', '--all'),
            self._git('commit', '-m', 'foo 2.0.0'),
            self._git('push', 'origin', 'foo-2.0.0'),
            self._git('checkout', 'main'),
        ])
        self.scm.create_pull_request.assert_called_once_with(
            owner="Homebrew",
            repo="homebrew-core",
            title="foo 2.0.0",
            head="octocat:foo-2.0.0",
            base="main",
            body=PULL_REQUEST_BODY,
        )

    def test_pull_request_opened_before_returning_to_main(self):
        (self.repo_dir / "foo.rb").write_text(FORMULA_TEXT, encoding="utf-8")
        events = []
        self.mock_run_command.side_effect = lambda command, cwd: events.append(command[1:]) or ""
        self.scm.create_pull_request.side_effect = lambda **kwargs: events.append(["pull-request"])

        self.orchestrator.handle(self.formula)

        self.assertEqual(events[-3:], [['push', 'origin', 'foo-2.0.0'], ['pull-request'], ['checkout', 'main']])

    def test_success_path_is_silent(self):
        (self.repo_dir / "foo.rb").write_text(FORMULA_TEXT, encoding="utf-8")

        with redirect_stdout(io.StringIO()) as stdout, redirect_stderr(io.StringIO()) as stderr:
            self.orchestrator.handle(self.formula)

        self.scm.create_pull_request.assert_called_once()
        self.assertEqual(stdout.getvalue(), "")
        self.assertEqual(stderr.getvalue(), "")

    def test_already_current_formula_reverts(self):
        current = FORMULA_TEXT.replace("https://old/url", "https://example.com/acme/foo/2.0.0.tar.gz")
        current = current.replace("deadbeef", "cafef00d")
        (self.repo_dir / "foo.rb").write_text(current, encoding="utf-8")

        with redirect_stderr(io.StringIO()) as stderr:
            self.orchestrator.handle(self.formula)

        self.assertEqual(self.mock_run_command.call_args_list, [
            self._git('checkout', 'main'),
            self._git('checkout', '-b', 'foo-2.0.0'),
            self._git('checkout', 'main'),
            self._git('branch', '-D', 'foo-2.0.0'),
        ])
        self.scm.create_pull_request.assert_not_called()
        self.assertIn("nothing-to-commit formula=foo version=2.0.0", stderr.getvalue())

    def test_nothing_to_commit_reverts(self):
        (self.repo_dir / "foo.rb").write_text("class Foo < Formula\nend\n", encoding="utf-8")

        stderr = io.StringIO()
        with redirect_stderr(stderr):
            self.orchestrator.handle(self.formula)

        self.assertEqual(self.mock_run_command.call_args_list, [
            self._git('checkout', 'main'),
            self._git('checkout', '-b', 'foo-2.0.0'),
            self._git('checkout', 'main'),
            self._git('branch', '-D', 'foo-2.0.0'),
        ])
        self.scm.create_pull_request.assert_not_called()
        self.assertIn("nothing-to-commit formula=foo version=2.0.0", stderr.getvalue())

    def test_missing_formula_file_propagates(self):
        with self.assertRaises(FileNotFoundError):
            self.orchestrator.handle(self.formula)
        self.scm.create_pull_request.assert_not_called()

    def test_existing_branch_propagates(self):
        def fail_on_create(command, cwd):
            if command[1:3] == ['checkout', '-b']:
                raise CommandExecutionError("exists", 128, ' '.join(command))
            return ""
        self.mock_run_command.side_effect = fail_on_create
        (self.repo_dir / "foo.rb").write_text(FORMULA_TEXT, encoding="utf-8")

        with self.assertRaises(CommandExecutionError):
            self.orchestrator.handle(self.formula)
        # The formula file is untouched
        self.assertEqual((self.repo_dir / "foo.rb").read_text(encoding="utf-8"), FORMULA_TEXT)

    def test_push_failure_leaves_branch(self):
        def fail_on_push(command, cwd):
            if command[1] == 'push':
                raise CommandExecutionError("rejected", 1, ' '.join(command))
            return ""
        self.mock_run_command.side_effect = fail_on_push
        (self.repo_dir / "foo.rb").write_text(FORMULA_TEXT, encoding="utf-8")

        with self.assertRaises(CommandExecutionError):
            self.orchestrator.handle(self.formula)

        commands = [c.args[0][1:] for c in self.mock_run_command.call_args_list]
        self.assertNotIn(['branch', '-D', 'foo-2.0.0'], commands)
        self.scm.create_pull_request.assert_not_called()

    def test_uses_injected_git_operations_factory(self):
        git = MagicMock()
        factory = MagicMock(return_value=git)
        rewriter = MagicMock()
        orchestrator = FormulaUpdateOrchestrator(self.config, self.scm, factory, rewriter)

        orchestrator.handle(self.formula)

        factory.assert_called_once_with(self.repo)
        rewriter.rewrite.assert_called_once_with(self.formula)
        git.create_branch.assert_called_once_with("foo-2.0.0")
        git.commit.assert_called_once_with("foo 2.0.0")
        git.push.assert_called_once_with("origin", "foo-2.0.0")
        git.delete_branch.assert_not_called()


if __name__ == '__main__':
    unittest.main()
