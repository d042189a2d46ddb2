"""Builders for Formula test data."""

from src.homebrew_updater.domains.formula.formula import Formula

FORMULA_TEXT = '''class Foo < Formula
  desc "Foo does things"
  homepage "https://example.com/foo"
  url "https://old/url"
  sha256 "deadbeef"

  def install
    bin.install "foo"
  end
end
'''


def formula_record(repository_path="/tmp/homebrew-core", **overrides):
    """Returns a formula record in the JSON shape accepted by Formula.model_validate."""
    record = {
        "name": "foo",
        "version": "2.0.0",
        "archive": "https://example.com/{owner}/{name}/{version}.tar.gz",
        "url": "https://github.com/acme/foo",
        "hash": "sha256:cafef00d",
        "git": {
            "path": str(repository_path),
            "upstream": {"owner": "Homebrew", "repo": "homebrew-core"},
            "fork": {"owner": "octocat"},
        },
    }
    record.update(overrides)
    return record


def make_formula(repository_path="/tmp/homebrew-core", **overrides) -> Formula:
    """Builds a Formula with sensible defaults."""
    return Formula.model_validate(formula_record(repository_path, **overrides))
