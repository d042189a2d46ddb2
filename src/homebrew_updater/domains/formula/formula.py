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

import re
from pathlib import Path
from typing import NamedTuple, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

PLACEHOLDER_PATTERN = re.compile(r"\{(owner|name|version)\}")


class SourceRepository(NamedTuple):
    """Owner and name of the project a formula packages."""
    user: str
    name: str


class UpstreamRepository(BaseModel):
    """The repository pull requests are opened against."""
    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str


class ForkRepository(BaseModel):
    """The fork that holds the pushed release branch."""
    model_config = ConfigDict(frozen=True)

    owner: str


class GitSettings(BaseModel):
    """Where the formula lives locally and where its pull requests go."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    repository_path: str = Field(alias="path")
    upstream: UpstreamRepository
    fork: ForkRepository


class Formula(BaseModel):
    """
    A formula release to publish.

    Accepts both the snake_case attribute names and the record keys
    (`archive`, `url`, `hash`, `git.path`) when validated from a dict.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str
    archive_url_template: str = Field(alias="archive")
    source_url: str = Field(alias="url")
    checksum_spec: str = Field(alias="hash")
    git: GitSettings

    def short_name(self) -> str:
        """Returns the formula name without any `owner/tap/` prefix."""
        return self.name.rsplit("/", 1)[-1]

    def branch_name(self) -> str:
        """Returns the pull request branch name, `<name>-<version>`."""
        return f"{self.short_name()}-{self.version}"

    def title(self) -> str:
        """Returns the commit message and pull request title."""
        return f"{self.short_name()} {self.version}"

    def repo(self) -> SourceRepository:
        """
        Parses the project owner and name from the source url.

        e.g. https://github.com/phpmyadmin/phpmyadmin -> (phpmyadmin, phpmyadmin)

        Raises:
            ValueError: If the url path is not exactly `/<owner>/<name>`
        """
        path = urlparse(self.source_url).path.strip("/")
        parts = path.split("/")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Cannot derive owner/name from source url: {self.source_url}")
        return SourceRepository(user=parts[0], name=parts[1])

    def archive_url(self) -> str:
        """Returns the archive url template with {owner}, {name} and {version} filled in."""
        repo = self.repo()
        pairs = {
            "owner": repo.user,
            "name": repo.name,
            "version": self.version,
        }
        # Single pass so substituted values are never re-expanded
        return PLACEHOLDER_PATTERN.sub(lambda match: pairs[match.group(1)], self.archive_url_template)

    def checksum(self) -> Tuple[str, str]:
        """
        Splits the checksum spec into (algorithm, digest).

        Raises:
            ValueError: If the spec is not `<algorithm>:<digest>`
        """
        algorithm, separator, digest = self.checksum_spec.partition(":")
        if not separator or not algorithm or not digest:
            raise ValueError(f"Malformed checksum spec: {self.checksum_spec!r}")
        return algorithm, digest

    def formula_path(self, extension: str = ".rb") -> Path:
        """Returns the formula file inside the local repository."""
        return Path(self.git.repository_path) / f"{self.short_name().lower()}{extension}"
