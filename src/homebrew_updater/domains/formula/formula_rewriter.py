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
import fcntl
from pathlib import Path
from typing import Tuple
from src.utils import debug_log
from src.homebrew_updater.shared.exceptions import NothingToCommitError

URL_PATTERN = re.compile(r'url ".+?"\n')
CHECKSUM_PATTERN_TEMPLATE = r'(?:sha\d{{3}}|{algorithm}) ".+?"\n'


def rewrite_formula(content: str, archive_url: str, checksum: Tuple[str, str]) -> Tuple[str, int]:
    """
    Replaces the first url line and the first checksum line of a formula.

    Args:
        content: Formula file text
        archive_url: New archive url
        checksum: (algorithm, digest); the algorithm becomes the field label

    Returns:
        Tuple[str, int]: The rewritten text and the number of replacements made
    """
    algorithm, digest = checksum
    checksum_pattern = re.compile(CHECKSUM_PATTERN_TEMPLATE.format(algorithm=re.escape(algorithm)))

    # Callables keep the replacement text literal (no backreference expansion)
    content, url_count = URL_PATTERN.subn(lambda _: f'url "{archive_url}"\n', content, count=1)
    content, checksum_count = checksum_pattern.subn(lambda _: f'{algorithm} "{digest}"\n', content, count=1)

    debug_log(f"Formula rewrite: url replacements={url_count}, checksum replacements={checksum_count}")
    return content, url_count + checksum_count


def write_locked(path: Path, content: str) -> None:
    """Writes text to an existing file while holding an exclusive lock on it."""
    with open(path, "r+", encoding="utf-8", newline="") as handle:
        fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
        try:
            handle.seek(0)
            handle.truncate()
            handle.write(content)
            handle.flush()
        finally:
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)


class FormulaRewriter:
    """
    Updates a formula file in place for a new release.
    """

    def __init__(self, extension: str = ".rb"):
        self.extension = extension

    def rewrite(self, formula) -> Path:
        """
        Rewrites the url and checksum lines of the formula's file.

        Args:
            formula: The Formula being released

        Returns:
            Path: The file that was written

        Raises:
            NothingToCommitError: If neither line matched or the file is already current
            FileNotFoundError: If the formula file does not exist
        """
        path = formula.formula_path(self.extension)
        debug_log(f"Rewriting formula file: {path}")

        with open(path, "r", encoding="utf-8", newline="") as handle:
            original = handle.read()

        content, count = rewrite_formula(original, formula.archive_url(), formula.checksum())
        # An identical substitution counts as a match but leaves nothing to commit
        if count == 0 or content == original:
            raise NothingToCommitError(formula.name, formula.version)

        write_locked(path, content)
        return path
