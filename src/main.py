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

import sys
import os
import json
from datetime import datetime
from typing import List, Optional

# Add the project root to the Python path to allow for absolute imports
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from pydantic import ValidationError

from src.utils import debug_log, log
from src.config import get_config
from src.github.github_api_client import GitHubApiClient
from src.homebrew_updater.domains.formula.formula import Formula
from src.orchestrator.formula_update_orchestrator import FormulaUpdateOrchestrator


def load_formulas(path: str) -> List[Formula]:
    """
    Loads formula releases from a JSON file holding one object or a list of them.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If an entry is not a valid formula
    """
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if isinstance(data, dict):
        data = [data]
    return [Formula.model_validate(entry) for entry in data]


def create_orchestrator(config) -> FormulaUpdateOrchestrator:
    """Wires the orchestrator with the GitHub client and configured git binary."""
    github_client = GitHubApiClient(
        token=config.github_token,
        base_url=config.github_api_url,
        user_agent=config.USER_AGENT,
    )
    return FormulaUpdateOrchestrator(config, github_client)


def main(argv: Optional[List[str]] = None):
    """Updates every formula listed in the JSON file given as argument or FORMULA_FILE."""
    argv = sys.argv[1:] if argv is None else argv
    start_time = datetime.now()
    log("--- Starting Homebrew Updater ---")
    debug_log(f"Start time: {start_time.strftime('%Y-%m-%d %H:%M:%S')}")

    formula_file = argv[0] if argv else os.environ.get("FORMULA_FILE")
    if not formula_file:
        log("Error: No formula file given. Pass a path or set FORMULA_FILE.", is_error=True)
        sys.exit(1)

    try:
        formulas = load_formulas(formula_file)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        log(f"Error: Could not load formulas from {formula_file}: {e}", is_error=True)
        sys.exit(1)

    config = get_config()
    orchestrator = create_orchestrator(config)

    for formula in formulas:
        log(f"\n::group::--- Updating {formula.name} to {formula.version} ---")
        try:
            orchestrator.handle(formula)
        except Exception as e:
            log(f"Error: Failed to update {formula.name} {formula.version}: {e}", is_error=True)
            sys.exit(1)
        finally:
            log("::endgroup::")

    log(f"\n--- Script finished (total runtime: {datetime.now() - start_time}) ---")


if __name__ == "__main__":
    main()
