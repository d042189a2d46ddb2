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
import subprocess
from typing import List, Optional

# Seeded from the environment so import-time logging works before UpdaterConfig loads
DEBUG_MODE = os.environ.get("DEBUG_MODE", "false").lower() == "true"


def set_debug_mode(enabled: bool):
    """Turns debug output on or off for the whole process."""
    global DEBUG_MODE
    DEBUG_MODE = enabled


def log(message: str, is_error: bool = False, is_warning: bool = False):
    """Prints a message to stdout, or to stderr for errors."""
    if is_error:
        print(message, file=sys.stderr, flush=True)
    elif is_warning:
        print(f"WARNING: {message}", flush=True)
    else:
        print(message, flush=True)


def debug_log(*args):
    """Prints only if DEBUG_MODE is True."""
    if DEBUG_MODE:
        message = " ".join(map(str, args))
        print(message, flush=True)


class CommandExecutionError(Exception):
    """Custom exception for errors during command execution."""
    def __init__(self, message, return_code, command, stdout=None, stderr=None):
        super().__init__(message)
        self.return_code = return_code
        self.command = command
        self.stdout = stdout
        self.stderr = stderr


def _truncate(text: str, limit: int = 1000) -> str:
    if len(text) > limit:
        half = limit // 2
        return f"{text[:half]}...\n...{text[-half:]}"
    return text


def run_command(command: List[str], cwd: Optional[str] = None) -> str:
    """
    Runs a command and returns its stdout.
    Prints command, stdout/stderr based on DEBUG_MODE.

    Args:
        command: List of command and arguments to run
        cwd: Optional working directory for the command

    Returns:
        str: Command stdout output

    Raises:
        CommandExecutionError: If the command exits non-zero
    """
    command_text = ' '.join(command)
    try:
        debug_log(f"::group::Running command: {command_text}")
        debug_log(f"  Working directory: {cwd}")

        process = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            check=False,  # We'll handle errors ourselves
        )

        debug_log(f"  Return Code: {process.returncode}")
        if process.stdout:
            debug_log(f"  Command stdout:\n---\n{_truncate(process.stdout.strip())}\n---")

        stderr_text = process.stderr.strip() if process.stderr else ""
        if stderr_text:
            if process.returncode != 0:
                log(f"  Command stderr:\n---\n{_truncate(stderr_text)}\n---", is_error=True)
            else:
                # git writes progress output to stderr on success
                debug_log(f"  Command stderr:\n---\n{_truncate(stderr_text)}\n---")

        if process.returncode != 0:
            log(f"Error: Command failed with return code {process.returncode}: {command_text}", is_error=True)
            raise CommandExecutionError(
                message=f"Command '{command_text}' failed with return code {process.returncode}.",
                return_code=process.returncode,
                command=command_text,
                stdout=process.stdout.strip() if process.stdout else None,
                stderr=stderr_text or "No error output available"
            )

        return process.stdout.strip() if process.stdout else ""
    finally:
        debug_log("::endgroup::")
