"""Subprocess helpers.

Every external command goes through this module so tests can swap the
functions out with monkeypatch.
"""

# ============================================================
# Imports
# ============================================================

import subprocess
from collections.abc import Sequence

from .errors import CommandError


# ============================================================
# Commands
# ============================================================

def run(args: Sequence[str]) -> None:
    """Run a command with output streamed to the terminal; raise CommandError on failure."""
    try:
        subprocess.run(list(args), check=True)
    except subprocess.CalledProcessError as e:
        raise CommandError(f"{' '.join(args)} exited with status {e.returncode}", e.returncode) from e
    except FileNotFoundError as e:
        raise CommandError(f"{args[0]}: command not found") from e


def succeeds(args: Sequence[str]) -> bool:
    """Run a command quietly and report whether it exited with status 0."""
    try:
        result = subprocess.run(list(args), capture_output=True, check=False)
    except FileNotFoundError:
        return False
    return result.returncode == 0


def capture(args: Sequence[str]) -> tuple[int, str]:
    """
    Run a command and capture its combined stdout and stderr.

    Returns:
        Tuple of (return code, combined output)
    """
    try:
        result = subprocess.run(
            list(args),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except FileNotFoundError as e:
        raise CommandError(f"{args[0]}: command not found") from e
    return result.returncode, result.stdout or ""
