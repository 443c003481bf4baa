"""Formatted output utilities.

Headers and warnings follow Homebrew's own ``==>`` / ``Warning:`` style so
macsetup output reads naturally between streamed ``brew`` output.
"""

# ============================================================
# Imports
# ============================================================

import sys

import textcase


# ============================================================
# Configuration
# ============================================================

class Color:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    GRAY = "\033[90m"


# ============================================================
# Output Functions
# ============================================================

def print_header(message: str) -> None:
    """Print a section header as a bold ``==>`` line preceded by a blank line."""
    print(f"\n{Color.BOLD}{Color.BLUE}==>{Color.RESET} {Color.BOLD}{message}{Color.RESET}")


def print_category(kind: str, category: str, count: int) -> None:
    """Print a package category heading, e.g. ``==> Formulae: Dev Tools (4)``."""
    print_header(f"{kind}: {textcase.title(category)} ({count})")


def print_info(message: str) -> None:
    print(message)


def print_error(message: str) -> None:
    """Print ``Error: message`` to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def print_success(message: str) -> None:
    print(f"{Color.GREEN}{message}{Color.RESET}")


def print_warning(message: str) -> None:
    """Print ``Warning: message`` with a yellow prefix."""
    print(f"{Color.YELLOW}Warning:{Color.RESET} {message}")


def print_status(name: str, status: str, status_color: str, detail: str = "", monochrome: bool = False) -> None:
    """
    Print a formatted per-item status line.

    Args:
        name: Package or dotfile name
        status: Status message (e.g., "Installed", "Copied")
        status_color: Color constant for the status (e.g., Color.GREEN)
        detail: Optional trailing detail, printed after an arrow
        monochrome: If True, use status_color for the entire line
    """
    suffix = f" -> {detail}" if detail else ""
    if monochrome:
        print(f"{status_color}[{name}] {status}{suffix}{Color.RESET}")
    else:
        print(f"[{Color.CYAN}{name}{Color.RESET}] {status_color}{status}{Color.RESET}{suffix}")
