"""Homebrew package manager operations."""

# ============================================================
# Imports
# ============================================================

from . import shell
from .config import Config
from .errors import CommandError
from .models import PackageKind
from .output import print_error, print_info, print_success


# ============================================================
# Configuration
# ============================================================

BREW = "brew"

INSTALL_SCRIPT_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
INSTALL_COMMAND = ["/bin/bash", "-c", f"curl -fsSL {INSTALL_SCRIPT_URL} | bash"]

# Lowercase substrings in `brew install --cask` output meaning the app already
# exists somewhere Homebrew does not track. Depends on Homebrew's message wording.
PRESENT_OUTSIDE_HOMEBREW_MARKERS = (
    "already an app at",
    "already installed",
)


# ============================================================
# Bootstrap
# ============================================================

def is_homebrew_installed() -> bool:
    """Check whether ``brew --version`` runs successfully."""
    return shell.succeeds([BREW, "--version"])


def ensure_homebrew(config: Config) -> bool:
    """
    Make sure Homebrew is installed, running the official installer if not.

    Returns:
        True if Homebrew is (or would be, in dry-run mode) available
    """
    if is_homebrew_installed():
        print_info("Homebrew is already installed")
        return True

    if config.dryrun:
        print_info("Homebrew not found, would run the official installer (Not executed)")
        return True

    print_info("Installing Homebrew...")
    try:
        shell.run(INSTALL_COMMAND)
    except CommandError as e:
        print_error(f"Homebrew installation failed: {e}")
        return False

    print_success("Homebrew installed successfully")
    return True


# ============================================================
# Packages
# ============================================================

def tap(name: str) -> None:
    """Register a third-party repository with Homebrew."""
    shell.run([BREW, "tap", name])


def is_installed(kind: PackageKind, name: str) -> bool:
    """Check whether ``brew list`` knows the package."""
    return shell.succeeds([BREW, "list", kind.value, name])


def install_formula(name: str) -> None:
    """Install a formula with output streamed to the terminal."""
    shell.run([BREW, "install", name])


def install_cask(name: str) -> tuple[int, str]:
    """
    Install a cask, capturing its output for inspection.

    Returns:
        Tuple of (return code, combined output)
    """
    return shell.capture([BREW, "install", PackageKind.CASK.value, name])


def is_present_outside_homebrew(output: str) -> bool:
    """Check whether cask install output says the app already exists untracked."""
    lowered = output.lower()
    return any(marker in lowered for marker in PRESENT_OUTSIDE_HOMEBREW_MARKERS)
