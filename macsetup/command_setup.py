"""Setup command — bootstrap Homebrew, install packages, and copy dotfiles."""

# ============================================================
# Imports
# ============================================================

from .command_brew import apply_brew_manifest, bootstrap_homebrew
from .command_dotfiles import ensure_dotfiles
from .config import Config, load_manifest
from .models import Manifest
from .output import print_header, print_info, print_success


# ============================================================
# Entry Point
# ============================================================

def execute_setup(config: Config) -> None:
    """
    Set up the machine from the configuration file.

    Steps:
    1. Ensure Homebrew is installed
    2. Load the configuration file
    3. Tap repositories, install formulae, install casks
    4. Copy dotfiles into the home directory

    Each step stops the run at its first failure.
    """
    print_header("Mac setup")

    bootstrap_homebrew(config)
    manifest = load_manifest(config.config_file)
    print_manifest_summary(manifest)

    apply_brew_manifest(config, manifest)
    ensure_dotfiles(config, manifest.dotfiles)

    print_success("Mac setup complete!")


# ============================================================
# Supporting Code
# ============================================================

def print_manifest_summary(manifest: Manifest) -> None:
    """Print how much the configuration declares."""
    brew = manifest.brew
    print_info(
        f"Loaded {len(brew.taps)} taps, {len(brew.formulae)} formula categories, "
        f"{len(brew.casks)} cask categories, {len(manifest.dotfiles)} dotfiles"
    )
