"""Brew command — ensure Homebrew, taps, formulae, and casks."""

# ============================================================
# Imports
# ============================================================

from collections.abc import Mapping, Sequence

from . import homebrew
from .config import Config, load_manifest
from .errors import CommandError, MacSetupError
from .models import InstallResult, InstallStatus, Manifest, PackageKind
from .output import (
    Color,
    print_category,
    print_header,
    print_info,
    print_status,
)


# ============================================================
# Entry Point
# ============================================================

def execute_brew(config: Config) -> list[InstallResult]:
    """
    Bring Homebrew packages in line with the configuration file.

    Steps:
    1. Ensure Homebrew itself is installed
    2. Load the configuration file
    3. Tap, then install formulae, then install casks
    """
    bootstrap_homebrew(config)
    manifest = load_manifest(config.config_file)
    return apply_brew_manifest(config, manifest)


def bootstrap_homebrew(config: Config) -> None:
    """Ensure Homebrew is available, aborting the run if it is not."""
    print_header("Homebrew")
    if not homebrew.ensure_homebrew(config):
        raise MacSetupError("Homebrew setup failed; aborting")


def apply_brew_manifest(config: Config, manifest: Manifest) -> list[InstallResult]:
    """Run the tap, formula and cask steps in order, stopping at the first failure."""
    ensure_taps(config, manifest.brew.taps)
    results = ensure_formulae(config, manifest.brew.formulae)
    results.extend(ensure_casks(config, manifest.brew.casks))
    return results


# ============================================================
# Taps
# ============================================================

def ensure_taps(config: Config, taps: Sequence[str]) -> None:
    """Tap each repository in declared order; ``brew tap`` is itself idempotent."""
    if not taps:
        return

    print_header(f"Taps ({len(taps)})")
    for name in taps:
        if config.dryrun:
            print_status(name, "Tapped (Not executed)", Color.GREEN)
            continue

        print_info(f"Tapping {name}...")
        try:
            homebrew.tap(name)
        except CommandError as e:
            raise CommandError(f"tap {name}: {e}", e.returncode) from e


# ============================================================
# Formulae
# ============================================================

def ensure_formulae(config: Config, categories: Mapping[str, Sequence[str]]) -> list[InstallResult]:
    """Install missing formulae category by category."""
    results: list[InstallResult] = []

    for category, packages in categories.items():
        print_category("Formulae", category, len(packages))
        for name in packages:
            result = install_formula(config, name)
            results.append(result)
            print_install_result(result)

    return results


def install_formula(config: Config, name: str) -> InstallResult:
    """Install a single formula unless ``brew list`` already reports it."""
    if homebrew.is_installed(PackageKind.FORMULA, name):
        return InstallResult(name, PackageKind.FORMULA, InstallStatus.ALREADY_INSTALLED)

    if config.dryrun:
        return InstallResult(name, PackageKind.FORMULA, InstallStatus.INSTALLED_DRYRUN)

    print_info(f"Installing formula {name}...")
    try:
        homebrew.install_formula(name)
    except CommandError as e:
        raise CommandError(f"install {name}: {e}", e.returncode) from e

    return InstallResult(name, PackageKind.FORMULA, InstallStatus.INSTALLED)


# ============================================================
# Casks
# ============================================================

def ensure_casks(config: Config, categories: Mapping[str, Sequence[str]]) -> list[InstallResult]:
    """Install missing casks category by category."""
    results: list[InstallResult] = []

    for category, packages in categories.items():
        print_category("Casks", category, len(packages))
        for name in packages:
            result = install_cask(config, name)
            results.append(result)
            print_install_result(result)

    return results


def install_cask(config: Config, name: str) -> InstallResult:
    """
    Install a single cask unless ``brew list`` already reports it.

    A failed install whose output says the app already exists outside
    Homebrew counts as a skip, not a failure.

    Raises:
        CommandError: If the install fails for any other reason
    """
    if homebrew.is_installed(PackageKind.CASK, name):
        return InstallResult(name, PackageKind.CASK, InstallStatus.ALREADY_INSTALLED)

    if config.dryrun:
        return InstallResult(name, PackageKind.CASK, InstallStatus.INSTALLED_DRYRUN)

    print_info(f"Installing cask {name}...")
    returncode, output = homebrew.install_cask(name)

    if returncode != 0:
        if homebrew.is_present_outside_homebrew(output):
            return InstallResult(name, PackageKind.CASK, InstallStatus.PRESENT_OUTSIDE_HOMEBREW)
        raise CommandError(f"install cask {name} failed with status {returncode}", returncode, output)

    return InstallResult(name, PackageKind.CASK, InstallStatus.INSTALLED)


# ============================================================
# Supporting Code
# ============================================================

def print_install_result(result: InstallResult) -> None:
    """Print formatted result for a package step."""
    if result.status == InstallStatus.ALREADY_INSTALLED:
        print_status(result.name, result.status.value, Color.GRAY, monochrome=True)
    elif result.status == InstallStatus.PRESENT_OUTSIDE_HOMEBREW:
        print_status(result.name, result.status.value, Color.YELLOW)
    else:
        print_status(result.name, result.status.value, Color.GREEN)
