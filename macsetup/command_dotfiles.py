"""Dotfiles command — copy declared dotfiles into the home directory."""

# ============================================================
# Imports
# ============================================================

from collections.abc import Sequence

from .config import Config, load_manifest
from .errors import DotfileError
from .models import CopyResult, CopyStatus
from .output import Color, print_header, print_status, print_warning


# ============================================================
# Configuration
# ============================================================

DOTFILE_MODE = 0o644


# ============================================================
# Entry Point
# ============================================================

def execute_dotfiles(config: Config) -> list[CopyResult]:
    """Load the configuration file and copy its dotfiles."""
    manifest = load_manifest(config.config_file)
    return ensure_dotfiles(config, manifest.dotfiles)


def ensure_dotfiles(config: Config, names: Sequence[str]) -> list[CopyResult]:
    """
    Copy each dotfile from the dotfiles directory into the home directory.

    Unreadable sources are skipped; a failed write aborts the remaining
    copies.

    Args:
        config: Configuration object
        names: Dotfile names, relative to both directories

    Returns:
        List of results, one per declared name

    Raises:
        DotfileError: If a destination cannot be written
    """
    results: list[CopyResult] = []
    if not names:
        return results

    print_header("Copying dotfiles")
    for name in names:
        result = copy_dotfile(config, name)
        results.append(result)
        print_copy_result(result)

    return results


# ============================================================
# Copying
# ============================================================

def copy_dotfile(config: Config, name: str) -> CopyResult:
    """Copy a single dotfile, overwriting any existing destination."""
    source_path = config.dotfiles_dir / name
    target_path = config.home_dir / name

    # Read source file
    try:
        data = source_path.read_bytes()
    except OSError as e:
        print_warning(f"Unable to read {source_path}, skipping ({e.strerror or e})")
        return CopyResult(name, source_path, target_path, CopyStatus.SKIPPED_UNREADABLE)

    if config.dryrun:
        return CopyResult(name, source_path, target_path, CopyStatus.COPIED_DRYRUN)

    # Create parent directories and write destination
    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_bytes(data)
        target_path.chmod(DOTFILE_MODE)
    except OSError as e:
        raise DotfileError(f"write {target_path}: {e.strerror or e}") from e

    return CopyResult(name, source_path, target_path, CopyStatus.COPIED)


# ============================================================
# Supporting Code
# ============================================================

def print_copy_result(result: CopyResult) -> None:
    """Print formatted result for a dotfile copy."""
    if result.status == CopyStatus.SKIPPED_UNREADABLE:
        print_status(result.name, result.status.value, Color.YELLOW, str(result.source_path))
    else:
        print_status(result.name, result.status.value, Color.GREEN, str(result.target_path))
