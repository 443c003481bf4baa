"""Machine setup library."""

from .command_brew import execute_brew
from .command_dotfiles import execute_dotfiles
from .command_setup import execute_setup
from .command_show import execute_show
from .config import Config, dump_manifest, load_manifest
from .errors import CommandError, ConfigError, DotfileError, MacSetupError
from .models import (
    BrewManifest,
    CopyResult,
    CopyStatus,
    InstallResult,
    InstallStatus,
    Manifest,
    PackageKind,
)

__all__ = [
    # Configuration
    'Config',
    'load_manifest',
    'dump_manifest',
    # Domain models
    'BrewManifest',
    'Manifest',
    'PackageKind',
    'InstallResult',
    'InstallStatus',
    'CopyResult',
    'CopyStatus',
    # Errors
    'MacSetupError',
    'ConfigError',
    'CommandError',
    'DotfileError',
    # Commands
    'execute_setup',
    'execute_brew',
    'execute_dotfiles',
    'execute_show',
]
