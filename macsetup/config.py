"""Configuration management."""

# ============================================================
# Imports
# ============================================================

import tomllib
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .models import Manifest


# ============================================================
# Configuration
# ============================================================

DEFAULT_CONFIG_FILE = "config.yaml"
DOTFILES_DIR = "dotfiles"


class Config:
    """Configuration paths and global state."""

    def __init__(self, config_file: str | Path = DEFAULT_CONFIG_FILE, working_dir: Path | None = None, home_dir: Path | None = None):
        # Resolve paths against the directory the tool is run from
        self.working_dir = working_dir or Path.cwd()
        self.config_file = self.working_dir / config_file
        self.dotfiles_dir = self.working_dir / DOTFILES_DIR
        self.home_dir = home_dir or Path.home()

        # Runtime flags
        self.dryrun = False


# ============================================================
# Manifest Loading
# ============================================================

def load_document(path: Path) -> Any:
    """Load and parse a YAML or TOML file, chosen by suffix."""
    if path.suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)

    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_manifest(path: Path) -> Manifest:
    """
    Read the configuration file into a Manifest.

    Any problem (missing file, syntax error, wrong shape) is fatal: no
    partial configuration is returned.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    try:
        data = load_document(path)
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e.strerror or e}") from e
    except (UnicodeDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot parse {path}: {e}") from e

    try:
        return Manifest.from_data(data)
    except ValueError as e:
        raise ConfigError(f"invalid {path}: {e}") from e


def dump_manifest(manifest: Manifest) -> str:
    """Serialize a Manifest to YAML in declared order."""
    return yaml.safe_dump(manifest.to_data(), sort_keys=False, default_flow_style=False)
