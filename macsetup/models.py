"""Domain models for machine setup."""

# ============================================================
# Imports
# ============================================================

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any


# ============================================================
# Enums
# ============================================================

class PackageKind(Enum):
    """Kind of Homebrew package, mapped to its ``brew`` flag."""

    FORMULA = "--formula"
    CASK = "--cask"


class InstallStatus(Enum):
    """Status of a package after its install step."""

    ALREADY_INSTALLED = "Already installed"
    INSTALLED = "Installed"
    INSTALLED_DRYRUN = "Installed (Not executed)"
    PRESENT_OUTSIDE_HOMEBREW = "Skipped (present outside Homebrew)"


class CopyStatus(Enum):
    """Status of a dotfile after its copy step."""

    COPIED = "Copied"
    COPIED_DRYRUN = "Copied (Not executed)"
    SKIPPED_UNREADABLE = "Skipped (source unreadable)"


# ============================================================
# Manifest Models
# ============================================================

def _string_list(value: Any, where: str) -> tuple[str, ...]:
    """Validate a list of strings, treating an empty YAML value as empty."""
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{where} must be a list of strings")
    return tuple(value)


def _category_map(value: Any, where: str) -> dict[str, tuple[str, ...]]:
    """Validate a mapping of category name to a list of package names."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{where} must be a mapping of category to package list")
    return {
        str(category): _string_list(packages, f"{where}.{category}")
        for category, packages in value.items()
    }


@dataclass(frozen=True)
class BrewManifest:
    """
    The ``brew`` section of the configuration file.

    Attributes:
        taps: Tap identifiers, in declared order
        formulae: Category name to formula names
        casks: Category name to cask names
    """

    taps: tuple[str, ...] = ()
    formulae: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    casks: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        # Category maps are read-only views over private copies
        object.__setattr__(self, "formulae", MappingProxyType(dict(self.formulae)))
        object.__setattr__(self, "casks", MappingProxyType(dict(self.casks)))

    def __hash__(self) -> int:
        return hash((self.taps, tuple(self.formulae.items()), tuple(self.casks.items())))

    @classmethod
    def from_data(cls, data: Any) -> "BrewManifest":
        """Create a BrewManifest from the parsed ``brew`` section."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("brew must be a mapping")

        return cls(
            taps=_string_list(data.get("taps"), "brew.taps"),
            formulae=_category_map(data.get("formulae"), "brew.formulae"),
            casks=_category_map(data.get("casks"), "brew.casks"),
        )

    def to_data(self) -> dict[str, Any]:
        return {
            "taps": list(self.taps),
            "formulae": {category: list(packages) for category, packages in self.formulae.items()},
            "casks": {category: list(packages) for category, packages in self.casks.items()},
        }


@dataclass(frozen=True)
class Manifest:
    """
    Declarative description of a machine: Homebrew packages and dotfiles.

    Attributes:
        brew: Taps, formulae and casks to ensure
        dotfiles: File names relative to the dotfiles directory and the home directory
    """

    brew: BrewManifest = field(default_factory=BrewManifest)
    dotfiles: tuple[str, ...] = ()

    @classmethod
    def from_data(cls, data: Any) -> "Manifest":
        """
        Create a Manifest from a parsed configuration document.

        Args:
            data: Top-level mapping from YAML or TOML (None for an empty file)

        Returns:
            Manifest instance

        Raises:
            ValueError: If a section has the wrong shape
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("configuration must be a mapping at the top level")

        return cls(
            brew=BrewManifest.from_data(data.get("brew")),
            dotfiles=_string_list(data.get("dotfiles"), "dotfiles"),
        )

    def to_data(self) -> dict[str, Any]:
        """Convert back to plain lists and dicts, preserving every declared order."""
        return {
            "brew": self.brew.to_data(),
            "dotfiles": list(self.dotfiles),
        }


# ============================================================
# Result Models
# ============================================================

@dataclass(frozen=True)
class InstallResult:
    """Result of ensuring a single formula or cask."""

    name: str
    kind: PackageKind
    status: InstallStatus


@dataclass(frozen=True)
class CopyResult:
    """
    Result of copying a single dotfile.

    Attributes:
        name: Declared dotfile name
        source_path: Resolved source path inside the dotfiles directory
        target_path: Resolved destination path inside the home directory
        status: Status after execution
    """

    name: str
    source_path: Path
    target_path: Path
    status: CopyStatus

    def is_success(self) -> bool:
        """Check if the dotfile ended up (or would end up) in place."""
        return self.status in (CopyStatus.COPIED, CopyStatus.COPIED_DRYRUN)
