"""Show command — print the loaded configuration."""

from .config import Config, dump_manifest, load_manifest


def execute_show(config: Config) -> None:
    """Load the configuration file and print it back as normalized YAML."""
    manifest = load_manifest(config.config_file)
    print(dump_manifest(manifest), end="")
