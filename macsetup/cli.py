"""Machine setup tool.

Installs Homebrew packages and copies dotfiles declared in config.yaml.
"""

import argparse
import sys

from .command_brew import execute_brew
from .command_dotfiles import execute_dotfiles
from .command_setup import execute_setup
from .command_show import execute_show
from .config import DEFAULT_CONFIG_FILE, Config
from .output import print_error, print_info


# --------------------------------------------------------------------------- #
# Configuration
# --------------------------------------------------------------------------- #

COMMANDS = {
    "brew":     execute_brew,
    "dotfiles": execute_dotfiles,
    "setup":    execute_setup,
    "show":     execute_show,
}


# --------------------------------------------------------------------------- #
# Main
# --------------------------------------------------------------------------- #

def main(argv=None):
    """Parse arguments and dispatch the requested command.

    Commands:
      setup     - Install Homebrew, taps, formulae, casks, then copy dotfiles
      brew      - Install Homebrew, taps, formulae, and casks only
      dotfiles  - Copy dotfiles into the home directory only
      show      - Print the loaded configuration as YAML
    """
    parser = argparse.ArgumentParser(description="Machine setup tool")
    parser.add_argument("command", nargs="?", default="setup", choices=COMMANDS,
                        help="command to execute (default: setup)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE,
                        help=f"configuration file (default: {DEFAULT_CONFIG_FILE})")
    parser.add_argument("--dry-run", action="store_true",
                        help="print actions without executing them")
    args = parser.parse_args(argv)

    # Initialize configuration and dispatch command
    try:
        config = Config(args.config)
        config.dryrun = args.dry_run
        COMMANDS[args.command](config)
    except KeyboardInterrupt:
        print_info("\nInterrupted")
        sys.exit(130)
    except Exception as e:
        print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
