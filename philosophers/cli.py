"""Command-line entry point for the dining philosophers simulation."""

import sys

from .config import ArgumentError, Config
from .simulation import Simulation


def main(argv=None):
    """Run the simulation from command-line arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (4, 5):
        print("The args ara not correct", file=sys.stderr)
        return 1
    try:
        config = Config.from_args(args)
    except ArgumentError as error:
        print(error)
        return 1
    Simulation(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())