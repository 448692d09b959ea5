"""Main entry point for roadgraph when run as a module.

This module enables running the analysis CLI with 'python -m roadgraph'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
