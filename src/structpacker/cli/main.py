"""Main CLI entry point for structpacker."""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..cli.describe import describe_format
from ..exceptions import StructPackerError


def main() -> int:
    """Main entry point for the structpacker CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="structpacker: Fixed-width Binary Struct Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  structpacker --describe "<HxI?"       Show offsets and sizes of a format
  structpacker --version                 Show version
        """,
    )

    parser.add_argument(
        "--describe",
        metavar="FORMAT",
        type=str,
        help="Describe a format string: field offsets, widths and byte order",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"structpacker {__version__}",
    )

    args = parser.parse_args()

    # Handle --describe
    if args.describe is not None:
        try:
            describe_format(args.describe)
            return 0
        except StructPackerError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
