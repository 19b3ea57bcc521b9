"""
citegraph.cli - Command-line interface.

Main entry point for the citegraph CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from citegraph import __version__
from citegraph.commands import load


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="citegraph",
        description="Load citation datasets into a typed graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  citegraph load citations.txt                  # Load and summarize
  citegraph load citations.txt --max-records 1000
  citegraph load citations.txt -j               # JSON summary for tooling

Configuration:
  .citegraph.toml is searched from the current directory upward.
  CITEGRAPH_<SECTION>_<KEY> environment variables override it.

For detailed command help: citegraph <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"citegraph {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output (progress and skipped lines on stderr)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # load command
    load_parser = subparsers.add_parser(
        "load",
        help="Load a citation dataset and print a summary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format (one field per line, blank line between records):
  #*title  #@authors  #year  #conf  #citation  #index  #%cited-index
""",
    )
    load_parser.add_argument(
        "path",
        type=Path,
        help="Citation dataset file (UTF-8)",
    )
    load_parser.add_argument(
        "--max-records",
        type=int,
        metavar="N",
        help="Stop after N records (0 = no limit)",
    )
    load_parser.add_argument(
        "--merge-satellites",
        action="store_true",
        help="Share one vertex among equal authors, venues and years",
    )
    load_parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on malformed field lines instead of skipping them",
    )
    load_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output the summary as JSON",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install citegraph[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "load":
            return load.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
