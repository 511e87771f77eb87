"""
bluebutton.cli - Command-line interface.

Main entry point for the bluebutton CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bluebutton import __version__
from bluebutton.commands import config_cmd, parse_cmd, sections_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bluebutton",
        description="Convert My HealtheVet Blue Button text reports to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bluebutton parse report.txt                # Print the parsed report as JSON
  bluebutton parse report.txt -o report.json # Write JSON to a file
  cat report.txt | bluebutton parse -        # Read the report from stdin
  bluebutton parse report.txt --section DEMOGRAPHICS
  bluebutton sections                        # List configured sections

Configuration:
  bluebutton config path                     # Show config file location
  bluebutton config show                     # Effective section rules as TOML

For detailed command help: bluebutton <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"bluebutton {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file (default: nearest .bluebutton.toml)",
        metavar="PATH",
    )
    parser.add_argument(
        "--no-defaults",
        action="store_true",
        help="Ignore the built-in section rules",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a Blue Button report into JSON",
    )
    parse_parser.add_argument(
        "input",
        help="Report file, or - for stdin",
        metavar="FILE",
    )
    parse_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write JSON to this file instead of stdout",
        metavar="PATH",
    )
    parse_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2, 0 for compact)",
    )
    parse_parser.add_argument(
        "--section",
        action="append",
        help="Only output this section (can be repeated)",
        metavar="NAME",
    )
    parse_parser.add_argument(
        "--newline",
        help="Line separator, e.g. '\\r\\n' (default: from config, else '\\n')",
        metavar="SEP",
    )
    parse_parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Input file encoding (default: utf-8)",
    )

    # sections command
    subparsers.add_parser(
        "sections",
        help="List configured sections and their collections",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect configuration",
    )
    config_parser.add_argument(
        "config_action",
        choices=["path", "show"],
        help="path: show config file location; show: print effective rules as TOML",
    )

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    _configure_logging(args)

    try:
        # Dispatch to command handlers
        if args.command == "parse":
            return parse_cmd.run(args)
        elif args.command == "sections":
            return sections_cmd.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
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
