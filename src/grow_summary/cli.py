"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from grow_summary import __version__
from grow_summary.config import get_settings
from grow_summary.core import describe_log, process_log
from grow_summary.schemas import FIELD_SETS


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="grow-summary",
        description="Daily statistics and growing degree days from environmental sensor logs",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Options shared by commands that read a sensor log
    log_options = argparse.ArgumentParser(add_help=False)
    log_options.add_argument(
        "--readings",
        type=Path,
        default=None,
        help="Sensor readings CSV (default: readings_path from settings)",
    )
    log_options.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="GDD base temperature (default: gdd_threshold from settings)",
    )
    log_options.add_argument(
        "--schema",
        choices=sorted(FIELD_SETS),
        default=None,
        help="Column layout of the readings CSV (default: schema_name from settings)",
    )

    # 'run' command - build the report
    run_parser = subparsers.add_parser("run", parents=[log_options], help="Write the daily report")
    run_parser.add_argument(
        "--events",
        type=Path,
        default=None,
        help="Events CSV (default: events_path from settings)",
    )
    run_parser.add_argument(
        "--no-events",
        action="store_true",
        help="Ignore the events file",
    )
    run_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Report CSV path (default: output_path from settings)",
    )
    run_parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Also write the report as HTML to this path",
    )

    # 'summary' command - print per-day statistics
    summary_parser = subparsers.add_parser(
        "summary", parents=[log_options], help="Print per-day statistics"
    )
    summary_parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of text",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the 'run' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    events_path = None if args.no_events else (args.events or settings.events_path)
    result = process_log(
        readings_path=args.readings or settings.readings_path,
        events_path=events_path,
        output_path=args.output or settings.output_path,
        gdd_threshold=args.threshold if args.threshold is not None else settings.gdd_threshold,
        schema=args.schema or settings.schema_name,
        html_path=args.html,
    )
    if result.success:
        print(f"Success: {result.message}")
        return 0
    else:
        print(f"Error: {result.error}", file=sys.stderr)
        return result.exit_code


def cmd_summary(args: argparse.Namespace) -> int:
    """Handle the 'summary' command."""
    settings = get_settings()
    result = describe_log(
        readings_path=args.readings or settings.readings_path,
        gdd_threshold=args.threshold if args.threshold is not None else settings.gdd_threshold,
        schema=args.schema or settings.schema_name,
        as_json=args.json,
    )
    if result.success:
        print(result.message)
        return 0
    else:
        print(f"Error: {result.error}", file=sys.stderr)
        return result.exit_code


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Readings: {settings.readings_path}")
    print(f"Events: {settings.events_path}")
    print(f"Output: {settings.output_path}")
    print(f"GDD threshold: {settings.gdd_threshold}")
    print(f"Schema: {settings.schema_name}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "run": cmd_run,
        "summary": cmd_summary,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
