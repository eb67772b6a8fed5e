"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Top-level error reporting
"""
import argparse
import os
import sys
from typing import List, Optional

from patternkit._package import DESCRIPTION, PACKAGE_NAME, VERSION
from patternkit.bootstrap import Application
from patternkit.catalog import Category
from patternkit.cli.formatters import format_output
from patternkit.domain.base.exceptions import DomainException
from patternkit.infrastructure.logging.logger import get_logger

FORMAT_CHOICES = ['json', 'yaml', 'table', 'list']

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with resource-action structure."""
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List every demonstration
  %(prog)s list --category structural        # Only structural patterns
  %(prog)s show state --format yaml          # Describe one demonstration
  %(prog)s run state command                 # Run demonstrations in order
  %(prog)s run --all                         # Run the whole catalogue
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List demonstrations')
    list_parser.add_argument('--category', choices=[c.value for c in Category],
                             help='Filter by pattern category')
    list_parser.add_argument('--format', choices=FORMAT_CHOICES, help='Output format')

    show_parser = subparsers.add_parser('show', help='Show demonstration details')
    show_parser.add_argument('tag', help='Demonstration tag')
    show_parser.add_argument('--format', choices=FORMAT_CHOICES, help='Output format')

    run_parser = subparsers.add_parser('run', help='Run demonstrations')
    run_parser.add_argument('tags', nargs='*', help='Demonstration tags to run in order')
    run_parser.add_argument('--all', action='store_true', help='Run every demonstration')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def _output_format(app: Application, args: argparse.Namespace) -> str:
    return getattr(args, 'format', None) or app.config.output.format.value


def execute_command(app: Application, args: argparse.Namespace) -> int:
    """Route a parsed command to its handler and return the exit status."""
    catalog = app.catalog

    if args.command == 'list':
        category = Category(args.category) if args.category else None
        data = {"demos": [entry.to_dict() for entry in catalog.entries(category)]}
        print(format_output(data, _output_format(app, args)))
        return 0

    if args.command == 'show':
        data = {"demo": catalog.get(args.tag).to_dict()}
        print(format_output(data, _output_format(app, args)))
        return 0

    if args.command == 'run':
        if args.all:
            entries = catalog.entries()
        elif args.tags:
            # Resolve every tag first so a typo fails before anything runs
            entries = [catalog.get(tag) for tag in args.tags]
        else:
            print("Nothing to run: pass demonstration tags or --all", file=sys.stderr)
            return 1
        for index, entry in enumerate(entries):
            if len(entries) > 1:
                if index:
                    print()
                print(f"=== {entry.title} ===")
            entry.run()
        return 0

    build_parser().print_help()
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)
    app = Application(config_path=args.config or os.environ.get("PATTERNKIT_CONFIG"),
                      log_level=args.log_level)
    try:
        app.initialize()
        return execute_command(app, args)
    except DomainException as e:
        logger.error("Command failed", error_code=e.error_code, error=e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
