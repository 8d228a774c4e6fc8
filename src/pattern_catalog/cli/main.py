"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Running pattern demonstrations
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from pattern_catalog._package import __version__
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config import get_config_manager
from pattern_catalog.config.defaults import LogLevel
from pattern_catalog.domain.core.exceptions import ValidationError
from pattern_catalog.infrastructure.error import ErrorMiddleware
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.registry import PatternCategory, get_pattern_registry

FORMAT_CHOICES = ["json", "yaml", "table"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "pattern-catalog",
        description="Pattern Catalog - classic design patterns applied to toy domains",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List every pattern
  %(prog)s list --category behavioral        # List behavioral patterns
  %(prog)s list --format table               # Display as table
  %(prog)s show visitor                      # Show one pattern
  %(prog)s run adapter composite             # Run two demonstrations
  %(prog)s run --all                         # Run every demonstration
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (YAML or JSON)")
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Override the configured log level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List catalogue patterns")
    list_parser.add_argument(
        "--category",
        choices=[category.value for category in PatternCategory],
        help="Only list patterns of this family",
    )
    list_parser.add_argument("--format", choices=FORMAT_CHOICES, default="json", help="Output format")

    show_parser = subparsers.add_parser("show", help="Show one pattern")
    show_parser.add_argument("name", help="Pattern name")
    show_parser.add_argument("--format", choices=FORMAT_CHOICES, default="json", help="Output format")

    run_parser = subparsers.add_parser("run", help="Run pattern demonstrations")
    run_parser.add_argument("names", nargs="*", help="Pattern names")
    run_parser.add_argument("--all", action="store_true", help="Run every demonstration")

    return parser.parse_args(argv)


def handle_list(args: argparse.Namespace) -> Dict[str, Any]:
    """List registered patterns."""
    entries = get_pattern_registry().list_patterns(args.category)
    return {"count": len(entries), "patterns": [entry.to_dict() for entry in entries]}


def handle_show(args: argparse.Namespace) -> Dict[str, Any]:
    """Describe a single pattern."""
    return {"pattern": get_pattern_registry().get(args.name).to_dict()}


def handle_run(args: argparse.Namespace) -> None:
    """Run the requested demonstrations in order."""
    registry = get_pattern_registry()

    if args.all:
        entries = registry.list_patterns()
    elif args.names:
        entries = [registry.get(name) for name in args.names]
    else:
        raise ValidationError("Name at least one pattern or pass --all")

    logger = get_logger(__name__)
    for index, entry in enumerate(entries):
        if index:
            print()
        print(f"=== {entry.name} ({entry.category.value}) ===")
        logger.info("Running demonstration", pattern=entry.name)
        entry.demo()


def execute_command(args: argparse.Namespace) -> int:
    """Load configuration, configure logging and route the command."""
    # Default handlers first so configuration errors are rendered too
    setup_logging()

    config_manager = get_config_manager(args.config)
    logging_config = config_manager.get_logging_config().model_dump()
    if args.log_level:
        logging_config["level"] = args.log_level
    setup_logging(logging_config)

    if args.command == "list":
        print(format_output(handle_list(args), args.format))
    elif args.command == "show":
        print(format_output(handle_show(args), args.format))
    elif args.command == "run":
        handle_run(args)
    else:
        raise ValidationError("No command specified. Use --help for usage information.")

    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        exit_code = ErrorMiddleware().wrap_script_handler(execute_command)(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
