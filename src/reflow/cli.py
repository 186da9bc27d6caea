# reflow/cli.py
"""
Reflow Command-Line Entry Point
===============================

This module is the entry point of the ``reflow`` command. It performs:
1) Environment Loading: reads ~/.config/reflow/.env early, so REFLOW_*
   overrides are visible to the configuration loader.
2) Argument Parsing: paths to process and per-run overrides.
3) Configuration & Logging: loads and validates the layered config and
   initializes logging.
4) Formatter Check: warns when the black executable is missing; commented
   print statements are then left untouched.
5) Processing: runs the `Reflower` over every path and prints one line per
   file plus a final summary.

Exit codes: 0 on success, 1 when a file failed (or, with ``--check``, when
a file would change), 2 on usage or configuration errors.
"""

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from dotenv import load_dotenv

from reflow import __version__
from reflow.core.Reflower import Reflower
from reflow.errors import ConfigError
from reflow.integrations.FormatterBridge import BlackFormatter
from reflow.utils.logging_config import setup_logging
from reflow.utils.utils import USER_CONFIG_DIR, load_config, validate_config


logger = logging.getLogger("reflow")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Creates the argument parser of the ``reflow`` command."""
    parser = argparse.ArgumentParser(
        prog="reflow",
        description=(
            "Rewrite the comments of Python source files so that no line "
            "exceeds the maximum width."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s script.py                 # Reflow a single file in place
  %(prog)s src/                      # Reflow every .py file below src/
  %(prog)s --check src/              # Report files that would change
  %(prog)s --max-width 99 src/       # Use a wider limit
        """,
    )
    parser.add_argument("paths", nargs="+", metavar="PATH", help="File or directory to process")
    parser.add_argument("--max-width", type=int, help="Maximum line width (default: 79)")
    parser.add_argument("--config", "-c", help="Additional TOML configuration file")
    parser.add_argument(
        "--dry-run", action="store_true", help="Report what would change without writing files"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Like --dry-run, but exit with status 1 if any file would change",
    )
    parser.add_argument(
        "--verbose", "-v", action="count", default=0, help="Increase console verbosity (-v, -vv)"
    )
    parser.add_argument("--no-log-file", action="store_true", help="Do not write reflow.log")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def apply_cli_overrides(config: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    """Applies command-line options on top of the loaded configuration."""
    if args.max_width is not None:
        config["reflow"]["max_width"] = args.max_width
    logging_settings = config.setdefault("logging", {})
    if args.verbose == 1:
        logging_settings["console_level"] = "INFO"
    elif args.verbose >= 2:
        logging_settings["console_level"] = "DEBUG"
    if args.no_log_file:
        logging_settings["file"] = ""
    return validate_config(config)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Runs the tool and returns the process exit code."""
    load_dotenv(dotenv_path=USER_CONFIG_DIR / ".env")

    args = build_parser().parse_args(argv)
    try:
        config = apply_cli_overrides(load_config(args.config), args)
    except ConfigError as e:
        print(f"reflow: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(config)
    dry_run = args.dry_run or args.check
    logger.debug("Starting reflow %s on %s (dry run: %s).", __version__, args.paths, dry_run)

    formatter_settings = config["formatter"]
    formatter = BlackFormatter(formatter_settings["command"], formatter_settings["timeout"])
    if not formatter.is_available():
        logger.warning(
            "Formatter '%s' is not available in PATH; commented-out print statements "
            "will not be reformatted (install it with 'pip install black').",
            formatter.command[0],
        )

    reflower = Reflower.from_config(config, formatter=formatter, dry_run=dry_run)
    summary = reflower.process_paths(args.paths)

    for report in summary.reports:
        prefix = "[dry run] " if dry_run and not report.failed else ""
        stream = sys.stderr if report.failed else sys.stdout
        print(f"{prefix}{report.summary()}", file=stream)
    print(summary.summary())

    if summary.files_failed:
        return EXIT_FAILURE
    if args.check and summary.files_changed:
        return EXIT_FAILURE
    return EXIT_OK


def start() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("reflow: interrupted", file=sys.stderr)
        sys.exit(130)
