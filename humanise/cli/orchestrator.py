"""
CLI workflow orchestration for humanise.

Provides the CLIOrchestrator class that parses arguments, sets up logging
and dispatches to the humanise operation named by the subcommand.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from ..durations import (
    humanise_duration_from_duration_value,
    humanise_duration_from_milliseconds,
)
from ..user_config import get_user_config
from ..utils.lists import humanise_list
from ..utils.plurals import pluralize
from .arg_parser import parse_arguments


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates a single CLI invocation.

    Results are printed to stdout; log messages go to stderr.
    """

    def __init__(self, argv=None):
        """
        Initialize the orchestrator.

        Args:
            argv: Argument list to parse instead of sys.argv
        """
        self.argv = argv
        self.logger = None
        self.args = None

    def run(self) -> int:
        """
        Execute the CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)
        """
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)

        handler = getattr(self, f'_run_{self.args.command}')
        try:
            return handler()
        except (TypeError, ValueError, OverflowError) as e:
            self.logger.error(f"{self.args.command}: {e}")
            return 1

    def _use_long_words(self) -> bool:
        """Resolve word style: command-line flag first, then user config."""
        if self.args.long_words is not None:
            return self.args.long_words
        verbose = get_user_config().verbose
        self.logger.debug(f"Word style from user config: verbose={verbose}")
        return verbose

    def _run_duration(self) -> int:
        print(humanise_duration_from_milliseconds(self.args.milliseconds, self._use_long_words()))
        return 0

    def _run_timedelta(self) -> int:
        duration = timedelta(
            weeks=self.args.weeks,
            days=self.args.days,
            hours=self.args.hours,
            minutes=self.args.minutes,
            seconds=self.args.seconds,
            milliseconds=self.args.milliseconds,
            microseconds=self.args.microseconds,
        )
        print(humanise_duration_from_duration_value(duration, self._use_long_words()))
        return 0

    def _run_list(self) -> int:
        print(humanise_list(self.args.items))
        return 0

    def _run_plural(self) -> int:
        print(pluralize(self.args.count, self.args.word, self.args.opposite))
        return 0

    def _run_config(self) -> int:
        config = get_user_config()

        if self.args.init:
            if not config.create_example_config():
                print("✗ Failed to create configuration file.")
                return 1
            print("✓ Created example configuration file at:")
            print(f"  {config.config_file_path}")
            return 0

        print(f"Configuration file: {config.config_file_path}")
        if config.config_file_path.exists():
            print("Status: ✓ Found")
        else:
            print("Status: ✗ Not found (using defaults)")
            print("\nRun 'humanise config --init' to create one.")

        print("\nCurrent settings:")
        print(f"  verbose: {config.verbose}")
        return 0


__all__ = ['CLIOrchestrator', 'setup_logging']
