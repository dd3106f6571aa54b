"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
humanise command-line interface.
"""

from __future__ import annotations

import argparse

from .. import __version__


def _non_negative_int(value: str) -> int:
    """argparse type for counts that must be zero or more."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def _add_word_style_options(parser: argparse.ArgumentParser) -> None:
    """Add the mutually exclusive --short/--long unit word options."""
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        '-s', '--short',
        action='store_const',
        const=False,
        dest='long_words',
        help='Abbreviate minutes, seconds and milliseconds (min, secs, ms)'
    )
    group.add_argument(
        '-l', '--long',
        action='store_const',
        const=True,
        dest='long_words',
        help='Use full unit words'
    )
    parser.set_defaults(long_words=None)


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance

    Notes:
        - One subcommand per library operation, plus 'config'
        - When neither --short nor --long is given, the word style comes
          from the user configuration
    """
    parser = argparse.ArgumentParser(
        prog='humanise',
        description='Convert raw numbers and lists into natural English',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s duration 62345
      1 minute, 2 seconds, and 345 milliseconds

  %(prog)s duration 62345 --short
      1 min, 2 secs, and 345 ms

  %(prog)s timedelta --days 3 --hours 7
      3 days and 7 hours

  %(prog)s list apples bananas strawberries
      apples, bananas, and strawberries

  %(prog)s plural 5 apple
      apples

  %(prog)s config --init
      Create an example configuration file
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose (debug) logging'
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    # duration
    duration_parser = subparsers.add_parser(
        'duration',
        help='Humanise a duration given in milliseconds'
    )
    duration_parser.add_argument(
        'milliseconds',
        type=_non_negative_int,
        help='Total milliseconds in the duration'
    )
    _add_word_style_options(duration_parser)

    # timedelta
    timedelta_parser = subparsers.add_parser(
        'timedelta',
        help='Humanise a duration built from separate units'
    )
    for unit in ('weeks', 'days', 'hours', 'minutes', 'seconds', 'milliseconds', 'microseconds'):
        timedelta_parser.add_argument(
            f'--{unit}',
            type=float,
            default=0,
            help=f'Number of {unit}. Default: 0'
        )
    _add_word_style_options(timedelta_parser)

    # list
    list_parser = subparsers.add_parser(
        'list',
        help='Join items into an English list'
    )
    list_parser.add_argument(
        'items',
        nargs='*',
        help='Items to join, in order'
    )

    # plural
    plural_parser = subparsers.add_parser(
        'plural',
        help='Add a plural suffix to a word depending on a count'
    )
    plural_parser.add_argument(
        'count',
        type=_non_negative_int,
        help='Number of items'
    )
    plural_parser.add_argument(
        'word',
        help='Word to pluralize'
    )
    plural_parser.add_argument(
        '-o', '--opposite',
        action='store_true',
        help='Verb mode: suffix the singular instead of the plural'
    )

    # config
    config_parser = subparsers.add_parser(
        'config',
        help='Show or create the user configuration file'
    )
    config_parser.add_argument(
        '-i', '--init',
        action='store_true',
        help='Create an example configuration file'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['duration', '1234', '--short'])
        >>> args.milliseconds
        1234
        >>> args.long_words
        False
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
