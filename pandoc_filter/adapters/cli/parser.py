# pandoc_filter/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from pandoc_filter.infrastructure.config import DEFAULT_CONFIG_FILENAME
from pandoc_filter.infrastructure.config._models import LOG_LEVELS


def create_argument_parser(with_transform: bool = True) -> ArgumentParser:
    """Create and configure argument parser with all CLI options

    Args:
        with_transform: Offer ``--transform``; filter scripts that bring their
            own transform leave it out
    """
    parser = ArgumentParser(
        description=(
            "Read a pandoc JSON document from stdin, apply a transform "
            "and write the result to stdout"
        ),
        epilog="Use as: pandoc input.md --filter pandoc-filter -o output.html",
    )

    # pandoc passes the target format as the first argument to every filter
    parser.add_argument(
        "format", nargs="?", default=None, help="Target output format passed by pandoc"
    )

    if with_transform:
        parser.add_argument(
            "--transform",
            "-t",
            default=None,
            metavar="MODULE:CALLABLE",
            help="Transform to apply (default: identity, i.e. re-encode the document)",
        )

    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help=f"Path to JSON configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
    )

    # Logging options
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Console log level (default: from config, WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="Also write a DEBUG log to this file")
    parser.add_argument(
        "--silent", action="store_true", help="Suppress console logging entirely"
    )

    return parser
