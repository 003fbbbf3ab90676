# pandoc_filter/adapters/cli/main.py

"""
Command-line interface for running document filters

Reads a document from stdin, applies a transform through the filter entry
point and writes the result to stdout. Diagnostics go to stderr only.
"""

# Standard library imports
from argparse import Namespace
from collections.abc import Sequence
from importlib import import_module
from logging import getLogger
from sys import stdin as sys_stdin
from sys import stdout as sys_stdout
from typing import TextIO

# Local imports
from pandoc_filter.adapters.cli.parser import create_argument_parser
from pandoc_filter.application.filter import Transform
from pandoc_filter.application.filter import filter as run_document_filter
from pandoc_filter.core.domain.document import Pandoc
from pandoc_filter.core.domain.errors import PandocFilterError
from pandoc_filter.infrastructure.config import ConfigLoader
from pandoc_filter.infrastructure.config import get_config
from pandoc_filter.infrastructure.logging import setup_logging

logger = getLogger(__name__)


def identity(document: Pandoc) -> Pandoc:
    """Default transform: return the document unchanged"""
    return document


def resolve_transform(reference: str) -> Transform:
    """Import a transform given as ``package.module:callable``

    Raises:
        ValueError: If the reference is malformed or the attribute is not callable
        ImportError: If the module cannot be imported
    """
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Transform must be given as MODULE:CALLABLE, got {reference!r}")

    target: object = import_module(module_name)
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ValueError(f"{module_name} has no attribute {attribute!r}") from e

    if not callable(target):
        raise ValueError(f"{reference} is not callable")
    return target  # type: ignore[return-value]


def _configure(args: Namespace) -> ConfigLoader:
    config = get_config(args.config)
    log_level = args.log_level or config.logging.effective_level
    log_file = args.log_file or config.logging.log_file
    setup_logging(log_file=log_file, log_level=log_level, silent=args.silent)
    if args.format:
        logger.debug(f"Target format: {args.format}")
    return config


def _run(
    transform: Transform,
    config: ConfigLoader,
    stdin: TextIO | None,
    stdout: TextIO | None,
) -> int:
    output_options = config.output

    if stdin is None:
        input_text = sys_stdin.buffer.read().decode("utf-8")
    else:
        input_text = stdin.read()

    try:
        result = run_document_filter(input_text, transform, output=output_options)
    except PandocFilterError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    if stdout is None:
        sys_stdout.buffer.write(result.encode("utf-8"))
        sys_stdout.buffer.flush()
    else:
        stdout.write(result)
    return 0


def run_filter(
    transform: Transform,
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run ``transform`` as a pandoc filter script

    Intended for filter scripts::

        if __name__ == "__main__":
            raise SystemExit(run_filter(my_transform))

    Returns:
        Process exit status: 0 on success, 1 on a codec error
    """
    parser = create_argument_parser(with_transform=False)
    args = parser.parse_args(argv)
    config = _configure(args)
    return _run(transform, config, stdin, stdout)


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Main CLI entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    config = _configure(args)

    if args.transform:
        try:
            transform = resolve_transform(args.transform)
        except (ImportError, ValueError) as e:
            logger.error(f"Cannot load transform: {e}")
            return 2
        logger.info(f"Using transform {args.transform}")
    else:
        transform = identity

    return _run(transform, config, stdin, stdout)
