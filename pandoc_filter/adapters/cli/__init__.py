# pandoc_filter/adapters/cli/__init__.py

"""CLI adapter"""

# Local imports
from pandoc_filter.adapters.cli.main import identity
from pandoc_filter.adapters.cli.main import main
from pandoc_filter.adapters.cli.main import resolve_transform
from pandoc_filter.adapters.cli.main import run_filter
from pandoc_filter.adapters.cli.parser import create_argument_parser

__all__ = [
    "create_argument_parser",
    "identity",
    "main",
    "resolve_transform",
    "run_filter",
]
