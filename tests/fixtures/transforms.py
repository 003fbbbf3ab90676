# tests/fixtures/transforms.py

"""Transforms importable by the CLI tests"""

# Local imports
from pandoc_filter import Pandoc
from pandoc_filter import Str
from pandoc_filter import walk


def uppercase(document: Pandoc) -> Pandoc:
    """Upper-case every Str"""
    return walk(document, lambda node: Str(node.text.upper()) if isinstance(node, Str) else None)


def failing(document: Pandoc) -> Pandoc:
    raise RuntimeError("transform failed")


NOT_CALLABLE = 42
