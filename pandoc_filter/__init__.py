# pandoc_filter/__init__.py

"""Pandoc document filter toolkit

A typed model of the pandoc JSON document tree and a codec between that model
and pandoc's ``{"t": ..., "c": ...}`` wire format, plus a filter entry point:

    from pandoc_filter import Emph, filter, walk

    def drop_emphasis(document):
        return walk(document, lambda node: node.content if isinstance(node, Emph) else None)

    output_text = filter(input_text, drop_emphasis)
"""

# Local imports
# Entry points
from pandoc_filter.adapters.cli import run_filter
from pandoc_filter.application.codec import decode_document
from pandoc_filter.application.codec import decode_node
from pandoc_filter.application.codec import encode_document
from pandoc_filter.application.codec import encode_node
from pandoc_filter.application.codec import normalize_tags
from pandoc_filter.application.filter import filter
from pandoc_filter.application.walk import walk

# Document model
from pandoc_filter.core.domain import Alignment
from pandoc_filter.core.domain import Attr
from pandoc_filter.core.domain import Block
from pandoc_filter.core.domain import BlockQuote
from pandoc_filter.core.domain import BulletList
from pandoc_filter.core.domain import Citation
from pandoc_filter.core.domain import CitationMode
from pandoc_filter.core.domain import Cite
from pandoc_filter.core.domain import Code
from pandoc_filter.core.domain import CodeBlock
from pandoc_filter.core.domain import DefinitionItem
from pandoc_filter.core.domain import DefinitionList
from pandoc_filter.core.domain import Div
from pandoc_filter.core.domain import Emph
from pandoc_filter.core.domain import Format
from pandoc_filter.core.domain import Header
from pandoc_filter.core.domain import HorizontalRule
from pandoc_filter.core.domain import Image
from pandoc_filter.core.domain import Inline
from pandoc_filter.core.domain import LineBreak
from pandoc_filter.core.domain import Link
from pandoc_filter.core.domain import ListAttributes
from pandoc_filter.core.domain import ListNumberDelim
from pandoc_filter.core.domain import ListNumberStyle
from pandoc_filter.core.domain import Math
from pandoc_filter.core.domain import MathType
from pandoc_filter.core.domain import Meta
from pandoc_filter.core.domain import MetaBlocks
from pandoc_filter.core.domain import MetaBool
from pandoc_filter.core.domain import MetaInlines
from pandoc_filter.core.domain import MetaList
from pandoc_filter.core.domain import MetaMap
from pandoc_filter.core.domain import MetaString
from pandoc_filter.core.domain import MetaValue
from pandoc_filter.core.domain import Note
from pandoc_filter.core.domain import Null
from pandoc_filter.core.domain import OrderedList
from pandoc_filter.core.domain import Pandoc
from pandoc_filter.core.domain import Para
from pandoc_filter.core.domain import Plain
from pandoc_filter.core.domain import QuoteType
from pandoc_filter.core.domain import Quoted
from pandoc_filter.core.domain import RawBlock
from pandoc_filter.core.domain import RawInline
from pandoc_filter.core.domain import SmallCaps
from pandoc_filter.core.domain import Space
from pandoc_filter.core.domain import Span
from pandoc_filter.core.domain import Str
from pandoc_filter.core.domain import Strikeout
from pandoc_filter.core.domain import Strong
from pandoc_filter.core.domain import Subscript
from pandoc_filter.core.domain import Superscript
from pandoc_filter.core.domain import Table
from pandoc_filter.core.domain import TableCell
from pandoc_filter.core.domain import Target

# Errors
from pandoc_filter.core.domain import DecodeError
from pandoc_filter.core.domain import DecodeErrorKind
from pandoc_filter.core.domain import EncodeError
from pandoc_filter.core.domain import PandocFilterError
from pandoc_filter.core.domain import ParseError

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Entry points
    "filter",
    "run_filter",
    "walk",
    # Codec
    "decode_document",
    "decode_node",
    "encode_document",
    "encode_node",
    "normalize_tags",
    # Document root and metadata
    "Pandoc",
    "Meta",
    "MetaValue",
    "MetaMap",
    "MetaList",
    "MetaBool",
    "MetaString",
    "MetaInlines",
    "MetaBlocks",
    # Blocks
    "Block",
    "Plain",
    "Para",
    "CodeBlock",
    "RawBlock",
    "BlockQuote",
    "OrderedList",
    "BulletList",
    "DefinitionList",
    "DefinitionItem",
    "Header",
    "HorizontalRule",
    "Table",
    "TableCell",
    "Div",
    "Null",
    # Inlines
    "Inline",
    "Str",
    "Emph",
    "Strong",
    "Strikeout",
    "Superscript",
    "Subscript",
    "SmallCaps",
    "Quoted",
    "Cite",
    "Code",
    "Space",
    "LineBreak",
    "Math",
    "RawInline",
    "Link",
    "Image",
    "Note",
    "Span",
    # Leaf types
    "Attr",
    "Target",
    "Format",
    "ListAttributes",
    "Citation",
    # Enumerations
    "Alignment",
    "ListNumberStyle",
    "ListNumberDelim",
    "QuoteType",
    "MathType",
    "CitationMode",
    # Errors
    "PandocFilterError",
    "ParseError",
    "DecodeError",
    "DecodeErrorKind",
    "EncodeError",
    # Version
    "__version__",
]
