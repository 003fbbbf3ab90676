# pandoc_filter/core/domain/__init__.py

"""Document model and codec error types"""

# Local imports
from pandoc_filter.core.domain.document import BLOCK_VARIANTS
from pandoc_filter.core.domain.document import INLINE_VARIANTS
from pandoc_filter.core.domain.document import META_VARIANTS
from pandoc_filter.core.domain.document import Attr
from pandoc_filter.core.domain.document import Block
from pandoc_filter.core.domain.document import BlockQuote
from pandoc_filter.core.domain.document import BulletList
from pandoc_filter.core.domain.document import Citation
from pandoc_filter.core.domain.document import Cite
from pandoc_filter.core.domain.document import Code
from pandoc_filter.core.domain.document import CodeBlock
from pandoc_filter.core.domain.document import DefinitionItem
from pandoc_filter.core.domain.document import DefinitionList
from pandoc_filter.core.domain.document import Div
from pandoc_filter.core.domain.document import Emph
from pandoc_filter.core.domain.document import Format
from pandoc_filter.core.domain.document import Header
from pandoc_filter.core.domain.document import HorizontalRule
from pandoc_filter.core.domain.document import Image
from pandoc_filter.core.domain.document import Inline
from pandoc_filter.core.domain.document import LineBreak
from pandoc_filter.core.domain.document import Link
from pandoc_filter.core.domain.document import ListAttributes
from pandoc_filter.core.domain.document import Math
from pandoc_filter.core.domain.document import Meta
from pandoc_filter.core.domain.document import MetaBlocks
from pandoc_filter.core.domain.document import MetaBool
from pandoc_filter.core.domain.document import MetaInlines
from pandoc_filter.core.domain.document import MetaList
from pandoc_filter.core.domain.document import MetaMap
from pandoc_filter.core.domain.document import MetaString
from pandoc_filter.core.domain.document import MetaValue
from pandoc_filter.core.domain.document import Note
from pandoc_filter.core.domain.document import Null
from pandoc_filter.core.domain.document import OrderedList
from pandoc_filter.core.domain.document import Pandoc
from pandoc_filter.core.domain.document import Para
from pandoc_filter.core.domain.document import Plain
from pandoc_filter.core.domain.document import Quoted
from pandoc_filter.core.domain.document import RawBlock
from pandoc_filter.core.domain.document import RawInline
from pandoc_filter.core.domain.document import SmallCaps
from pandoc_filter.core.domain.document import Space
from pandoc_filter.core.domain.document import Span
from pandoc_filter.core.domain.document import Str
from pandoc_filter.core.domain.document import Strikeout
from pandoc_filter.core.domain.document import Strong
from pandoc_filter.core.domain.document import Subscript
from pandoc_filter.core.domain.document import Superscript
from pandoc_filter.core.domain.document import Table
from pandoc_filter.core.domain.document import TableCell
from pandoc_filter.core.domain.document import Target
from pandoc_filter.core.domain.enums import Alignment
from pandoc_filter.core.domain.enums import CitationMode
from pandoc_filter.core.domain.enums import ListNumberDelim
from pandoc_filter.core.domain.enums import ListNumberStyle
from pandoc_filter.core.domain.enums import MathType
from pandoc_filter.core.domain.enums import QuoteType
from pandoc_filter.core.domain.errors import DecodeError
from pandoc_filter.core.domain.errors import DecodeErrorKind
from pandoc_filter.core.domain.errors import EncodeError
from pandoc_filter.core.domain.errors import PandocFilterError
from pandoc_filter.core.domain.errors import ParseError
from pandoc_filter.core.domain.tagged import TaggedVariant

__all__ = [
    # Root and metadata
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
    "TaggedVariant",
    "BLOCK_VARIANTS",
    "INLINE_VARIANTS",
    "META_VARIANTS",
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
]
