# pandoc_filter/core/domain/document.py

"""Document model: metadata, blocks, inlines and their leaf types

Every tagged-union variant is its own frozen pydantic model; the unions
``Block``, ``Inline`` and ``MetaValue`` are discriminated by variant name.
Field declaration order is the order of the payload array on the wire.

Transforms match on the variant classes::

    match block:
        case Header(level=1, content=content):
            ...
        case Para() | Plain():
            ...
"""

from __future__ import annotations

# Standard library imports
from typing import Annotated

# Third party imports
from pydantic import BeforeValidator
from pydantic import ConfigDict
from pydantic import Discriminator
from pydantic import Field
from pydantic import RootModel
from pydantic import StrictBool
from pydantic import StrictFloat
from pydantic import StrictInt
from pydantic import StrictStr
from pydantic import Tag
from pydantic_core import PydanticCustomError

# Local imports
from pandoc_filter.core.domain.enums import Alignment
from pandoc_filter.core.domain.enums import CitationMode
from pandoc_filter.core.domain.enums import ListNumberDelim
from pandoc_filter.core.domain.enums import ListNumberStyle
from pandoc_filter.core.domain.enums import MathType
from pandoc_filter.core.domain.enums import QuoteType
from pandoc_filter.core.domain.tagged import DocumentNode
from pandoc_filter.core.domain.tagged import PositionalRecord
from pandoc_filter.core.domain.tagged import TaggedVariant
from pandoc_filter.core.domain.tagged import unwrap_enum_tag
from pandoc_filter.core.domain.tagged import variant_tag

# Enumerations travel as nullary tag wrappers ({"t": <Name>, "c": []})
AlignmentValue = Annotated[Alignment, BeforeValidator(unwrap_enum_tag)]
ListNumberStyleValue = Annotated[ListNumberStyle, BeforeValidator(unwrap_enum_tag)]
ListNumberDelimValue = Annotated[ListNumberDelim, BeforeValidator(unwrap_enum_tag)]
QuoteTypeValue = Annotated[QuoteType, BeforeValidator(unwrap_enum_tag)]
MathTypeValue = Annotated[MathType, BeforeValidator(unwrap_enum_tag)]
CitationModeValue = Annotated[CitationMode, BeforeValidator(unwrap_enum_tag)]


def _require_number(value: object) -> object:
    # bool is an int subclass; a width must be a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError(
            "number_type", "Input should be a number, got {found}", {"found": repr(value)}
        )
    return value


# Relative column width; integers stay integers so they encode unchanged
ColumnWidth = Annotated[StrictInt | StrictFloat, BeforeValidator(_require_number)]


# ---------------------------------------------------------------------------
# Leaf and auxiliary types
# ---------------------------------------------------------------------------


class Format(RootModel[StrictStr]):
    """Raw content format (``html``, ``latex``, ...), a bare string on the wire"""

    # RootModel does not accept the "extra" setting of the shared config
    model_config = ConfigDict(frozen=True)


class Attr(PositionalRecord):
    """Attributes: identifier, classes, key-value pairs"""

    identifier: StrictStr = ""
    classes: list[StrictStr] = Field(default_factory=list)
    attributes: list[tuple[StrictStr, StrictStr]] = Field(default_factory=list)


class Target(PositionalRecord):
    """Link target (URL, title)"""

    url: StrictStr
    title: StrictStr = ""


class ListAttributes(PositionalRecord):
    """Start number, numbering style and delimiter of an ordered list"""

    start: StrictInt = 1
    style: ListNumberStyleValue = ListNumberStyle.DEFAULT_STYLE
    delim: ListNumberDelimValue = ListNumberDelim.DEFAULT_DELIM


class DefinitionItem(PositionalRecord):
    """One term of a definition list with its definitions (each a list of blocks)"""

    term: list[Inline]
    definitions: list[list[Block]]


class Citation(DocumentNode):
    """A single citation inside a Cite inline; keyed by the external field names"""

    citation_id: StrictStr = Field(alias="citationId")
    citation_prefix: list[Inline] = Field(default_factory=list, alias="citationPrefix")
    citation_suffix: list[Inline] = Field(default_factory=list, alias="citationSuffix")
    citation_mode: CitationModeValue = Field(
        default=CitationMode.NORMAL_CITATION, alias="citationMode"
    )
    citation_note_num: StrictInt = Field(default=0, alias="citationNoteNum")
    citation_hash: StrictInt = Field(default=0, alias="citationHash")


# ---------------------------------------------------------------------------
# Inline variants
# ---------------------------------------------------------------------------


class Str(TaggedVariant):
    """Text"""

    text: StrictStr


class Emph(TaggedVariant):
    """Emphasized text"""

    content: list[Inline]


class Strong(TaggedVariant):
    """Strongly emphasized text"""

    content: list[Inline]


class Strikeout(TaggedVariant):
    content: list[Inline]


class Superscript(TaggedVariant):
    content: list[Inline]


class Subscript(TaggedVariant):
    content: list[Inline]


class SmallCaps(TaggedVariant):
    content: list[Inline]


class Quoted(TaggedVariant):
    """Quoted text"""

    quote_type: QuoteTypeValue
    content: list[Inline]


class Cite(TaggedVariant):
    """Citations with their rendered text"""

    citations: list[Citation]
    content: list[Inline]


class Code(TaggedVariant):
    """Inline code (literal)"""

    attr: Attr
    text: StrictStr


class Space(TaggedVariant):
    """Inter-word space"""


class LineBreak(TaggedVariant):
    """Hard line break"""


class Math(TaggedVariant):
    """TeX math (literal)"""

    math_type: MathTypeValue
    text: StrictStr


class RawInline(TaggedVariant):
    format: Format
    text: StrictStr


class Link(TaggedVariant):
    """Hyperlink: text, target"""

    content: list[Inline]
    target: Target


class Image(TaggedVariant):
    """Image: alt text, target"""

    content: list[Inline]
    target: Target


class Note(TaggedVariant):
    """Footnote or endnote"""

    content: list[Block]


class Span(TaggedVariant):
    """Generic inline container with attributes"""

    attr: Attr
    content: list[Inline]


# ---------------------------------------------------------------------------
# Block variants
# ---------------------------------------------------------------------------


class Plain(TaggedVariant):
    """Plain text, not a paragraph"""

    content: list[Inline]


class Para(TaggedVariant):
    """Paragraph"""

    content: list[Inline]


class CodeBlock(TaggedVariant):
    """Code block (literal) with attributes"""

    attr: Attr
    text: StrictStr


class RawBlock(TaggedVariant):
    format: Format
    text: StrictStr


class BlockQuote(TaggedVariant):
    content: list[Block]


class OrderedList(TaggedVariant):
    """Ordered list: numbering attributes and items, each a list of blocks"""

    list_attributes: ListAttributes
    items: list[list[Block]]


class BulletList(TaggedVariant):
    """Bullet list: items, each a list of blocks"""

    items: list[list[Block]]


class DefinitionList(TaggedVariant):
    items: list[DefinitionItem]


class Header(TaggedVariant):
    """Header: level, attributes and text"""

    level: Annotated[StrictInt, Field(ge=1)]
    attr: Attr
    content: list[Inline]


class HorizontalRule(TaggedVariant):
    pass


class Table(TaggedVariant):
    """Table: caption, column alignments, relative column widths (0 = default),
    header cells and rows of cells
    """

    caption: list[Inline]
    alignments: list[AlignmentValue]
    widths: list[ColumnWidth]
    headers: list[TableCell]
    rows: list[list[TableCell]]


class Div(TaggedVariant):
    """Generic block container with attributes"""

    attr: Attr
    content: list[Block]


class Null(TaggedVariant):
    """Nothing"""


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


class MetaMap(TaggedVariant):
    mapping: dict[StrictStr, MetaValue]


class MetaList(TaggedVariant):
    items: list[MetaValue]


class MetaBool(TaggedVariant):
    value: StrictBool


class MetaString(TaggedVariant):
    text: StrictStr


class MetaInlines(TaggedVariant):
    content: list[Inline]


class MetaBlocks(TaggedVariant):
    content: list[Block]


class Meta(DocumentNode):
    """Document metadata: ``{"unMeta": {<key>: MetaValue}}``"""

    un_meta: dict[StrictStr, MetaValue] = Field(default_factory=dict, alias="unMeta")


class Pandoc(PositionalRecord):
    """Document root: metadata and the top-level blocks"""

    meta: Meta = Field(default_factory=Meta)
    blocks: list[Block] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Unions
# ---------------------------------------------------------------------------

Inline = Annotated[
    Annotated[Str, Tag("Str")]
    | Annotated[Emph, Tag("Emph")]
    | Annotated[Strong, Tag("Strong")]
    | Annotated[Strikeout, Tag("Strikeout")]
    | Annotated[Superscript, Tag("Superscript")]
    | Annotated[Subscript, Tag("Subscript")]
    | Annotated[SmallCaps, Tag("SmallCaps")]
    | Annotated[Quoted, Tag("Quoted")]
    | Annotated[Cite, Tag("Cite")]
    | Annotated[Code, Tag("Code")]
    | Annotated[Space, Tag("Space")]
    | Annotated[LineBreak, Tag("LineBreak")]
    | Annotated[Math, Tag("Math")]
    | Annotated[RawInline, Tag("RawInline")]
    | Annotated[Link, Tag("Link")]
    | Annotated[Image, Tag("Image")]
    | Annotated[Note, Tag("Note")]
    | Annotated[Span, Tag("Span")],
    Discriminator(variant_tag),
]

Block = Annotated[
    Annotated[Plain, Tag("Plain")]
    | Annotated[Para, Tag("Para")]
    | Annotated[CodeBlock, Tag("CodeBlock")]
    | Annotated[RawBlock, Tag("RawBlock")]
    | Annotated[BlockQuote, Tag("BlockQuote")]
    | Annotated[OrderedList, Tag("OrderedList")]
    | Annotated[BulletList, Tag("BulletList")]
    | Annotated[DefinitionList, Tag("DefinitionList")]
    | Annotated[Header, Tag("Header")]
    | Annotated[HorizontalRule, Tag("HorizontalRule")]
    | Annotated[Table, Tag("Table")]
    | Annotated[Div, Tag("Div")]
    | Annotated[Null, Tag("Null")],
    Discriminator(variant_tag),
]

MetaValue = Annotated[
    Annotated[MetaMap, Tag("MetaMap")]
    | Annotated[MetaList, Tag("MetaList")]
    | Annotated[MetaBool, Tag("MetaBool")]
    | Annotated[MetaString, Tag("MetaString")]
    | Annotated[MetaInlines, Tag("MetaInlines")]
    | Annotated[MetaBlocks, Tag("MetaBlocks")],
    Discriminator(variant_tag),
]

# Table cells are lists of blocks
TableCell = list[Block]

INLINE_VARIANTS: tuple[type[TaggedVariant], ...] = (
    Str,
    Emph,
    Strong,
    Strikeout,
    Superscript,
    Subscript,
    SmallCaps,
    Quoted,
    Cite,
    Code,
    Space,
    LineBreak,
    Math,
    RawInline,
    Link,
    Image,
    Note,
    Span,
)

BLOCK_VARIANTS: tuple[type[TaggedVariant], ...] = (
    Plain,
    Para,
    CodeBlock,
    RawBlock,
    BlockQuote,
    OrderedList,
    BulletList,
    DefinitionList,
    Header,
    HorizontalRule,
    Table,
    Div,
    Null,
)

META_VARIANTS: tuple[type[TaggedVariant], ...] = (
    MetaMap,
    MetaList,
    MetaBool,
    MetaString,
    MetaInlines,
    MetaBlocks,
)

# Resolve the forward references between the mutually recursive models
for _model in (
    DefinitionItem,
    Citation,
    *INLINE_VARIANTS,
    *BLOCK_VARIANTS,
    *META_VARIANTS,
    Meta,
    Pandoc,
):
    _model.model_rebuild()
