# pandoc_filter/core/domain/enums.py

"""Closed enumerations of the document model

Each member's value is the variant name used on the wire. Members are nullary
variants, so they travel as ``{"t": <value>, "c": []}``.
"""

# Standard library imports
from enum import Enum


class Alignment(Enum):
    """Alignment of a table column"""

    ALIGN_LEFT = "AlignLeft"
    ALIGN_RIGHT = "AlignRight"
    ALIGN_CENTER = "AlignCenter"
    ALIGN_DEFAULT = "AlignDefault"


class ListNumberStyle(Enum):
    """Style of list numbers"""

    DEFAULT_STYLE = "DefaultStyle"
    EXAMPLE = "Example"
    DECIMAL = "Decimal"
    LOWER_ROMAN = "LowerRoman"
    UPPER_ROMAN = "UpperRoman"
    LOWER_ALPHA = "LowerAlpha"
    UPPER_ALPHA = "UpperAlpha"


class ListNumberDelim(Enum):
    """Delimiter of list numbers"""

    DEFAULT_DELIM = "DefaultDelim"
    PERIOD = "Period"
    ONE_PAREN = "OneParen"
    TWO_PARENS = "TwoParens"


class QuoteType(Enum):
    """Type of quotation marks to use in a Quoted inline"""

    SINGLE_QUOTE = "SingleQuote"
    DOUBLE_QUOTE = "DoubleQuote"


class MathType(Enum):
    """Display or inline math"""

    DISPLAY_MATH = "DisplayMath"
    INLINE_MATH = "InlineMath"


class CitationMode(Enum):
    """How a citation is rendered relative to the author name"""

    AUTHOR_IN_TEXT = "AuthorInText"
    SUPPRESS_AUTHOR = "SuppressAuthor"
    NORMAL_CITATION = "NormalCitation"
