# pandoc_filter/core/domain/errors.py

"""Error types raised by the codec and the filter entry point

Errors raised by a caller-supplied transform are never wrapped in these types.
"""

# Standard library imports
from enum import Enum

# Third party imports
from pydantic import ValidationError

# Local imports
from pandoc_filter.core.types.json import JSONPath


def format_path(path: JSONPath) -> str:
    """Render a key/index chain as ``$[1][0].c[2]``"""
    parts = ["$"]
    for element in path:
        if isinstance(element, int):
            parts.append(f"[{element}]")
        else:
            parts.append(f".{element}")
    return "".join(parts)


class PandocFilterError(Exception):
    """Base class for every codec failure"""


class ParseError(PandocFilterError):
    """Input text is not valid JSON"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class DecodeErrorKind(Enum):
    """Sub-kinds of DecodeError"""

    MALFORMED_TAG = "malformed_tag"  # {"t", "c"} wrapper whose "t" is not a string
    UNKNOWN_VARIANT = "unknown_variant"  # variant name outside the closed set
    ARITY_MISMATCH = "arity_mismatch"  # payload shape does not match the variant arity
    INVALID_SHAPE = "invalid_shape"  # any other type or structure mismatch


# Pydantic error types that map to a specific kind; everything else is INVALID_SHAPE
_KIND_BY_ERROR_TYPE = {
    "union_tag_invalid": DecodeErrorKind.UNKNOWN_VARIANT,
    "enum": DecodeErrorKind.UNKNOWN_VARIANT,
    "arity_mismatch": DecodeErrorKind.ARITY_MISMATCH,
}


class DecodeError(PandocFilterError):
    """JSON is valid but does not match the expected document shape

    Attributes:
        kind: Which shape rule was violated
        path: Key/index chain of the offending value
        error_count: Number of problems found (only the first is reported in the message)
    """

    def __init__(
        self,
        kind: DecodeErrorKind,
        message: str,
        path: JSONPath = (),
        error_count: int = 1,
    ):
        self.kind = kind
        self.path = path
        self.error_count = error_count
        self.detail = message
        text = f"{kind.value} at {format_path(path)}: {message}"
        if error_count > 1:
            text += f" (and {error_count - 1} more error(s))"
        super().__init__(text)

    @property
    def location(self) -> str:
        """The offending path rendered as a string"""
        return format_path(self.path)

    @classmethod
    def from_validation_error(
        cls, error: ValidationError, path: JSONPath | None = None
    ) -> "DecodeError":
        """Translate a pydantic ValidationError; the first error decides kind and path

        Args:
            error: The pydantic error
            path: Location in the external JSON; the pydantic location when None
        """
        details = error.errors(include_url=False)
        first = details[0]
        kind = _KIND_BY_ERROR_TYPE.get(first["type"], DecodeErrorKind.INVALID_SHAPE)
        if path is None:
            path = tuple(first["loc"])
        return cls(kind, first["msg"], path, error_count=len(details))


class EncodeError(PandocFilterError):
    """A value could not be serialized back into the external format

    Attributes:
        path: Key/index chain of the offending value in the output
    """

    def __init__(self, message: str, path: JSONPath = ()):
        self.path = path
        self.detail = message
        if path:
            message = f"{message} at {format_path(path)}"
        super().__init__(message)
