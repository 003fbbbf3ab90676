# pandoc_filter/application/codec/_decoder.py

"""Typed decoding: normalized generic JSON to document model values"""

# Standard library imports
from collections.abc import Sequence
from logging import getLogger

# Third party imports
from pydantic import TypeAdapter
from pydantic import ValidationError

# Local imports
from pandoc_filter.application.codec._normalize import CONTENT_KEY
from pandoc_filter.application.codec._normalize import normalize_tags
from pandoc_filter.core.domain.document import Attr
from pandoc_filter.core.domain.document import BLOCK_VARIANTS
from pandoc_filter.core.domain.document import DefinitionItem
from pandoc_filter.core.domain.document import INLINE_VARIANTS
from pandoc_filter.core.domain.document import ListAttributes
from pandoc_filter.core.domain.document import META_VARIANTS
from pandoc_filter.core.domain.document import MetaMap
from pandoc_filter.core.domain.document import Pandoc
from pandoc_filter.core.domain.document import Target
from pandoc_filter.core.domain.errors import DecodeError
from pandoc_filter.core.domain.errors import DecodeErrorKind
from pandoc_filter.core.domain.tagged import TaggedVariant
from pandoc_filter.core.types.json import JSONPath
from pandoc_filter.core.types.json import JSONType

logger = getLogger(__name__)

# Deepest JSON nesting accepted by the decoders. The typed layers (decoding,
# walk, encoding) recurse per level, and this keeps them inside the default
# interpreter recursion limit.
MAX_NESTING_DEPTH = 400

_VARIANTS: dict[str, type[TaggedVariant]] = {
    cls.variant_name(): cls for cls in (*INLINE_VARIANTS, *BLOCK_VARIANTS, *META_VARIANTS)
}

# Field names of the array-shaped records do not overlap, so one table serves all
_RECORD_FIELD_INDEX: dict[str, int] = {
    name: index
    for record in (Pandoc, Attr, Target, ListAttributes, DefinitionItem)
    for index, name in enumerate(record.model_fields)
}

# Keys whose value is a free-form metadata mapping
_MAPPING_KEYS = frozenset({"unMeta"})


def wire_path(loc: Sequence[str | int], data: JSONType) -> JSONPath:
    """Translate a pydantic error location into a path in the external JSON

    Pydantic reports field names and variant tags; the external document has
    ``c`` payloads and positional arrays instead. ``data`` is the normalized
    tree the error came from. Elements that cannot be followed are kept as-is.
    """
    path: list[str | int] = []
    node: object = data
    variant: type[TaggedVariant] | None = None
    in_mapping = False

    for element in loc:
        if variant is not None:
            names = tuple(variant.model_fields)
            current, variant = variant, None
            if element in names:
                in_mapping = current is MetaMap
                if len(names) > 1:
                    index = names.index(element)
                    path.append(index)
                    node = node[index] if isinstance(node, list) and index < len(node) else None
                # A single-field payload is the field value itself
                continue

        if isinstance(node, dict) and element in node:
            wrapper = not in_mapping and len(node) == 1 and element in _VARIANTS
            in_mapping = not in_mapping and not wrapper and element in _MAPPING_KEYS
            if wrapper:
                variant = _VARIANTS[element]  # type: ignore[index]
                path.append(CONTENT_KEY)
            else:
                path.append(element)
            node = node[element]
        elif isinstance(node, list) and isinstance(element, int) and 0 <= element < len(node):
            path.append(element)
            node = node[element]
            in_mapping = False
        elif isinstance(node, list) and element in _RECORD_FIELD_INDEX:
            index = _RECORD_FIELD_INDEX[element]  # type: ignore[index]
            path.append(index)
            node = node[index] if index < len(node) else None
            in_mapping = False
        else:
            path.append(element)
            node = None

    return tuple(path)


def _decode_error(error: ValidationError, data: JSONType) -> DecodeError:
    first = error.errors(include_url=False)[0]
    return DecodeError.from_validation_error(error, path=wire_path(first["loc"], data))


def decode_document(data: JSONType) -> Pandoc:
    """Decode a parsed external-format document

    The tag normalization rewrites ``data`` in place; pass a copy if the
    original tree is still needed.

    Args:
        data: Parsed JSON, ``[{"unMeta": {...}}, [Block, ...]]``

    Returns:
        The decoded document

    Raises:
        DecodeError: If the JSON does not have the document shape or is
            nested deeper than MAX_NESTING_DEPTH
    """
    normalized = normalize_tags(data, MAX_NESTING_DEPTH)
    if not isinstance(normalized, list):
        raise DecodeError(
            DecodeErrorKind.INVALID_SHAPE,
            f"document must be a [meta, blocks] array, got {type(normalized).__name__}",
        )

    try:
        document = Pandoc.model_validate(normalized)
    except ValidationError as e:
        raise _decode_error(e, normalized) from e

    logger.debug(
        f"Decoded document with {len(document.meta.un_meta)} metadata key(s) "
        f"and {len(document.blocks)} top-level block(s)"
    )
    return document


def decode_node[T](data: JSONType, node_type: type[T]) -> T:
    """Decode any fragment of a document (a Block, a list of Inline, an Attr, ...)

    ``node_type`` may be a model class, one of the unions (``Block``,
    ``Inline``, ``MetaValue``) or a container of them such as ``list[Inline]``.
    Like decode_document, ``data`` is normalized in place.

    Raises:
        DecodeError: If the fragment does not have the requested shape
    """
    normalized = normalize_tags(data, MAX_NESTING_DEPTH)
    try:
        return TypeAdapter(node_type).validate_python(normalized)
    except ValidationError as e:
        raise _decode_error(e, normalized) from e
