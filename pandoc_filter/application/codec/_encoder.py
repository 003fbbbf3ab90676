# pandoc_filter/application/codec/_encoder.py

"""Typed encoding: document model values to external-format generic JSON

The wire shapes themselves live in ``pandoc_filter.core.domain.tagged``
(``encode_model``/``encode_value``); this module is the public entry point.
"""

# Standard library imports
from logging import getLogger

# Local imports
from pandoc_filter.core.domain.document import Pandoc
from pandoc_filter.core.domain.errors import EncodeError
from pandoc_filter.core.domain.tagged import encode_model
from pandoc_filter.core.domain.tagged import encode_value
from pandoc_filter.core.types.json import JSONType

logger = getLogger(__name__)


def encode_document(document: Pandoc) -> JSONType:
    """Encode a document into the external JSON shape

    Raises:
        EncodeError: If ``document`` is not a Pandoc or holds values that do
            not fit their position (e.g. a plain string placed in a block list)
    """
    if not isinstance(document, Pandoc):
        raise EncodeError(f"Expected a Pandoc document, got {type(document).__name__}")

    try:
        encoded = encode_model(document)
    except RecursionError as e:
        # Only reachable for trees built in Python; decoding bounds the depth
        raise EncodeError("Document is nested too deeply to encode") from e

    logger.debug(f"Encoded document with {len(document.blocks)} top-level block(s)")
    return encoded


def encode_node[T](node: T, node_type: type[T] | None = None) -> JSONType:
    """Encode any fragment of a document

    Args:
        node: A model value, enumeration member or container of them
        node_type: Declared type of the fragment (``list[Inline]``, ``Block``, ...);
            inferred from ``node`` when omitted (required for bare lists)

    Raises:
        EncodeError: If the value does not fit ``node_type``
    """
    try:
        return encode_value(node, node_type if node_type is not None else type(node))
    except RecursionError as e:
        raise EncodeError("Value is nested too deeply to encode") from e
