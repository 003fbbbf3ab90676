# pandoc_filter/application/codec/__init__.py

"""Tag codec between the external tagged-object JSON and the document model

Decode direction: ``normalize_tags`` rewrites ``{"t", "c"}`` wrappers into
single-key objects, then pydantic decodes them into model values.
Encode direction: ``encode_model`` follows the declared field types and emits
``{"t", "c"}`` wrappers directly.
"""

# Local imports
from pandoc_filter.application.codec._decoder import MAX_NESTING_DEPTH
from pandoc_filter.application.codec._decoder import decode_document
from pandoc_filter.application.codec._decoder import decode_node
from pandoc_filter.application.codec._encoder import encode_document
from pandoc_filter.application.codec._encoder import encode_node
from pandoc_filter.application.codec._normalize import is_tag_wrapper
from pandoc_filter.application.codec._normalize import normalize_tags

__all__ = [
    "MAX_NESTING_DEPTH",
    "decode_document",
    "decode_node",
    "encode_document",
    "encode_node",
    "is_tag_wrapper",
    "normalize_tags",
]
