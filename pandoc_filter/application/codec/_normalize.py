# pandoc_filter/application/codec/_normalize.py

"""Tag normalization: external ``{"t", "c"}`` wrappers to single-key objects

The external format writes every tagged-union value as
``{"t": "<VariantName>", "c": <payload>}``. The typed decoder expects
``{"<VariantName>": <payload>}`` instead. This pass rewrites the generic JSON
tree accordingly, before any typed decoding happens.

Closed-world assumption: an object with exactly the two keys ``t`` and ``c``
is ALWAYS treated as a tag wrapper, at any depth. The external format only
produces such objects at union positions, so ordinary objects (metadata maps,
citation records) are left alone unless they happen to consist of exactly
those two keys. Such an object is misread as a wrapper; if its ``t`` is not a
string this surfaces as a MALFORMED_TAG error rather than being passed through.
"""

# Standard library imports
from logging import getLogger

# Local imports
from pandoc_filter.core.domain.errors import DecodeError
from pandoc_filter.core.domain.errors import DecodeErrorKind
from pandoc_filter.core.types.json import JSONDict
from pandoc_filter.core.types.json import JSONList
from pandoc_filter.core.types.json import JSONPath
from pandoc_filter.core.types.json import JSONType

logger = getLogger(__name__)

TAG_KEY = "t"
CONTENT_KEY = "c"


def is_tag_wrapper(node: JSONDict) -> bool:
    """True when an object has exactly the keys ``t`` and ``c``"""
    return len(node) == 2 and TAG_KEY in node and CONTENT_KEY in node


def normalize_tags(data: JSONType, max_depth: int | None = None) -> JSONType:
    """Rewrite every tag wrapper in a parsed JSON tree, in place

    Arrays and objects are modified in place and the (possibly same) root is
    returned. Traversal uses an explicit stack, so nesting depth is not limited
    by the interpreter's recursion limit.

    Args:
        data: Parsed JSON value (e.g. from ``json.loads``)
        max_depth: Deepest nesting level accepted (the root is level 0); None
            for no limit

    Returns:
        The normalized tree

    Raises:
        DecodeError: MALFORMED_TAG if a wrapper's ``t`` is not a string;
            INVALID_SHAPE if a value is nested deeper than ``max_depth``
    """
    root: JSONList = [data]
    # (container, key in container, path of the value in the original input)
    stack: list[tuple[JSONList | JSONDict, int | str, JSONPath]] = [(root, 0, ())]
    wrappers = 0

    while stack:
        container, key, path = stack.pop()
        node = container[key]  # type: ignore[index]

        if max_depth is not None and len(path) > max_depth:
            raise DecodeError(
                DecodeErrorKind.INVALID_SHAPE,
                f"value is nested deeper than {max_depth} levels",
                path,
            )

        if isinstance(node, list):
            for index in range(len(node) - 1, -1, -1):
                stack.append((node, index, (*path, index)))

        elif isinstance(node, dict):
            if is_tag_wrapper(node):
                tag = node[TAG_KEY]
                if not isinstance(tag, str):
                    raise DecodeError(
                        DecodeErrorKind.MALFORMED_TAG,
                        f"tag must be a string, got {type(tag).__name__}",
                        (*path, TAG_KEY),
                    )
                payload = node.pop(CONTENT_KEY)
                del node[TAG_KEY]
                node[tag] = payload
                wrappers += 1
                stack.append((node, tag, (*path, CONTENT_KEY)))
            else:
                for child_key in reversed(list(node)):
                    stack.append((node, child_key, (*path, child_key)))

    logger.debug(f"Normalized {wrappers} tag wrapper(s)")
    return root[0]
