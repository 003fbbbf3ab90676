# pandoc_filter/application/walk.py

"""Bottom-up tree rewriting for filter transforms"""

# Standard library imports
from collections.abc import Callable

# Third party imports
from pydantic import BaseModel

# Local imports
from pandoc_filter.core.domain.tagged import TaggedVariant

type WalkResult = TaggedVariant | list[TaggedVariant] | None
type WalkAction = Callable[[TaggedVariant], WalkResult]


def walk[T](node: T, action: WalkAction) -> T:
    """Rebuild a document tree, applying ``action`` to every tagged variant

    Children are rewritten before their parent, so ``action`` always sees a
    node whose descendants were already processed. ``action`` may return:

    - ``None`` to keep the node,
    - a replacement node,
    - a list of nodes, spliced into the list that contained the node
      (an empty list deletes it).

    Records (Attr, Citation, ...) and enumeration members are rebuilt but not
    passed to ``action``. The input tree is never modified.

    Example:
        def drop_emphasis(node):
            if isinstance(node, Emph):
                return node.content

        document = walk(document, drop_emphasis)
    """
    return _walk_value(node, action)  # type: ignore[return-value]


def _walk_value(value: object, action: WalkAction) -> object:
    if isinstance(value, list):
        result: list[object] = []
        for item in value:
            walked = _walk_value(item, action)
            if isinstance(item, TaggedVariant) and isinstance(walked, list):
                result.extend(walked)
            else:
                result.append(walked)
        return result

    if isinstance(value, tuple):
        return tuple(_walk_value(item, action) for item in value)

    if isinstance(value, dict):
        mapping: dict[object, object] = {}
        for key, item in value.items():
            walked = _walk_value(item, action)
            if isinstance(item, TaggedVariant) and isinstance(walked, list):
                raise TypeError(f"Cannot splice a list into mapping entry '{key}'")
            mapping[key] = walked
        return mapping

    if isinstance(value, BaseModel):
        updates = {
            name: _walk_value(getattr(value, name), action) for name in type(value).model_fields
        }
        rebuilt = value.model_copy(update=updates)
        if isinstance(rebuilt, TaggedVariant):
            replacement = action(rebuilt)
            if replacement is not None:
                return replacement
        return rebuilt

    return value
