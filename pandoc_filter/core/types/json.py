# pandoc_filter/core/types/json.py

"""JSON type definitions for the generic (untyped) side of the codec."""

# JSON Type Usage Guide:
# - JSONDict: objects, e.g. a tag wrapper or the unMeta map
# - JSONList: arrays, e.g. a tuple payload or a block list
# - JSONType: any node of a parsed document
# - JSONPath: the key/index chain leading to a node, used in error reports

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

type JSONPath = tuple[str | int, ...]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList", "JSONPath"]
